"""Bundled data files for rmexcept."""
