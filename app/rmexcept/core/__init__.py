"""Core infrastructure for rmexcept: paths and theming."""
