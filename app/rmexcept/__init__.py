"""rmexcept - remove everything in a directory except the given entries."""

__version__ = "0.1.0"
