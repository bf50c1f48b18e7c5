"""Order setup modules by their declared dependencies."""

__version__ = "0.1.0"