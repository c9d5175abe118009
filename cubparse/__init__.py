"""Reading and validation of .cub scene files, with small string, memory, list and I/O helpers."""

__version__ = "0.1.0"