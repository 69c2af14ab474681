"""C string.h style routines (cstring) and an sscanf-like integer scanner (scan)."""

__version__ = "0.1.0"
__all__ = ["cstring", "scan"]