"""Character, memory and string routines in the style of the classic C library."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "output", "transform"]