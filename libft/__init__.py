"""C-style character, memory, conversion, string, output, list and formatting helpers."""

__version__ = "1.0.0"
__all__ = ["chars", "memory", "convert", "text", "output", "linkedlist", "printf"]