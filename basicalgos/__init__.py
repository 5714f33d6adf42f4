"""Classic algorithms on numbers, lists and matrices, and simple text patterns."""

__version__ = "0.1.0"
__all__ = ["searching", "sorting", "subarrays", "rearrange", "matrix", "numbers", "patterns"]