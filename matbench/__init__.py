"""Matrix-vector multiplication benchmark for int, float and double elements."""

__version__ = "0.1.0"
__all__ = ["bench", "matrix"]