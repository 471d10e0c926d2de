"""Exponential, logarithm, absolute value and remainder computed from series and iteration."""

__version__ = "0.1.0"
__all__ = ["basic", "exponential"]