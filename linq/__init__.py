"""Lazy, chainable query operations over Python iterables."""

__version__ = "3.0.0"
__all__ = ["__version__"]