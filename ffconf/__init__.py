"""Typed flag values and help text rendering for command-line programs."""

__version__ = "0.1.0"
__all__ = ["__version__"]