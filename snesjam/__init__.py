"""A small top-down delivery game on a tiled world, run headless with a text console."""

__version__ = "0.1.0"
__all__ = ["__version__"]