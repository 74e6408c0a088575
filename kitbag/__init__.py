"""Small text, number, image, compression and web utilities."""

__version__ = "0.1.0"