"""Height-map reading, height-based colouring and small text, byte and list helpers."""

__version__ = "0.1.0"