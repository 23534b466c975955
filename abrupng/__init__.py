"""Read image brushes from Adobe ABR files and write them as greyscale PNGs."""

__version__ = "0.1.0"