"""Reading .cub scene files, with pixel image, XPM, colour name and event helpers."""

__version__ = "0.1.0"
__all__ = ["cli", "debug", "events", "image", "rgbnames", "scene", "wordtab", "xpm"]