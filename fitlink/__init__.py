"""Split files into fixed-capacity directories of hard links."""

__version__ = "0.1.0"
