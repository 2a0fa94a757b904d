"""Doc comment tag parser."""

__version__ = "0.1.0"
