"""Building blocks of a small terminal text editor: key decoding, a text buffer and screen rendering."""

__version__ = "1.0.0"