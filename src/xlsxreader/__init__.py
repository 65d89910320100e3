"""Read OOXML spreadsheets into plain row/column tables."""

__version__ = "0.7.0"
