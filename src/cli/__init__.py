"""tracker - activity tracker CLI."""

__version__ = "0.1.0"
