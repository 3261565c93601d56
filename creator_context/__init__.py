"""Creator profile context assembly for AI prompt pipelines."""

__version__ = "0.1.0"
