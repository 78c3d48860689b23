"""tunequery: query, organize and sort media-library records."""

__version__ = "0.3.0"
