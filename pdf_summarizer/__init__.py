"""AI PDF Summarizer: PDF text extraction and length-controlled summaries."""

__version__ = "0.1.0"
