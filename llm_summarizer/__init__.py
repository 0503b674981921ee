"""Batch summarizer: JSON datasets in, LLM-written PDF reports out."""

__version__ = "0.1.0"
