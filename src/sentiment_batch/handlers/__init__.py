"""Handlers package."""

from sentiment_batch.handlers.analyze import analyze_file

__all__ = ["analyze_file"]
