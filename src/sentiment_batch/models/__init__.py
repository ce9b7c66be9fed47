"""Models package."""

from sentiment_batch.models.errors import InvalidInputError
from sentiment_batch.models.processor import FieldProcessor
from sentiment_batch.models.schemas import BatchSummary, CategoryScore, SentimentScore

__all__ = [
    "InvalidInputError",
    "FieldProcessor",
    "BatchSummary",
    "CategoryScore",
    "SentimentScore",
]
