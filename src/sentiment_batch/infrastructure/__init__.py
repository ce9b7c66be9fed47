"""Infrastructure package."""

from sentiment_batch.infrastructure.dependency_injection import DependenciesContainer
from sentiment_batch.infrastructure.language_client import LanguageClient
from sentiment_batch.infrastructure.sentiment_processor import SentimentProcessor
from sentiment_batch.infrastructure.classifier_processor import ClassifierProcessor

__all__ = [
    "DependenciesContainer",
    "LanguageClient",
    "SentimentProcessor",
    "ClassifierProcessor",
]
