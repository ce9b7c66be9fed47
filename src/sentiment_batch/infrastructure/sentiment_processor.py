"""Sentiment field processor implementation."""

from sentiment_batch.infrastructure.language_client import LanguageClient
from sentiment_batch.models.processor import FieldProcessor
from sentiment_batch.services.utils import format_decimal

SENTIMENT_DESCRIPTIONS = """\
Sentiment Score -> "score of the sentiment ranges between -1.0 (negative) and 1.0 (positive) and corresponds to the overall emotional leaning of the text.",
Sentiment Magnitude -> "magnitude indicates the overall strength of emotion (both positive and negative) within the given text, between 0.0 and +inf. Unlike score, magnitude is not normalized; each expression of emotion within the text (both positive and negative) contributes to the text's magnitude (so longer text blocks may have greater magnitudes)."\
"""


class SentimentProcessor(FieldProcessor):
    """Adds the document sentiment score and magnitude."""

    def __init__(self, language_client: LanguageClient):
        self._language_client = language_client

    @property
    def field_names(self) -> str:
        return "Sentiment Score,Sentiment Magnitude"

    @property
    def field_descriptions(self) -> str:
        return SENTIMENT_DESCRIPTIONS

    def process(self, text: str) -> str:
        sentiment = self._language_client.analyze_sentiment(text)
        return f"{format_decimal(sentiment.score)},{format_decimal(sentiment.magnitude)}"
