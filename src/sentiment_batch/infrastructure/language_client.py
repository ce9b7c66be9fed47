"""Natural Language API client wrapper."""

import logging
from typing import Any

from google.api_core.exceptions import InvalidArgument
from google.cloud import language_v1

from sentiment_batch.models.errors import InvalidInputError
from sentiment_batch.models.schemas import CategoryScore, SentimentScore

logger = logging.getLogger(__name__)


def _to_invalid_input(error: InvalidArgument) -> InvalidInputError:
    """Convert an API rejection into a per-line error."""
    status_code = getattr(error.grpc_status_code, "name", None) or "INVALID_ARGUMENT"
    # Keep each error on a single CSV row
    message = " ".join(str(error.message).split())
    return InvalidInputError(status_code=status_code, message=message)


class LanguageClient:
    """Handles Natural Language API operations."""

    def __init__(self, client: Any):
        """
        Initialize Natural Language client wrapper.

        Args:
            client: language_v1.LanguageServiceClient instance.
        """
        self._client = client

    @staticmethod
    def _document(text: str) -> language_v1.Document:
        return language_v1.Document(
            content=text,
            type_=language_v1.Document.Type.PLAIN_TEXT,
        )

    def analyze_sentiment(self, text: str) -> SentimentScore:
        """
        Analyze the overall sentiment of a text.

        Args:
            text: Plain text to analyze.

        Returns:
            Document sentiment score and magnitude.

        Raises:
            InvalidInputError: If the API rejects the text (e.g. empty).
        """
        try:
            response = self._client.analyze_sentiment(
                request={"document": self._document(text)}
            )
        except InvalidArgument as e:
            logger.warning("Sentiment analysis rejected input: %s", e)
            raise _to_invalid_input(e) from e

        sentiment = response.document_sentiment
        return SentimentScore(score=sentiment.score, magnitude=sentiment.magnitude)

    def classify_text(self, text: str) -> list[CategoryScore]:
        """
        Classify a text into content categories.

        Args:
            text: Plain text to classify.

        Returns:
            Categories in the order returned by the API.

        Raises:
            InvalidInputError: If the API rejects the text (e.g. too few tokens).
        """
        try:
            response = self._client.classify_text(
                request={"document": self._document(text)}
            )
        except InvalidArgument as e:
            logger.warning("Classification rejected input: %s", e)
            raise _to_invalid_input(e) from e

        return [
            CategoryScore(name=category.name, confidence=category.confidence)
            for category in response.categories
        ]

    def close(self) -> None:
        """Close the underlying transport channel."""
        logger.debug("Closing Natural Language client")
        self._client.transport.close()
