"""Tests for infrastructure layer."""

import io
from unittest.mock import MagicMock

import pytest
from dependency_injector import providers
from google.api_core.exceptions import InvalidArgument, PermissionDenied
from google.cloud import language_v1

from sentiment_batch.config import Config
from sentiment_batch.infrastructure.classifier_processor import ClassifierProcessor
from sentiment_batch.infrastructure.dependency_injection import DependenciesContainer
from sentiment_batch.infrastructure.language_client import LanguageClient
from sentiment_batch.infrastructure.sentiment_processor import SentimentProcessor
from sentiment_batch.models.errors import InvalidInputError
from sentiment_batch.models.schemas import CategoryScore, SentimentScore
from sentiment_batch.services.batch_runner import BatchRunner


def _category(name, confidence):
    category = MagicMock()
    category.name = name
    category.confidence = confidence
    return category


class TestLanguageClient:
    """Tests for LanguageClient."""

    def test_analyze_sentiment_returns_score(self):
        """Test analyze_sentiment maps the document sentiment."""
        mock_api = MagicMock()
        response = mock_api.analyze_sentiment.return_value
        response.document_sentiment.score = 0.8
        response.document_sentiment.magnitude = 1.2

        client = LanguageClient(mock_api)
        result = client.analyze_sentiment("I love this!")

        assert result == SentimentScore(score=0.8, magnitude=1.2)
        request = mock_api.analyze_sentiment.call_args.kwargs["request"]
        assert request["document"].content == "I love this!"
        assert request["document"].type_ == language_v1.Document.Type.PLAIN_TEXT

    def test_analyze_sentiment_invalid_argument(self):
        """Test analyze_sentiment raises InvalidInputError on rejection."""
        mock_api = MagicMock()
        mock_api.analyze_sentiment.side_effect = InvalidArgument(
            "The document is empty."
        )

        client = LanguageClient(mock_api)

        with pytest.raises(InvalidInputError) as exc_info:
            client.analyze_sentiment("")

        assert exc_info.value.status_code == "INVALID_ARGUMENT"
        assert exc_info.value.message == "The document is empty."

    def test_invalid_argument_message_is_single_line(self):
        """Test multi-line API messages are collapsed to one line."""
        mock_api = MagicMock()
        mock_api.analyze_sentiment.side_effect = InvalidArgument(
            "Invalid text content:\ntoo few tokens"
        )

        client = LanguageClient(mock_api)

        with pytest.raises(InvalidInputError) as exc_info:
            client.analyze_sentiment("a")

        assert exc_info.value.message == "Invalid text content: too few tokens"

    def test_analyze_sentiment_other_errors_propagate(self):
        """Test non invalid-argument errors are not translated."""
        mock_api = MagicMock()
        mock_api.analyze_sentiment.side_effect = PermissionDenied("No access")

        client = LanguageClient(mock_api)

        with pytest.raises(PermissionDenied):
            client.analyze_sentiment("text")

    def test_classify_text_keeps_response_order(self):
        """Test classify_text returns categories in API order."""
        mock_api = MagicMock()
        mock_api.classify_text.return_value.categories = [
            _category("/News", 0.6),
            _category("/Arts & Entertainment", 0.9),
        ]

        client = LanguageClient(mock_api)
        result = client.classify_text("Some long enough text about films")

        assert result == [
            CategoryScore(name="/News", confidence=0.6),
            CategoryScore(name="/Arts & Entertainment", confidence=0.9),
        ]

    def test_classify_text_invalid_argument(self):
        """Test classify_text raises InvalidInputError on rejection."""
        mock_api = MagicMock()
        mock_api.classify_text.side_effect = InvalidArgument("Too few tokens")

        client = LanguageClient(mock_api)

        with pytest.raises(InvalidInputError) as exc_info:
            client.classify_text("hi")

        assert exc_info.value.status_code == "INVALID_ARGUMENT"

    def test_close_closes_transport(self):
        """Test close closes the transport channel."""
        mock_api = MagicMock()

        LanguageClient(mock_api).close()

        mock_api.transport.close.assert_called_once()


class TestSentimentProcessor:
    """Tests for SentimentProcessor."""

    def test_field_names(self):
        """Test sentiment processor contributes two columns."""
        processor = SentimentProcessor(MagicMock(spec=LanguageClient))

        assert processor.field_names == "Sentiment Score,Sentiment Magnitude"
        assert "Sentiment Magnitude ->" in processor.field_descriptions

    def test_process_formats_score_and_magnitude(self):
        """Test process returns score and magnitude comma-joined."""
        mock_client = MagicMock(spec=LanguageClient)
        mock_client.analyze_sentiment.return_value = SentimentScore(
            score=0.8, magnitude=1.2
        )

        processor = SentimentProcessor(mock_client)

        assert processor.process("I love this!") == "0.8,1.2"
        mock_client.analyze_sentiment.assert_called_once_with("I love this!")

    def test_process_uses_single_precision_text(self):
        """Test float32 noise is not written to the CSV."""
        mock_client = MagicMock(spec=LanguageClient)
        mock_client.analyze_sentiment.return_value = SentimentScore(
            score=-0.30000001192092896, magnitude=0.0
        )

        processor = SentimentProcessor(mock_client)

        assert processor.process("meh") == "-0.3,0.0"

    def test_process_propagates_invalid_input(self):
        """Test process lets InvalidInputError through."""
        mock_client = MagicMock(spec=LanguageClient)
        mock_client.analyze_sentiment.side_effect = InvalidInputError(
            "INVALID_ARGUMENT", "The document is empty."
        )

        processor = SentimentProcessor(mock_client)

        with pytest.raises(InvalidInputError):
            processor.process("")


class TestClassifierProcessor:
    """Tests for ClassifierProcessor."""

    def test_field_names(self):
        """Test classifier processor contributes the categories column."""
        processor = ClassifierProcessor(MagicMock(spec=LanguageClient))

        assert processor.field_names == "Categories"
        assert "Category confidence" in processor.field_descriptions

    def test_process_names_then_confidences(self):
        """Test process writes all names before all confidences."""
        mock_client = MagicMock(spec=LanguageClient)
        mock_client.classify_text.return_value = [
            CategoryScore(name="/News", confidence=0.6),
            CategoryScore(name="/Sports", confidence=0.5),
        ]

        processor = ClassifierProcessor(mock_client)

        assert processor.process("Match report") == ",/News,/Sports,0.6,0.5"

    def test_process_no_categories(self):
        """Test process returns an empty fragment without categories."""
        mock_client = MagicMock(spec=LanguageClient)
        mock_client.classify_text.return_value = []

        processor = ClassifierProcessor(mock_client)

        assert processor.process("text") == ""

    def test_row_leaves_empty_column_before_categories(self):
        """Test a classifier row keeps the empty column after the input."""
        mock_client = MagicMock(spec=LanguageClient)
        mock_client.classify_text.return_value = [
            CategoryScore(name="/News", confidence=0.5),
        ]
        runner = BatchRunner(processors=[ClassifierProcessor(mock_client)], quota=10)
        output_sink = io.StringIO()

        runner.run(["headline\n"], output_sink, io.StringIO())

        assert output_sink.getvalue().splitlines() == [
            "Input,Categories",
            "headline,,/News,0.5",
        ]


class TestDependenciesContainer:
    """Tests for DependenciesContainer wiring."""

    def test_processors_follow_configured_order(self):
        """Test processors are built in configured order."""
        container = DependenciesContainer()
        container.language_service_client.override(providers.Object(MagicMock()))
        container.settings.override(
            providers.Object(Config(processors="classifier,sentiment", quota=3))
        )

        processors = container.processors()

        assert [type(p) for p in processors] == [ClassifierProcessor, SentimentProcessor]

    def test_batch_runner_uses_processors(self):
        """Test batch runner header reflects configured processors."""
        container = DependenciesContainer()
        container.language_service_client.override(providers.Object(MagicMock()))
        container.settings.override(
            providers.Object(Config(processors="sentiment", quota=3))
        )

        runner = container.batch_runner()

        assert runner.results_header == "Input,Sentiment Score,Sentiment Magnitude"

    def test_language_client_is_shared(self):
        """Test a single language client is reused."""
        container = DependenciesContainer()
        container.language_service_client.override(providers.Object(MagicMock()))

        assert container.language_client() is container.language_client()
