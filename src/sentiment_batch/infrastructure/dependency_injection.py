"""Dependency injection container for the application."""

from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from sentiment_batch.config import config
from sentiment_batch.infrastructure.classifier_processor import ClassifierProcessor
from sentiment_batch.infrastructure.language_client import LanguageClient
from sentiment_batch.infrastructure.sentiment_processor import SentimentProcessor
from sentiment_batch.models.processor import FieldProcessor
from sentiment_batch.services.batch_runner import BatchRunner

PROCESSOR_TYPES = {
    "sentiment": SentimentProcessor,
    "classifier": ClassifierProcessor,
}


def _create_language_service_client():
    """Create the API client from ambient Google credentials."""
    from google.cloud import language_v1

    return language_v1.LanguageServiceClient()


def _create_processors(
    names: list[str], language_client: LanguageClient
) -> list[FieldProcessor]:
    """Instantiate processors in configured order."""
    return [PROCESSOR_TYPES[name](language_client) for name in names]


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    settings = providers.Object(config)

    # Natural Language dependency chain
    language_service_client = providers.Singleton(_create_language_service_client)

    language_client = providers.Singleton(
        LanguageClient,
        client=language_service_client,
    )

    processors = providers.Singleton(
        _create_processors,
        names=settings.provided.processor_names,
        language_client=language_client,
    )

    batch_runner = providers.Factory(
        BatchRunner,
        processors=processors,
        quota=settings.provided.quota,
    )
