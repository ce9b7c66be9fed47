"""Content classification field processor implementation."""

from sentiment_batch.infrastructure.language_client import LanguageClient
from sentiment_batch.models.processor import FieldProcessor
from sentiment_batch.services.utils import format_decimal

CLASSIFIER_DESCRIPTIONS = """\
Category confidence -> "The classifier's confidence of the category. Number represents how certain the classifier is that this category represents the given text."\
"""


class ClassifierProcessor(FieldProcessor):
    """Adds category names followed by their confidences.

    The fragment starts with a separator, so the column after the
    previous processor is left empty.
    """

    def __init__(self, language_client: LanguageClient):
        self._language_client = language_client

    @property
    def field_names(self) -> str:
        return "Categories"

    @property
    def field_descriptions(self) -> str:
        return CLASSIFIER_DESCRIPTIONS

    def process(self, text: str) -> str:
        categories = self._language_client.classify_text(text)
        fields = [category.name for category in categories]
        fields.extend(format_decimal(category.confidence) for category in categories)
        # Each field carries its own separator
        return "".join(f",{field}" for field in fields)
