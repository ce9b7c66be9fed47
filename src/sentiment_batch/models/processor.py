"""Abstract field processor base class."""

from abc import ABC, abstractmethod


class FieldProcessor(ABC):
    """Turns one line of text into a fragment of CSV fields."""

    @property
    @abstractmethod
    def field_names(self) -> str:
        """Comma-separated CSV column names contributed by this processor."""
        pass

    @property
    @abstractmethod
    def field_descriptions(self) -> str:
        """Human-readable description of each column."""
        pass

    @abstractmethod
    def process(self, text: str) -> str:
        """
        Analyze text and format the result as a CSV fragment.

        Raises:
            InvalidInputError: If the analysis service rejects the text.
        """
        pass
