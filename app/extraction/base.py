from abc import ABC, abstractmethod

from app.extraction.models import EncodedPage


class BaseExtractor(ABC):
    """Contract for all model-backed extractors."""

    @abstractmethod
    def extract(self, pages: list[EncodedPage]) -> str:
        """Ask the model about every page of one document in a single call.

        Args:
            pages: Encoded page images in document order. Must not be empty.

        Returns:
            The model's raw text answer.

        Raises:
            ExtractionError: on any failure, including an empty answer.
        """
