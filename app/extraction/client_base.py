from abc import ABC, abstractmethod

from app.extraction.models import EncodedPage


class BaseExtractionClient(ABC):
    """Contract for provider-specific multimodal chat clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        images: list[EncodedPage],
        max_completion_tokens: int,
    ) -> str:
        """Return provider response as plain text."""
