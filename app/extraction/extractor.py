"""Multimodal model extractor for barcode and reference numbers."""

from pathlib import Path

from app.extraction.base import BaseExtractor
from app.extraction.client_base import BaseExtractionClient
from app.extraction.exceptions import ExtractionError
from app.extraction.prompt_loader import load_system_prompt, load_user_prompt
from app.logging.logger import Log
from app.extraction.models import EncodedPage


class Extractor(BaseExtractor):
    """Sends all page images with the extraction instructions to an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        max_completion_tokens: int = 16384,
        system_prompt_path: Path | None = None,
        user_prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._max_completion_tokens = max_completion_tokens
        self._system_prompt = load_system_prompt(system_prompt_path)
        self._user_prompt = load_user_prompt(user_prompt_path)

    def extract(self, pages: list[EncodedPage]) -> str:
        if not pages:
            raise ExtractionError("No pages to send to the model")

        Log.info(f"Sending {len(pages)} page(s) to model {self._model}")
        answer = self._client.create_chat_completion(
            model=self._model,
            system_prompt=self._system_prompt,
            user_prompt=self._user_prompt,
            images=list(pages),
            max_completion_tokens=self._max_completion_tokens,
        )
        Log.debug(f"AI raw response:\n{answer}")

        if not answer or not answer.strip():
            raise ExtractionError("Model returned an empty answer")
        return answer
