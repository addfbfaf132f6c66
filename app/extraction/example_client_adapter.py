"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from app.extraction.client_base import BaseExtractionClient
from app.extraction.models import EncodedPage


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed fenced JSON answer.

    No network calls. Useful for local development and smoke-testing the
    HTTP surface without an API key.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "barcode": None,
        "referenceNumber": None,
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        images: list[EncodedPage],
        max_completion_tokens: int,
    ) -> str:
        _ = model, system_prompt, user_prompt, images, max_completion_tokens
        return f"```json\n{json.dumps(self.DEFAULT_RESPONSE)}\n```"
