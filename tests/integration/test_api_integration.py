"""End-to-end request through HTTP, real rendering, mocked network and model."""

from pathlib import Path
from unittest.mock import MagicMock

import httpx
import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.extraction.extractor import Extractor
from app.extraction.openai_client_adapter import OpenAIClientAdapter
from app.main import create_app
from app.pdf.pymupdf_adapter import PyMuPdfAdapter
from app.processor.encoder import PageEncoder
from app.processor.fetcher import DocumentFetcher
from app.processor.processor import Processor
from app.processor.steps import EncodeStep, ExtractStep, FetchStep, ParseStep, RasterizeStep

PDF_URL = "https://files.example.com/invoice.pdf"


def _build_client(
    work_dir: Path,
    pdf_bytes: bytes,
    model_answer: str,
) -> tuple[TestClient, MagicMock, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if str(request.url) == PDF_URL:
            return httpx.Response(200, content=pdf_bytes)
        return httpx.Response(404)

    fetcher = DocumentFetcher(client=httpx.Client(transport=httpx.MockTransport(handler)))
    model_client = MagicMock(spec=OpenAIClientAdapter)
    model_client.create_chat_completion.return_value = model_answer
    processor = Processor(
        steps=[
            FetchStep(fetcher),
            RasterizeStep(PyMuPdfAdapter(work_dir=work_dir, dpi=50)),
            EncodeStep(PageEncoder()),
            ExtractStep(Extractor(client=model_client, model="gpt-4o")),
            ParseStep(),
        ]
    )
    settings = Settings(artifacts_dir=work_dir)
    return TestClient(create_app(settings, processor=processor)), model_client, requests


class TestAnalyzePdfEndToEnd:
    def test_extracts_fields_and_leaves_no_artifacts(
        self, tmp_path: Path, multi_page_pdf_bytes: bytes
    ) -> None:
        client, model_client, _requests = _build_client(
            tmp_path,
            multi_page_pdf_bytes,
            '```json\n{"barcode": "8690000000001", "referenceNumber": "REF-2024-77"}\n```',
        )

        response = client.post("/api/analyze-pdf", json={"url": PDF_URL})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"barcode": "8690000000001", "referenceNumber": "REF-2024-77"},
        }
        images = model_client.create_chat_completion.call_args.kwargs["images"]
        assert [page.index for page in images] == [1, 2, 3]
        assert all(page.media_type == "image/png" for page in images)
        assert list(tmp_path.iterdir()) == []

    def test_prose_answer_uses_text_scan(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        client, _model, _requests = _build_client(
            tmp_path,
            sample_pdf_bytes,
            "The barcode: XZ901 and referans: 44Q were found.",
        )

        response = client.post("/api/analyze-pdf", json={"url": PDF_URL})

        assert response.json()["data"] == {"barcode": "XZ901", "referenceNumber": "44Q"}

    def test_remote_404_is_reported(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        client, model_client, _requests = _build_client(tmp_path, sample_pdf_bytes, "{}")

        response = client.post(
            "/api/analyze-pdf", json={"url": "https://files.example.com/missing.pdf"}
        )

        assert response.status_code == 500
        assert "404" in response.json()["error"]
        model_client.create_chat_completion.assert_not_called()

    @pytest.mark.parametrize("body", [{}, {"url": ""}, {"url": "not-a-url"}])
    def test_bad_url_never_hits_network(
        self, tmp_path: Path, sample_pdf_bytes: bytes, body: dict[str, str]
    ) -> None:
        client, _model, requests = _build_client(tmp_path, sample_pdf_bytes, "{}")

        response = client.post("/api/analyze-pdf", json=body)

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert requests == []

    def test_non_pdf_download_fails_cleanly(self, tmp_path: Path) -> None:
        client, model_client, _requests = _build_client(tmp_path, b"<html>nope</html>", "{}")

        response = client.post("/api/analyze-pdf", json={"url": PDF_URL})

        assert response.status_code == 500
        assert response.json()["success"] is False
        model_client.create_chat_completion.assert_not_called()
        assert list(tmp_path.iterdir()) == []

    def test_model_failure_still_removes_artifacts(
        self, tmp_path: Path, multi_page_pdf_bytes: bytes
    ) -> None:
        client, model_client, _requests = _build_client(tmp_path, multi_page_pdf_bytes, "{}")
        model_client.create_chat_completion.return_value = "   "

        response = client.post("/api/analyze-pdf", json={"url": PDF_URL})

        assert response.status_code == 500
        assert response.json()["error"] == "Model returned an empty answer"
        assert list(tmp_path.iterdir()) == []
