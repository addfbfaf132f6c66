from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from app.config.settings import Settings
from app.extraction.models import ExtractedFields
from app.main import create_app
from app.pdf.exceptions import RasterizationError
from app.processor.exceptions import ValidationError
from app.processor.models import PipelineResult, PipelineStage
from app.processor.processor import Processor


@pytest.fixture()
def processor() -> MagicMock:
    return MagicMock(spec=Processor)


@pytest.fixture()
def client(processor: MagicMock) -> TestClient:
    return TestClient(create_app(Settings(), processor=processor))


class TestHealth:
    def test_returns_ok(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "OK", "message": "API is running"}


class TestAnalyzePdf:
    def test_success_returns_data(self, client: TestClient, processor: MagicMock) -> None:
        processor.analyze.return_value = PipelineResult.ok(
            ExtractedFields(barcode="ABC123", reference_number="REF-9")
        )

        response = client.post("/api/analyze-pdf", json={"url": "https://example.com/a.pdf"})

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"barcode": "ABC123", "referenceNumber": "REF-9"},
        }
        processor.analyze.assert_called_once_with("https://example.com/a.pdf")

    def test_null_fields_are_kept(self, client: TestClient, processor: MagicMock) -> None:
        processor.analyze.return_value = PipelineResult.ok(ExtractedFields())

        response = client.post("/api/analyze-pdf", json={"url": "https://example.com/a.pdf"})

        assert response.status_code == 200
        assert response.json()["data"] == {"barcode": None, "referenceNumber": None}

    def test_validation_failure_is_400(self, client: TestClient, processor: MagicMock) -> None:
        processor.analyze.return_value = PipelineResult.fail(
            ValidationError("URL parameter is required"), PipelineStage.FETCHING
        )

        response = client.post("/api/analyze-pdf", json={})

        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "URL parameter is required"}
        processor.analyze.assert_called_once_with(None)

    def test_pipeline_failure_is_500(self, client: TestClient, processor: MagicMock) -> None:
        processor.analyze.return_value = PipelineResult.fail(
            RasterizationError("Document produced no pages"), PipelineStage.RASTERIZING
        )

        response = client.post("/api/analyze-pdf", json={"url": "https://example.com/a.pdf"})

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Document produced no pages"}

    def test_malformed_body_is_400(self, client: TestClient, processor: MagicMock) -> None:
        response = client.post(
            "/api/analyze-pdf",
            content=b"not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        processor.analyze.assert_not_called()
