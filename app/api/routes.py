from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.api.schemas import AnalyzeRequest, AnalyzeResponse, ExtractedData, HealthResponse
from app.processor.exceptions import ValidationError
from app.processor.models import PipelineResult
from app.processor.processor import Processor

router = APIRouter()


def result_to_response(result: PipelineResult) -> JSONResponse:
    """Map a pipeline result to the public JSON shape and status code."""
    if result.success and result.data is not None:
        body = AnalyzeResponse(
            success=True,
            data=ExtractedData(**result.data.to_dict()),
        )
        return JSONResponse(status_code=200, content=body.model_dump(exclude_unset=True))
    status_code = 400 if result.error_type == ValidationError.__name__ else 500
    body = AnalyzeResponse(success=False, error=result.error or "Unknown error")
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_unset=True))


@router.post("/api/analyze-pdf", response_model=AnalyzeResponse)
def analyze_pdf(payload: AnalyzeRequest, request: Request) -> JSONResponse:
    processor: Processor = request.app.state.processor
    return result_to_response(processor.analyze(payload.url))


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
