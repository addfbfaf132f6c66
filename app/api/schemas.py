from pydantic import BaseModel


class AnalyzeRequest(BaseModel):
    """Body of ``POST /api/analyze-pdf``.

    ``url`` is optional here so a missing value reaches the pipeline and
    is reported in the uniform error shape.
    """

    url: str | None = None


class ExtractedData(BaseModel):
    barcode: str | None = None
    referenceNumber: str | None = None


class AnalyzeResponse(BaseModel):
    success: bool
    data: ExtractedData | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    status: str = "OK"
    message: str = "API is running"
