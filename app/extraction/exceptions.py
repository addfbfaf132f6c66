from app.processor.exceptions import PipelineError


class ExtractionError(PipelineError):
    """Raised when the model call fails or returns nothing usable."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
