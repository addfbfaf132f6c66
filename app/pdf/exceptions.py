from app.processor.exceptions import PipelineError


class RasterizationError(PipelineError):
    """Raised when a document cannot be converted into page images."""
