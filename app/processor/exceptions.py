class PipelineError(Exception):
    """Base exception for every stage of the analysis pipeline."""


class FetchError(PipelineError):
    """Raised when the source document cannot be downloaded."""


class ValidationError(FetchError):
    """Raised when the caller-supplied URL is missing or malformed."""


class EncodingError(PipelineError):
    """Raised when a page artifact cannot be read for transmission."""
