from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from app.extraction.models import ExtractedFields


class PipelineStage(str, Enum):
    """States an analysis request moves through, strictly in order."""

    IDLE = "idle"
    FETCHING = "fetching"
    RASTERIZING = "rasterizing"
    EXTRACTING = "extracting"
    PARSING = "parsing"
    CLEANING = "cleaning"
    DONE = "done"


@dataclass(frozen=True)
class SourceDocument:
    """Raw document bytes and the URL they were downloaded from."""

    url: str
    content: bytes


@dataclass(frozen=True)
class PageArtifact:
    """One rasterized page stored as a transient file."""

    index: int
    path: Path
    media_type: str = "image/png"


@dataclass(frozen=True)
class PipelineResult:
    """Terminal outcome of one analysis request."""

    success: bool
    data: ExtractedFields | None = None
    error: str | None = None
    error_type: str | None = None
    failed_stage: PipelineStage | None = None

    @classmethod
    def ok(cls, data: ExtractedFields) -> "PipelineResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: Exception, failed_stage: PipelineStage) -> "PipelineResult":
        return cls(
            success=False,
            error=str(error) or type(error).__name__,
            error_type=type(error).__name__,
            failed_stage=failed_stage,
        )
