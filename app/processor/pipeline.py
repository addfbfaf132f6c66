from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from app.extraction.models import EncodedPage, ExtractedFields
from app.processor.janitor import ArtifactJanitor
from app.processor.models import PageArtifact, PipelineStage, SourceDocument


@dataclass(slots=True)
class PipelineContext:
    url: str | None
    janitor: ArtifactJanitor
    stage: PipelineStage = PipelineStage.IDLE
    document: SourceDocument | None = None
    artifacts: list[PageArtifact] = field(default_factory=list)
    encoded_pages: list[EncodedPage] = field(default_factory=list)
    raw_answer: str | None = None
    fields: ExtractedFields | None = None


class PipelineStep(ABC):
    stage: PipelineStage

    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
