from collections.abc import Callable

from app.config.settings import Settings
from app.extraction.factory import ExtractorFactory
from app.logging.logger import Log
from app.pdf.factory import RasterizerFactory
from app.processor.encoder import PageEncoder
from app.processor.exceptions import PipelineError
from app.processor.fetcher import DocumentFetcher
from app.processor.janitor import ArtifactJanitor
from app.processor.models import PipelineResult, PipelineStage
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import EncodeStep, ExtractStep, FetchStep, ParseStep, RasterizeStep


class Processor:
    """Orchestrates the document analysis pipeline.

    Pipeline: fetch -> rasterize -> encode -> extract -> parse, then cleanup.
    Any step failure skips the remaining steps; artifact cleanup always runs
    once, and every outcome is returned as a PipelineResult.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        janitor_factory: Callable[[], ArtifactJanitor] = ArtifactJanitor,
    ) -> None:
        self._steps = steps
        self._janitor_factory = janitor_factory

    def analyze(self, url: str | None) -> PipelineResult:
        """Run the full pipeline for one document URL."""
        Log.info(f"Analyzing document {url!r}")
        janitor = self._janitor_factory()
        context = PipelineContext(url=url, janitor=janitor)
        error: Exception | None = None
        failed_stage: PipelineStage | None = None

        with janitor:
            for step in self._steps:
                context.stage = step.stage
                try:
                    context = step.run(context)
                except PipelineError as exc:
                    Log.error(f"Pipeline failed while {step.stage.value}: {exc}")
                    error, failed_stage = exc, step.stage
                    break
                except Exception as exc:
                    Log.exception(f"Unexpected error while {step.stage.value}: {exc}")
                    error, failed_stage = exc, step.stage
                    break
            context.stage = PipelineStage.CLEANING

        context.stage = PipelineStage.DONE
        if error is not None and failed_stage is not None:
            return PipelineResult.fail(error, failed_stage)
        if context.fields is None:
            raise RuntimeError("Pipeline finished without a parse step")
        Log.info(f"Analysis of {url!r} completed")
        return PipelineResult.ok(context.fields)


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    fetcher = DocumentFetcher(
        timeout_seconds=settings.fetch_timeout_seconds,
        max_bytes=settings.fetch_max_bytes,
    )
    rasterizer = RasterizerFactory.create(settings)
    extractor = ExtractorFactory.create(settings)
    steps: list[PipelineStep] = [
        FetchStep(fetcher),
        RasterizeStep(rasterizer),
        EncodeStep(PageEncoder()),
        ExtractStep(extractor),
        ParseStep(),
    ]
    return Processor(steps=steps)
