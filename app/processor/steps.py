from app.extraction.base import BaseExtractor
from app.extraction.parser import parse_answer
from app.logging.logger import Log
from app.pdf.base import BaseRasterizer
from app.processor.encoder import PageEncoder
from app.processor.fetcher import DocumentFetcher
from app.processor.models import PipelineStage
from app.processor.pipeline import PipelineContext, PipelineStep


class FetchStep(PipelineStep):
    stage = PipelineStage.FETCHING

    def __init__(self, fetcher: DocumentFetcher) -> None:
        self._fetcher = fetcher

    def run(self, context: PipelineContext) -> PipelineContext:
        context.document = self._fetcher.fetch(context.url)
        return context


class RasterizeStep(PipelineStep):
    stage = PipelineStage.RASTERIZING

    def __init__(self, rasterizer: BaseRasterizer) -> None:
        self._rasterizer = rasterizer

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before rasterization")
        context.artifacts = self._rasterizer.rasterize(
            context.document.content,
            context.janitor,
        )
        # the downloaded bytes are not needed past this point
        context.document = None
        return context


class EncodeStep(PipelineStep):
    stage = PipelineStage.EXTRACTING

    def __init__(self, encoder: PageEncoder) -> None:
        self._encoder = encoder

    def run(self, context: PipelineContext) -> PipelineContext:
        context.encoded_pages = self._encoder.encode_all(context.artifacts)
        Log.info(f"Encoded {len(context.encoded_pages)} page(s)")
        return context


class ExtractStep(PipelineStep):
    stage = PipelineStage.EXTRACTING

    def __init__(self, extractor: BaseExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raw_answer = self._extractor.extract(context.encoded_pages)
        context.encoded_pages = []
        return context


class ParseStep(PipelineStep):
    stage = PipelineStage.PARSING

    def run(self, context: PipelineContext) -> PipelineContext:
        context.fields = parse_answer(context.raw_answer)
        Log.info(
            f"Parsed answer: barcode={context.fields.barcode!r} "
            f"referenceNumber={context.fields.reference_number!r}"
        )
        return context
