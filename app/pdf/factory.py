from app.config.settings import Settings
from app.pdf.base import BaseRasterizer
from app.pdf.pdfplumber_adapter import PdfPlumberAdapter
from app.pdf.poppler_adapter import PopplerAdapter
from app.pdf.pymupdf_adapter import PyMuPdfAdapter


class RasterizerFactory:
    """Creates the correct PDF rasterizer based on settings."""

    ADAPTERS: dict[str, type[BaseRasterizer]] = {
        "pymupdf": PyMuPdfAdapter,
        "pdfplumber": PdfPlumberAdapter,
        "poppler": PopplerAdapter,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRasterizer:
        engine = settings.rasterizer_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown rasterizer engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls(
            work_dir=settings.artifacts_dir,
            dpi=settings.rasterizer_dpi,
            max_pages=settings.rasterizer_max_pages,
            timeout_seconds=settings.rasterizer_timeout_seconds,
        )
