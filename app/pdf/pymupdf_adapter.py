import threading
from pathlib import Path

import pymupdf

from app.pdf.base import BaseRasterizer


class PyMuPdfAdapter(BaseRasterizer):
    """Renders PDF pages using PyMuPDF."""

    engine_name = "pymupdf"
    # PyMuPDF documents must not be used from several threads at once
    _render_lock = threading.Lock()

    def _render(self, pdf_path: Path, prefix: str) -> None:
        with pymupdf.open(str(pdf_path)) as doc:  # type: ignore[no-untyped-call]
            self._check_page_count(doc.page_count)
            for number, page in enumerate(doc, start=1):
                pixmap = page.get_pixmap(dpi=self._dpi)
                pixmap.save(str(self._output_path(prefix, number)))
