import threading
from pathlib import Path

import pdfplumber

from app.pdf.base import BaseRasterizer


class PdfPlumberAdapter(BaseRasterizer):
    """Renders PDF pages using pdfplumber (pypdfium2 backend)."""

    engine_name = "pdfplumber"
    # pdfium is not thread-safe
    _render_lock = threading.Lock()

    def _render(self, pdf_path: Path, prefix: str) -> None:
        with pdfplumber.open(pdf_path) as pdf:
            self._check_page_count(len(pdf.pages))
            for number, page in enumerate(pdf.pages, start=1):
                page.to_image(resolution=self._dpi).save(
                    self._output_path(prefix, number), format="PNG"
                )
