from pathlib import Path

from pdf2image import convert_from_path, pdfinfo_from_path

from app.pdf.base import BaseRasterizer


class PopplerAdapter(BaseRasterizer):
    """Renders PDF pages with poppler's pdftoppm via pdf2image.

    pdftoppm runs as a subprocess, so it is bounded by a wall-clock timeout
    and needs no render lock.
    """

    engine_name = "poppler"

    def _render(self, pdf_path: Path, prefix: str) -> None:
        info = pdfinfo_from_path(str(pdf_path), timeout=self._timeout_seconds)
        self._check_page_count(int(info.get("Pages", 0)))
        # pdftoppm names files <prefix>0001-<zero-padded page>.png
        convert_from_path(
            str(pdf_path),
            dpi=self._dpi,
            fmt="png",
            output_folder=str(self._work_dir),
            output_file=prefix,
            paths_only=True,
            thread_count=1,
            timeout=self._timeout_seconds,
        )
