import re
import threading
import uuid
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from app.logging.logger import Log
from app.pdf.exceptions import RasterizationError
from app.processor.janitor import ArtifactJanitor
from app.processor.models import PageArtifact

_PAGE_NUMBER = re.compile(r"-(\d+)$")


def page_number(path: Path) -> int | None:
    """Page number encoded at the end of an artifact file stem, if any."""
    match = _PAGE_NUMBER.search(path.stem)
    if match is None:
        return None
    return int(match.group(1))


def _page_order(path: Path) -> tuple[bool, int, str]:
    number = page_number(path)
    return number is None, number or 0, path.name


class BaseRasterizer(ABC):
    """Contract for all PDF rasterization adapters.

    Every call writes its files under work_dir with a fresh
    ``page_<uuid>`` prefix, so concurrent calls never see each other's pages.
    Engines that are not thread-safe set ``_render_lock``; calls then wait at
    most timeout_seconds for their turn.
    """

    engine_name: ClassVar[str] = "base"
    IMAGE_SUFFIX: ClassVar[str] = ".png"
    MEDIA_TYPE: ClassVar[str] = "image/png"
    _render_lock: "ClassVar[threading.Lock | None]" = None

    def __init__(
        self,
        *,
        work_dir: Path,
        dpi: int = 150,
        max_pages: int = 50,
        timeout_seconds: float = 60,
    ) -> None:
        self._work_dir = work_dir
        self._dpi = dpi
        self._max_pages = max_pages
        self._timeout_seconds = timeout_seconds

    def rasterize(self, pdf_bytes: bytes, janitor: ArtifactJanitor) -> list[PageArtifact]:
        """Render every page of the document to a PNG file.

        Produced files are handed to janitor even if rendering fails halfway.

        Returns:
            Page artifacts ordered by page number, indexed from 1.

        Raises:
            RasterizationError: if the work dir is unusable, rendering fails,
                an output file has no page number, or no pages come out.
        """
        prefix = f"page_{uuid.uuid4().hex}"
        input_path = self._work_dir / f"{prefix}.pdf"
        artifacts: list[PageArtifact] = []
        try:
            self._work_dir.mkdir(parents=True, exist_ok=True)
            input_path.write_bytes(pdf_bytes)
            self._render_exclusive(input_path, prefix)
        except RasterizationError:
            raise
        except Exception as exc:
            raise RasterizationError(f"{self.engine_name} rasterization failed: {exc}") from exc
        finally:
            self._remove_input(input_path)
            artifacts = self._discover(prefix)
            janitor.track(artifacts)

        if not artifacts:
            raise RasterizationError("Document produced no pages")
        for artifact in artifacts:
            if page_number(artifact.path) is None:
                raise RasterizationError(f"Unexpected artifact name: {artifact.path.name}")
        Log.info(f"Rasterized {len(artifacts)} page(s) with {self.engine_name}")
        return artifacts

    def _render_exclusive(self, pdf_path: Path, prefix: str) -> None:
        lock = self._render_lock
        if lock is None:
            self._render(pdf_path, prefix)
            return
        if not lock.acquire(timeout=self._timeout_seconds):
            raise RasterizationError(
                f"{self.engine_name} renderer busy for more than {self._timeout_seconds}s"
            )
        try:
            self._render(pdf_path, prefix)
        finally:
            lock.release()

    def _remove_input(self, input_path: Path) -> None:
        try:
            input_path.unlink(missing_ok=True)
        except OSError as exc:
            Log.warning(f"Could not remove input copy {input_path}: {exc}")

    def _discover(self, prefix: str) -> list[PageArtifact]:
        # runs inside a finally block, so it must not raise
        try:
            paths = list(self._work_dir.glob(f"{prefix}*{self.IMAGE_SUFFIX}"))
        except OSError as exc:
            Log.warning(f"Could not list artifacts in {self._work_dir}: {exc}")
            return []
        return [
            PageArtifact(index=index, path=path, media_type=self.MEDIA_TYPE)
            for index, path in enumerate(sorted(paths, key=_page_order), start=1)
        ]

    def _output_path(self, prefix: str, page_number: int) -> Path:
        return self._work_dir / f"{prefix}-{page_number:04d}{self.IMAGE_SUFFIX}"

    def _check_page_count(self, page_count: int) -> None:
        if page_count > self._max_pages:
            raise RasterizationError(
                f"Document has {page_count} pages (max {self._max_pages})"
            )

    @abstractmethod
    def _render(self, pdf_path: Path, prefix: str) -> None:
        """Write one ``<prefix>...-<page number>.png`` file per page of pdf_path."""
