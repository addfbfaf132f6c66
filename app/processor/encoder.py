import base64

from app.extraction.models import EncodedPage
from app.processor.exceptions import EncodingError
from app.processor.models import PageArtifact


class PageEncoder:
    """Turns a page artifact into an inline base64 payload."""

    def encode(self, artifact: PageArtifact) -> EncodedPage:
        """Read artifact bytes and base64-encode them.

        Raises:
            EncodingError: if the file is missing, unreadable, or empty.
        """
        try:
            raw = artifact.path.read_bytes()
        except OSError as exc:
            raise EncodingError(
                f"Cannot read page {artifact.index} at {artifact.path}: {exc}"
            ) from exc
        if not raw:
            raise EncodingError(f"Page {artifact.index} at {artifact.path} is empty")
        return EncodedPage(
            index=artifact.index,
            media_type=artifact.media_type,
            data=base64.b64encode(raw).decode("ascii"),
        )

    def encode_all(self, artifacts: list[PageArtifact]) -> list[EncodedPage]:
        return [self.encode(artifact) for artifact in artifacts]
