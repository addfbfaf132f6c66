from types import TracebackType

from app.logging.logger import Log
from app.processor.models import PageArtifact


class ArtifactJanitor:
    """Removes every tracked page artifact exactly once.

    Use as a context manager around the work that creates artifacts:
    cleanup runs on exit whether or not the block raised.
    """

    def __init__(self) -> None:
        self._artifacts: list[PageArtifact] = []
        self._cleaned = False

    @property
    def artifacts(self) -> list[PageArtifact]:
        return list(self._artifacts)

    def track(self, artifacts: list[PageArtifact]) -> None:
        self._artifacts.extend(artifacts)

    def cleanup(self) -> int:
        """Delete tracked files. Missing files are skipped silently.

        Returns:
            Number of artifacts processed; 0 on any call after the first.
        """
        if self._cleaned:
            return 0
        self._cleaned = True
        for artifact in self._artifacts:
            try:
                artifact.path.unlink(missing_ok=True)
            except OSError as exc:
                Log.warning(f"Could not remove artifact {artifact.path}: {exc}")
        if self._artifacts:
            Log.info(f"Removed {len(self._artifacts)} page artifact(s)")
        return len(self._artifacts)

    def __enter__(self) -> "ArtifactJanitor":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.cleanup()
