import httpx

from app.logging.logger import Log
from app.processor.exceptions import FetchError, ValidationError
from app.processor.models import SourceDocument

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def validate_url(url: str | None) -> str:
    """Check that url is a usable absolute http(s) URL.

    Raises:
        ValidationError: if url is missing or malformed.
    """
    if url is None or not url.strip():
        raise ValidationError("URL parameter is required")
    candidate = url.strip()
    try:
        parsed = httpx.URL(candidate)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ValidationError(f"Invalid URL format: {exc}") from exc
    if parsed.scheme not in _ALLOWED_SCHEMES or not parsed.host:
        raise ValidationError(f"Invalid URL format: {candidate!r}")
    return candidate


class DocumentFetcher:
    """Downloads the source document in a single attempt."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 30.0,
        max_bytes: int = 50 * 1024 * 1024,
        client: httpx.Client | None = None,
    ) -> None:
        self._max_bytes = max_bytes
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            follow_redirects=True,
        )

    def fetch(self, url: str | None) -> SourceDocument:
        """Download document bytes from url.

        Raises:
            ValidationError: if url is missing or malformed; no request is made.
            FetchError: on timeout, network failure, non-2xx status, or oversize body.
        """
        target = validate_url(url)
        Log.info(f"Downloading document from {target}")
        try:
            with self._client.stream("GET", target) as response:
                response.raise_for_status()
                content = self._read_capped(response)
        except httpx.TimeoutException as exc:
            raise FetchError(f"Document download timed out: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"Document download failed with HTTP status {exc.response.status_code}"
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            raise FetchError(f"Document download network error: {exc}") from exc

        Log.info(f"Downloaded {len(content)} bytes from {target}")
        return SourceDocument(url=target, content=content)

    def _read_capped(self, response: httpx.Response) -> bytes:
        declared = response.headers.get("content-length", "")
        if declared.isdigit() and int(declared) > self._max_bytes:
            raise FetchError(
                f"Document is too large: {declared} bytes (max {self._max_bytes})"
            )
        chunks: list[bytes] = []
        received = 0
        for chunk in response.iter_bytes():
            received += len(chunk)
            if received > self._max_bytes:
                raise FetchError(
                    f"Document is too large: over {self._max_bytes} bytes"
                )
            chunks.append(chunk)
        return b"".join(chunks)
