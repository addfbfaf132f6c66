import base64
from pathlib import Path

import pytest

from app.processor.encoder import PageEncoder
from app.processor.exceptions import EncodingError
from app.processor.models import PageArtifact


class TestEncode:
    def test_encodes_file_as_base64(self, tmp_path: Path) -> None:
        path = tmp_path / "page-0001.png"
        path.write_bytes(b"\x89PNG fake image")

        encoded = PageEncoder().encode(PageArtifact(index=1, path=path))

        assert encoded.index == 1
        assert encoded.media_type == "image/png"
        assert base64.b64decode(encoded.data) == b"\x89PNG fake image"

    def test_data_url_carries_media_type(self, tmp_path: Path) -> None:
        path = tmp_path / "page-0001.png"
        path.write_bytes(b"x")

        encoded = PageEncoder().encode(PageArtifact(index=1, path=path))

        assert encoded.data_url == f"data:image/png;base64,{encoded.data}"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        artifact = PageArtifact(index=2, path=tmp_path / "gone.png")
        with pytest.raises(EncodingError, match="Cannot read page 2"):
            PageEncoder().encode(artifact)

    def test_empty_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.png"
        path.write_bytes(b"")
        with pytest.raises(EncodingError, match="empty"):
            PageEncoder().encode(PageArtifact(index=1, path=path))


class TestEncodeAll:
    def test_preserves_page_order(self, tmp_path: Path) -> None:
        artifacts = []
        for index in (1, 2, 3):
            path = tmp_path / f"page-{index:04d}.png"
            path.write_bytes(f"page {index}".encode())
            artifacts.append(PageArtifact(index=index, path=path))

        encoded = PageEncoder().encode_all(artifacts)

        assert [page.index for page in encoded] == [1, 2, 3]
        assert [base64.b64decode(page.data) for page in encoded] == [
            b"page 1",
            b"page 2",
            b"page 3",
        ]
