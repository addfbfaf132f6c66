from dataclasses import dataclass


@dataclass(frozen=True)
class EncodedPage:
    """Inline base64 form of a page artifact."""

    index: int
    media_type: str
    data: str

    @property
    def data_url(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"


@dataclass(frozen=True)
class ExtractedFields:
    """Identifiers recovered from a document. Either may be absent."""

    barcode: str | None = None
    reference_number: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {"barcode": self.barcode, "referenceNumber": self.reference_number}
