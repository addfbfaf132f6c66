"""Recovers barcode and reference number from a free-form model answer."""

import json
import re
from typing import Any

from app.extraction.exceptions import ExtractionError
from app.extraction.models import ExtractedFields
from app.logging.logger import Log

_FENCED_BLOCK = re.compile(r"```[ \t]*(?:json)?[ \t]*\r?\n?(.*?)```", re.DOTALL | re.IGNORECASE)

_BARCODE_KEYS = frozenset({"barcode"})
_REFERENCE_KEYS = frozenset({"referencenumber", "referenceno", "reference", "referans"})
_NULL_TOKENS = frozenset({"", "null", "none", "n/a", "na", "-"})

# separator may be wrapped in quotes or markdown emphasis; a value starts alphanumeric
_VALUE = r"""[\s*_"'`]*[:=][\s*_"'`]*([A-Za-z0-9][^"'\s,;}\]*`]*)"""
_BARCODE_SCAN = re.compile(r"\bbarcode" + _VALUE, re.IGNORECASE)
_REFERENCE_SCANS = (
    re.compile(r"\breference[_\s-]?number" + _VALUE, re.IGNORECASE),
    re.compile(r"\breferans" + _VALUE, re.IGNORECASE),
)


def parse_answer(raw: str | None) -> ExtractedFields:
    """Extract the two identifiers from the model's answer.

    Tried in order, first success wins: a fenced code block holding a JSON
    object, the whole answer as a JSON object, then a key/value scan of the
    plain text. Malformed answers degrade to null fields.

    Raises:
        ExtractionError: if the answer is empty or missing.
    """
    if raw is None or not raw.strip():
        raise ExtractionError("Model answer is empty")

    for candidate in _json_candidates(raw):
        data = _load_object(candidate)
        if data is not None:
            return _fields_from_object(data)

    Log.warning("Model answer is not valid JSON, falling back to text scan")
    return _fields_from_text(raw)


def _json_candidates(raw: str) -> list[str]:
    candidates = []
    match = _FENCED_BLOCK.search(raw)
    if match:
        candidates.append(match.group(1).strip())
    candidates.append(raw.strip())
    return candidates


def _load_object(text: str) -> dict[str, Any] | None:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return None
    if not isinstance(parsed, dict):
        return None
    return parsed


def _fields_from_object(data: dict[str, Any]) -> ExtractedFields:
    barcode = None
    reference = None
    for key, value in data.items():
        normalized = _normalize_key(key)
        if normalized in _BARCODE_KEYS and barcode is None:
            barcode = _coerce(value)
        elif normalized in _REFERENCE_KEYS and reference is None:
            reference = _coerce(value)
    return ExtractedFields(barcode=barcode, reference_number=reference)


def _fields_from_text(raw: str) -> ExtractedFields:
    barcode = _scan(raw, (_BARCODE_SCAN,))
    reference = _scan(raw, _REFERENCE_SCANS)
    return ExtractedFields(barcode=barcode, reference_number=reference)


def _scan(raw: str, patterns: tuple[re.Pattern[str], ...]) -> str | None:
    for pattern in patterns:
        for match in pattern.finditer(raw):
            value = _coerce(match.group(1).rstrip(".:"))
            if value is not None:
                return value
    return None


def _normalize_key(key: Any) -> str:
    return re.sub(r"[\s_\-]", "", str(key)).lower()


def _coerce(value: Any) -> str | None:
    # bool is an int subclass; true/false is never an identifier
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, str):
        text = value.strip()
        return None if text.lower() in _NULL_TOKENS else text
    return None
