"""Search payload loading.

Payloads are either plain JSON or the JavaScript bundle a documentation
build writes out, e.g. ``var documenterSearchIndex = {"docs": [...]}``.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterator, List

from docindex.errors import MalformedRecordError
from docindex.models import DocumentRecord

LOGGER = logging.getLogger(__name__)

_ASSIGNMENT_RE = re.compile(r"^\s*(?:var|let|const)\s+[\w$]+\s*=\s*")


def strip_js_assignment(text: str) -> str:
    """Return the JSON body of a ``var NAME = {...};`` bundle."""
    match = _ASSIGNMENT_RE.match(text)
    if match is None:
        return text
    body = text[match.end() :].rstrip()
    if body.endswith(";"):
        body = body[:-1]
    return body


def parse_payload(text: str) -> List[Any]:
    """Parse payload text into the raw list of record objects."""
    try:
        data = json.loads(strip_js_assignment(text))
    except json.JSONDecodeError as exc:
        raise MalformedRecordError(f"Payload is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise MalformedRecordError("Payload must be an object with a 'docs' key")
    if "docs" not in data:
        raise MalformedRecordError("Payload is missing the 'docs' key", field="docs")
    docs = data["docs"]
    if not isinstance(docs, list):
        raise MalformedRecordError("Payload 'docs' must be a list", field="docs")
    return docs


def iter_records(items: List[Any]) -> Iterator[DocumentRecord]:
    for position, item in enumerate(items):
        yield DocumentRecord.from_mapping(item, position=position)


def read_payload(path: Path) -> List[DocumentRecord]:
    """Read and validate every record of a payload file."""
    try:
        text = Path(path).read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise MalformedRecordError(f"Payload is not valid UTF-8: {exc}") from exc
    records = list(iter_records(parse_payload(text)))
    LOGGER.debug("Parsed %d records from %s", len(records), path)
    return records
