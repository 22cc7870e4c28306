"""Utility helpers for working with files."""

from __future__ import annotations

import hashlib
from pathlib import Path
from typing import Iterable, Iterator

PAYLOAD_NAMES = ("search_index.js", "search_index.json")


def iter_payload_paths(inputs: Iterable[Path]) -> Iterator[Path]:
    """Yield search payload paths from input paths, descending into directories."""
    for item in inputs:
        if item.is_dir():
            for name in PAYLOAD_NAMES:
                yield from sorted(item.rglob(name))
        elif item.is_file():
            yield item


def find_payload(path: Path) -> Path:
    """Resolve a file or a built documentation directory to a payload file."""
    path = Path(path)
    for candidate in iter_payload_paths([path]):
        return candidate
    raise FileNotFoundError(f"No search payload found at {path}")


def compute_sha256(path: Path) -> str:
    """Compute SHA256 hash for a file."""
    sha = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(1 << 20), b""):
            sha.update(chunk)
    return sha.hexdigest()
