"""Payload loading pipeline with change detection."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from pathlib import Path

from docindex.index.store import IndexStore
from docindex.ingestion.payload_loader import read_payload
from docindex.utils.files import compute_sha256, find_payload

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadStats:
    path: Path
    sha256: str
    status: str
    records: int = 0


class Indexer:
    """Loads payload files into an IndexStore, skipping unchanged payloads."""

    def __init__(self, store: IndexStore) -> None:
        self.store = store
        self.last_sha256: str | None = None
        self._lock = threading.Lock()

    def load_path(self, path: Path, *, force: bool = False) -> LoadStats:
        """Load the payload at ``path`` (a file or a built docs directory)."""
        payload = find_payload(Path(path))
        sha256 = compute_sha256(payload)

        with self._lock:
            if not force and sha256 == self.last_sha256 and self.store.is_ready:
                LOGGER.info("Payload unchanged, skipping: %s", payload)
                return LoadStats(path=payload, sha256=sha256, status="skipped", records=len(self.store))

            LOGGER.info("Loading payload: %s", payload)
            records = read_payload(payload)
            status = "updated" if self.store.is_ready else "inserted"
            self.store.load(records)
            self.last_sha256 = sha256

        return LoadStats(path=payload, sha256=sha256, status=status, records=len(records))
