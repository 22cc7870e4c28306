"""In-memory inverted index over documentation records."""

from __future__ import annotations

import logging
import threading
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Sequence

import numpy as np

from docindex.errors import InvalidQueryError, MalformedRecordError
from docindex.models import DocumentRecord
from docindex.utils.text import count_tokens, tokenize

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Hit:
    record: DocumentRecord
    position: int
    score: int


@dataclass(frozen=True, slots=True)
class _Snapshot:
    """Immutable records plus their derived index.

    Postings hold record positions, never record copies.
    """

    records: tuple[DocumentRecord, ...]
    postings: Mapping[str, frozenset[int]]
    term_counts: tuple[Mapping[str, int], ...]

    @classmethod
    def build(cls, records: Sequence[DocumentRecord]) -> "_Snapshot":
        postings: dict[str, set[int]] = {}
        term_counts: list[Mapping[str, int]] = []
        for position, record in enumerate(records):
            counts = count_tokens((record.title, record.text, record.category))
            term_counts.append(MappingProxyType(dict(counts)))
            for token in counts:
                postings.setdefault(token, set()).add(position)
        return cls(
            records=tuple(records),
            postings=MappingProxyType({token: frozenset(ids) for token, ids in postings.items()}),
            term_counts=tuple(term_counts),
        )


_EMPTY = _Snapshot(records=(), postings=MappingProxyType({}), term_counts=())


def _coerce(records: Iterable[Any]) -> List[DocumentRecord]:
    coerced: List[DocumentRecord] = []
    for position, item in enumerate(records):
        if isinstance(item, DocumentRecord):
            coerced.append(item)
        else:
            coerced.append(DocumentRecord.from_mapping(item, position=position))
    return coerced


def _validate_limit(limit: Optional[int]) -> None:
    if limit is None:
        return
    if isinstance(limit, bool) or not isinstance(limit, (int, np.integer)) or limit < 1:
        raise InvalidQueryError(f"limit must be a positive integer, got {limit!r}")


class IndexStore:
    """Owns the loaded records and answers token queries.

    ``load`` swaps in a fully built snapshot; ``query`` reads whichever
    snapshot is current and never blocks.
    """

    def __init__(self) -> None:
        self._snapshot = _EMPTY
        self._ready = False
        self._write_lock = threading.Lock()

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def records(self) -> tuple[DocumentRecord, ...]:
        return self._snapshot.records

    def __len__(self) -> int:
        return len(self._snapshot.records)

    def load(self, records: Iterable[DocumentRecord | Mapping[str, Any]]) -> None:
        """Replace the collection and its index.

        Raises MalformedRecordError, leaving the previous index in place,
        if any record lacks a required field.
        """
        try:
            coerced = _coerce(records)
        except MalformedRecordError:
            LOGGER.warning("Rejected load: malformed record")
            raise
        snapshot = _Snapshot.build(coerced)
        with self._write_lock:
            self._snapshot = snapshot
            self._ready = True
        LOGGER.info(
            "Loaded %d records (%d distinct tokens)", len(snapshot.records), len(snapshot.postings)
        )

    def query(self, term: str, limit: Optional[int] = None) -> List[DocumentRecord]:
        return [hit.record for hit in self.query_scored(term, limit=limit)]

    def query_scored(
        self, term: str, limit: Optional[int] = None, *, category: Optional[str] = None
    ) -> List[Hit]:
        """Rank records containing every token of ``term``.

        Score is the total occurrence count of the distinct query tokens
        across title, text and category. Ties keep load order.
        """
        if not isinstance(term, str) or not term.strip():
            raise InvalidQueryError("Empty query")
        _validate_limit(limit)

        snapshot = self._snapshot
        tokens = list(dict.fromkeys(tokenize(term)))
        LOGGER.debug("Query %r -> tokens %s", term, tokens)
        if not tokens or not snapshot.records:
            return []

        postings = []
        for token in tokens:
            posting = snapshot.postings.get(token)
            if not posting:
                return []
            postings.append(posting)
        postings.sort(key=len)
        candidates = set(postings[0]).intersection(*postings[1:])
        if category is not None:
            candidates = {pos for pos in candidates if snapshot.records[pos].category == category}
        if not candidates:
            return []

        positions = np.fromiter(sorted(candidates), dtype=np.int64, count=len(candidates))
        scores = np.array(
            [sum(snapshot.term_counts[pos][token] for token in tokens) for pos in positions],
            dtype=np.int64,
        )
        order = np.lexsort((positions, -scores))
        if limit is not None:
            order = order[:limit]

        return [
            Hit(
                record=snapshot.records[int(positions[idx])],
                position=int(positions[idx]),
                score=int(scores[idx]),
            )
            for idx in order
        ]

    def stats(self) -> dict[str, Any]:
        snapshot = self._snapshot
        categories = Counter(record.category for record in snapshot.records)
        return {
            "record_count": len(snapshot.records),
            "token_count": len(snapshot.postings),
            "categories": dict(sorted(categories.items())),
        }
