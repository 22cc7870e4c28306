"""Search interface returning display-ready results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from docindex.index.store import IndexStore


@dataclass(slots=True)
class SearchResult:
    location: str
    page: str
    title: str
    category: str
    text: str
    score: int
    position: int


class Searcher:
    """High-level API to query the index store."""

    def __init__(self, store: IndexStore) -> None:
        self.store = store

    def search(
        self, query: str, *, top_k: Optional[int] = 10, category: Optional[str] = None
    ) -> List[SearchResult]:
        hits = self.store.query_scored(query, limit=top_k, category=category)
        results: List[SearchResult] = []
        for hit in hits:
            record = hit.record
            results.append(
                SearchResult(
                    location=record.location,
                    page=record.page,
                    title=record.title,
                    category=record.category,
                    text=record.text,
                    score=hit.score,
                    position=hit.position,
                )
            )
        return results
