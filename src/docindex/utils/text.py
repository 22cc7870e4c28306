"""Text helpers for tokenization and snippets."""

from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Iterator

_WORD_RE = re.compile(r"\w+")


def iter_tokens(text: str) -> Iterator[str]:
    """Yield lower-cased tokens from text.

    Text is split on whitespace and each word is further split on
    punctuation, so ``sub-tuples`` yields ``sub`` and ``tuples``.
    """
    if not text:
        return iter(())

    for word in text.lower().split():
        yield from _WORD_RE.findall(word)


def tokenize(text: str) -> list[str]:
    return list(iter_tokens(text))


def count_tokens(parts: Iterable[str]) -> Counter[str]:
    """Count token occurrences across several text fields."""
    counts: Counter[str] = Counter()
    for part in parts:
        counts.update(iter_tokens(part))
    return counts


def snippet(text: str, *, max_chars: int = 180) -> str:
    """Return a single-line preview of text."""
    flat = " ".join(text.split())
    if len(flat) <= max_chars:
        return flat
    return flat[: max_chars - 1].rstrip() + "…"
