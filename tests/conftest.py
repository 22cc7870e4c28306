"""Shared fixtures: the search payload of a small documentation site."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docindex.models import DocumentRecord

EIKONAL_DOCS = [
    {"location": "", "page": "Home", "title": "Home", "text": "CurrentModule = Eikonal", "category": "page"},
    {"location": "#Eikonal", "page": "Home", "title": "Eikonal", "text": "", "category": "section"},
    {"location": "", "page": "Home", "title": "Home", "text": "Documentation for Eikonal.", "category": "page"},
    {"location": "", "page": "Home", "title": "Home", "text": "", "category": "page"},
    {"location": "", "page": "Home", "title": "Home", "text": "Modules = [Eikonal]", "category": "page"},
    {
        "location": "#Eikonal.brgc-Tuple{Integer}",
        "page": "Home",
        "title": "Eikonal.brgc",
        "text": "brgc(n)\n\nGet the Binary-Reflected Gray Code list for n bits (most significant bit "
        "last, i.e. using the reflect-and-suffix method).\n\n\n\n\n\n",
        "category": "method",
    },
    {
        "location": "#Eikonal.subtuples-Union{Tuple{Tuple{Vararg{T, N}}}, Tuple{T}, Tuple{N}} where {N, T}",
        "page": "Home",
        "title": "Eikonal.subtuples",
        "text": "subtuples(t::NTuple{N, T}) where {N, T}\n\nGenerate the list of all sub-tuples "
        "obtained by removing one element from t.\n\n\n\n\n\n",
        "category": "method",
    },
]


@pytest.fixture
def eikonal_docs() -> list[dict]:
    return [dict(doc) for doc in EIKONAL_DOCS]


@pytest.fixture
def eikonal_records(eikonal_docs: list[dict]) -> list[DocumentRecord]:
    return [DocumentRecord(**doc) for doc in eikonal_docs]


@pytest.fixture
def payload_js(tmp_path: Path, eikonal_docs: list[dict]) -> Path:
    """A ``search_index.js`` bundle as a documentation build writes it."""
    path = tmp_path / "build" / "search_index.js"
    path.parent.mkdir()
    body = json.dumps({"docs": eikonal_docs})
    path.write_text(f"var documenterSearchIndex = {body}\n", encoding="utf-8")
    return path
