"""Tests for file utility functions."""

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from docindex.utils.files import compute_sha256, find_payload, iter_payload_paths


class TestIterPayloadPaths:
    """Test iter_payload_paths function."""

    def test_single_file(self, tmp_path: Path) -> None:
        """Should yield an explicit file whatever its name."""
        payload = tmp_path / "custom.json"
        payload.write_text("{}")

        assert list(iter_payload_paths([payload])) == [payload]

    def test_directory(self, tmp_path: Path) -> None:
        """Should find search_index files in nested directories."""
        build = tmp_path / "docs" / "build"
        build.mkdir(parents=True)
        (build / "search_index.js").write_text("var x = {}")
        (build / "index.html").write_text("<html></html>")

        paths = list(iter_payload_paths([tmp_path]))

        assert paths == [build / "search_index.js"]

    def test_js_preferred_over_json(self, tmp_path: Path) -> None:
        """JavaScript bundles are listed before JSON payloads."""
        (tmp_path / "search_index.json").write_text("{}")
        (tmp_path / "search_index.js").write_text("var x = {}")

        paths = list(iter_payload_paths([tmp_path]))

        assert [p.name for p in paths] == ["search_index.js", "search_index.json"]

    def test_nonexistent(self, tmp_path: Path) -> None:
        """Should skip paths that do not exist."""
        assert list(iter_payload_paths([tmp_path / "missing"])) == []


class TestFindPayload:
    """Test find_payload function."""

    def test_find_in_directory(self, payload_js: Path) -> None:
        assert find_payload(payload_js.parent.parent) == payload_js

    def test_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            find_payload(tmp_path)


class TestComputeSha256:
    """Test compute_sha256 function."""

    def test_matches_hashlib(self, tmp_path: Path) -> None:
        path = tmp_path / "payload.json"
        path.write_bytes(b'{"docs": []}')

        assert compute_sha256(path) == hashlib.sha256(b'{"docs": []}').hexdigest()

    def test_different_content(self, tmp_path: Path) -> None:
        first = tmp_path / "a.json"
        second = tmp_path / "b.json"
        first.write_text("a")
        second.write_text("b")

        assert compute_sha256(first) != compute_sha256(second)
