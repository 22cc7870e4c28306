"""Exceptions raised by DocIndex."""

from __future__ import annotations


class DocIndexError(Exception):
    """Base class for DocIndex errors."""


class MalformedRecordError(DocIndexError, ValueError):
    """A payload or one of its records is structurally invalid."""

    def __init__(
        self, message: str, *, position: int | None = None, field: str | None = None
    ) -> None:
        super().__init__(message)
        self.position = position
        self.field = field


class InvalidQueryError(DocIndexError, ValueError):
    """A query term or limit is unusable."""
