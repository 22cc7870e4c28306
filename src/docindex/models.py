"""Core DocIndex data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from docindex.errors import MalformedRecordError

REQUIRED_FIELDS = ("location", "page", "title", "category")


@dataclass(frozen=True, slots=True)
class DocumentRecord:
    """One entry of a documentation search payload."""

    location: str
    page: str
    title: str
    category: str
    text: str = ""

    def __post_init__(self) -> None:
        for name in REQUIRED_FIELDS:
            value = getattr(self, name)
            if value is None:
                raise MalformedRecordError(f"Missing required field '{name}'", field=name)
            if not isinstance(value, str):
                raise MalformedRecordError(
                    f"Field '{name}' must be a string, got {type(value).__name__}", field=name
                )
        if self.text is None:
            object.__setattr__(self, "text", "")
        elif not isinstance(self.text, str):
            raise MalformedRecordError(
                f"Field 'text' must be a string, got {type(self.text).__name__}", field="text"
            )

    @classmethod
    def from_mapping(cls, data: Any, *, position: int | None = None) -> "DocumentRecord":
        """Build a record from a raw payload object.

        Raises MalformedRecordError carrying the record position when the
        object is not a mapping or lacks one of the required keys.
        """
        if not isinstance(data, Mapping):
            raise MalformedRecordError(
                f"Record {position} is not an object", position=position
            )
        for name in REQUIRED_FIELDS:
            if data.get(name) is None:
                raise MalformedRecordError(
                    f"Record {position} is missing required field '{name}'",
                    position=position,
                    field=name,
                )
        try:
            return cls(
                location=data["location"],
                page=data["page"],
                title=data["title"],
                category=data["category"],
                text=data.get("text", ""),
            )
        except MalformedRecordError as exc:
            raise MalformedRecordError(
                f"Record {position}: {exc}", position=position, field=exc.field
            ) from exc

    def to_dict(self) -> dict[str, str]:
        return {
            "location": self.location,
            "page": self.page,
            "title": self.title,
            "text": self.text,
            "category": self.category,
        }
