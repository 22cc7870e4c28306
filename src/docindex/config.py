"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


def _get_default_payload_path() -> Path:
    """Prefer a local documentation build, else a payload in the working directory."""
    local_build = Path("docs/build/search_index.js")
    if local_build.exists():
        return local_build
    return Path("search_index.js")


@dataclass(slots=True)
class AppConfig:
    payload_path: Path | None = None
    default_limit: int = 10
    max_limit: int = 50

    def __post_init__(self) -> None:
        if self.payload_path is None:
            self.payload_path = _get_default_payload_path()

    def resolve_payload_path(self, base_dir: Path | None = None) -> Path:
        if self.payload_path is None:
            self.payload_path = _get_default_payload_path()
        if Path(self.payload_path).is_absolute() or base_dir is None:
            return Path(self.payload_path)
        return base_dir / self.payload_path

    def clamp_limit(self, limit: int) -> int:
        return max(1, min(limit, self.max_limit))
