"""Data models for the release metadata document."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

UPDATED = "updated"
SKIPPED_PATCH = "skipped_patch"
SKIPPED_DUPLICATE = "skipped_duplicate"


@dataclass(frozen=True)
class TagInfo:
    """Components of a ``vMAJOR.MINOR.PATCH`` release tag."""

    major: int
    minor: int
    patch: int

    @property
    def is_patch(self) -> bool:
        return self.patch > 0


@dataclass
class ReleaseSeries:
    """A (major, minor) release line and the API contract it ships."""

    major: int
    minor: int
    contract: str = ""

    @property
    def key(self) -> tuple[int, int]:
        return (self.major, self.minor)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReleaseSeries":
        return cls(
            major=_as_int(data.get("major", 0), "major"),
            minor=_as_int(data.get("minor", 0), "minor"),
            contract=_as_str(data.get("contract"), "contract"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"major": self.major, "minor": self.minor, "contract": self.contract}


@dataclass
class Metadata:
    """Contents of ``metadata.yaml``."""

    api_version: str = ""
    release_series: list[ReleaseSeries] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Metadata":
        series = data.get("releaseSeries")
        if series is None:
            series = []
        if not isinstance(series, list):
            raise ValueError("releaseSeries must be a list")
        entries: list[ReleaseSeries] = []
        for item in series:
            if not isinstance(item, dict):
                raise ValueError("releaseSeries entries must be mappings")
            entries.append(ReleaseSeries.from_dict(item))
        return cls(
            api_version=_as_str(data.get("apiVersion"), "apiVersion"),
            release_series=entries,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "releaseSeries": [entry.to_dict() for entry in self.release_series],
        }

    def find(self, major: int, minor: int) -> ReleaseSeries | None:
        for entry in self.release_series:
            if entry.key == (major, minor):
                return entry
        return None


@dataclass
class UpdateResult:
    """Outcome of one metadata update run."""

    status: str
    tag: TagInfo
    entry: ReleaseSeries | None = None
    metadata_path: Path | None = None
    metadata: Metadata | None = None

    @property
    def changed(self) -> bool:
        return self.status == UPDATED


def _as_int(value: Any, name: str) -> int:
    # bool is an int subclass; YAML ``true`` is not a version number
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value


def _as_str(value: Any, name: str) -> str:
    # YAML 1.1 resolves ``1.10`` to a float and ``yes`` to True; str() would rewrite them
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {value!r}")
    return value
