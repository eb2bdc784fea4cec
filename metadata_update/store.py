"""Reading and writing ``metadata.yaml``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .exceptions import FormatError, MetadataIOError
from .models import Metadata

LOGGER = logging.getLogger(__name__)


class _IndentedDumper(yaml.SafeDumper):
    """Indent block sequences under their parent key.

    PyYAML writes ``releaseSeries:`` followed by ``- major: 0`` at the same
    column by default; the metadata file keeps list items two spaces in.
    """

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> Any:
        return super().increase_indent(flow, False)


def dump_metadata(metadata: Metadata) -> str:
    """Serialize ``metadata`` as two-space indented YAML with a stable key order."""

    return yaml.dump(
        metadata.to_dict(),
        Dumper=_IndentedDumper,
        sort_keys=False,
        default_flow_style=False,
        indent=2,
        allow_unicode=True,
    )


def load_metadata(path: Path) -> Metadata:
    """Load the metadata document stored at ``path``.

    Unknown keys are ignored. Missing ``apiVersion`` or ``releaseSeries`` fall
    back to empty values, and an empty file yields an empty document.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FormatError(f"Metadata file {path} is not valid UTF-8: {exc}", exc, path=str(path)) from exc
    except OSError as exc:
        raise MetadataIOError(f"Failed to read metadata file {path}: {exc}", exc, path=str(path)) from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise FormatError(f"Metadata file {path} is not valid YAML: {exc}", exc, path=str(path)) from exc

    if data is None:
        LOGGER.debug("Metadata file %s is empty", path)
        return Metadata()
    if not isinstance(data, dict):
        raise FormatError(
            f"Metadata file {path} must contain a mapping, got {type(data).__name__}",
            path=str(path),
        )

    try:
        metadata = Metadata.from_dict(data)
    except ValueError as exc:
        raise FormatError(f"Metadata file {path} has an unexpected layout: {exc}", exc, path=str(path)) from exc

    LOGGER.debug("Loaded %d release series from %s", len(metadata.release_series), path)
    return metadata


def save_metadata(path: Path, metadata: Metadata) -> None:
    """Overwrite ``path`` with the serialized document."""

    path = Path(path)
    text = dump_metadata(metadata)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise MetadataIOError(f"Failed to write metadata file {path}: {exc}", exc, path=str(path)) from exc
    LOGGER.debug("Wrote %d release series to %s", len(metadata.release_series), path)
