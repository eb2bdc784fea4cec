"""Keep a project's release-series metadata in step with its version tags."""

__version__ = "1.0.0"

from .exceptions import ConfigError, FormatError, MetadataIOError, ParseError, UpdateError
from .models import Metadata, ReleaseSeries, TagInfo, UpdateResult
from .store import load_metadata, save_metadata
from .tags import parse_tag
from .updater import update_metadata

__all__ = [
    "ConfigError",
    "FormatError",
    "Metadata",
    "MetadataIOError",
    "ParseError",
    "ReleaseSeries",
    "TagInfo",
    "UpdateError",
    "UpdateResult",
    "load_metadata",
    "parse_tag",
    "save_metadata",
    "update_metadata",
]
