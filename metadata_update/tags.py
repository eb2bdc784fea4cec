"""Release tag parsing."""

from __future__ import annotations

import re

from .exceptions import ParseError
from .models import TagInfo

TAG_PATTERN = re.compile(r"^v([0-9]+)\.([0-9]+)\.([0-9]+)$")
_COMPONENTS = ("major", "minor", "patch")


def parse_tag(tag: str) -> TagInfo:
    """Split a ``vMAJOR.MINOR.PATCH`` tag into its numeric components.

    A patch component greater than zero marks a patch release; ``v0.8.0`` is a
    minor release while ``v0.8.1`` is a patch release.

    Raises:
        ParseError: if the tag does not match the expected shape.
    """

    match = TAG_PATTERN.fullmatch(tag or "")
    if match is None:
        raise ParseError(f"invalid tag format: {tag}", tag=tag)

    values: list[int] = []
    for name, raw in zip(_COMPONENTS, match.groups()):
        try:
            values.append(int(raw, 10))
        except ValueError as exc:
            raise ParseError(f"invalid {name} version: {raw}", exc, tag=tag) from exc

    major, minor, patch = values
    return TagInfo(major=major, minor=minor, patch=patch)
