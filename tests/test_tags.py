from __future__ import annotations

import pytest

from metadata_update.exceptions import ParseError
from metadata_update.tags import parse_tag


@pytest.mark.parametrize(
    ("tag", "major", "minor"),
    [("v0.8.0", 0, 8), ("v1.0.0", 1, 0), ("v12.34.0", 12, 34)],
)
def test_minor_release_tags(tag: str, major: int, minor: int) -> None:
    info = parse_tag(tag)
    assert (info.major, info.minor, info.patch) == (major, minor, 0)
    assert info.is_patch is False


@pytest.mark.parametrize("tag", ["v0.8.1", "v2.3.10", "v0.0.007"])
def test_patch_release_tags(tag: str) -> None:
    assert parse_tag(tag).is_patch is True


def test_leading_zeros_parse_as_base_ten() -> None:
    info = parse_tag("v01.09.00")
    assert (info.major, info.minor, info.patch) == (1, 9, 0)
    assert info.is_patch is False


@pytest.mark.parametrize(
    "tag",
    ["1.2.3", "v1.2", "vX.Y.Z", "v1.2.3-rc.1", "v1.2.3+build", " v1.2.3", "v1.2.3\n", "", "v1.2.3.4", "v-1.2.3"],
)
def test_malformed_tags_raise_parse_error(tag: str) -> None:
    with pytest.raises(ParseError) as exc:
        parse_tag(tag)
    assert exc.value.tag == tag
    assert exc.value.error_code == "invalid_tag"


def test_parse_error_echoes_input() -> None:
    with pytest.raises(ParseError) as exc:
        parse_tag("release-1")
    assert "invalid tag format: release-1" in str(exc.value)


def test_non_ascii_digits_are_rejected() -> None:
    # Arabic-Indic digits satisfy \d but are not version numbers
    with pytest.raises(ParseError):
        parse_tag("v١.٢.٠")
