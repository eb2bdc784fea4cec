from __future__ import annotations

import logging

import pytest

from metadata_update.exceptions import ConfigError, FormatError, MetadataIOError, ParseError, UpdateError


def test_error_message_includes_code_and_cause() -> None:
    cause = ValueError("bad")
    err = FormatError("Metadata file m.yaml has an unexpected layout", cause, path="m.yaml")
    assert str(err) == "[metadata_format] Metadata file m.yaml has an unexpected layout (caused by ValueError)"
    assert err.context == {"path": "m.yaml"}


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (ConfigError("missing"), 1),
        (ParseError("bad tag", tag="x"), 1),
        (MetadataIOError("io", path="m.yaml"), 2),
        (FormatError("format", path="m.yaml"), 2),
    ],
)
def test_exit_codes(error: UpdateError, code: int) -> None:
    assert isinstance(error, UpdateError)
    assert error.exit_code == code


def test_log_error_emits_structured_payload(caplog: pytest.LogCaptureFixture) -> None:
    err = ConfigError("GITHUB_REF_NAME environment variable not set", context={"env": "GITHUB_REF_NAME"})
    with caplog.at_level(logging.ERROR):
        err.log_error(logging.getLogger("metadata_update"))
    assert "'error_code': 'missing_tag'" in caplog.text
    assert "'env': 'GITHUB_REF_NAME'" in caplog.text


def test_log_payload_carries_only_error_fields(caplog: pytest.LogCaptureFixture) -> None:
    err = ParseError("invalid tag format: v1", tag="v1")
    with caplog.at_level(logging.ERROR):
        err.log_error(logging.getLogger("metadata_update"))
    record = caplog.records[-1]
    assert set(record.args) == {"event", "error_code", "message", "context"}
    assert err.context == {"tag": "v1"}
