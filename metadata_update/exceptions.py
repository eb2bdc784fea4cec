"""Error taxonomy for the release-metadata updater."""

from __future__ import annotations

import logging
import traceback
from collections.abc import Mapping
from typing import Any


class UpdateError(Exception):
    """Base application error with standardized fields and safe messaging."""

    exit_code = 1

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        *,
        error_code: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.original_error = original_error
        self.error_code = error_code
        self.context = dict(context or {})
        self.traceback = traceback.format_exc() if original_error else None
        super().__init__(self.get_error_message())

    def get_error_message(self) -> str:
        base_msg = f"[{self.error_code}] {self.message}" if self.error_code else self.message
        if self.original_error:
            return f"{base_msg} (caused by {self.original_error.__class__.__name__})"
        return base_msg

    def log_error(self, logger: logging.Logger) -> None:
        payload = {
            "event": "error",
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context,
        }
        logger.error("%s", payload)
        if self.traceback:
            logger.debug("traceback=%s", self.traceback)


class ConfigError(UpdateError):
    """Configuration or environment error (e.g., missing release tag)."""

    def __init__(self, message: str, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message, error_code="missing_tag", context=context)


class ParseError(UpdateError):
    """Version tag does not have the ``vMAJOR.MINOR.PATCH`` shape."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        *,
        tag: str,
    ) -> None:
        self.tag = tag
        super().__init__(message, original_error, error_code="invalid_tag", context={"tag": tag})


class MetadataIOError(OSError, UpdateError):
    """Reading or writing the metadata file failed (retains OSError type)."""

    exit_code = 2

    def __init__(self, message: str, original_error: Exception | None = None, *, path: str) -> None:
        OSError.__init__(self, message)
        UpdateError.__init__(
            self, message, original_error, error_code="metadata_io", context={"path": path}
        )


class FormatError(UpdateError):
    """Metadata content is not YAML or does not match the expected layout."""

    exit_code = 2

    def __init__(self, message: str, original_error: Exception | None = None, *, path: str) -> None:
        super().__init__(message, original_error, error_code="metadata_format", context={"path": path})
