"""Append a release series to ``metadata.yaml`` for a newly published tag."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import DEFAULT_CONTRACT, METADATA_FILENAME
from .models import SKIPPED_DUPLICATE, SKIPPED_PATCH, UPDATED, ReleaseSeries, TagInfo, UpdateResult
from .store import load_metadata, save_metadata
from .tags import parse_tag

LOGGER = logging.getLogger(__name__)


def next_release_series(tag: TagInfo, contract: str) -> ReleaseSeries:
    """Return the entry announced by a minor release tag.

    The minor version is bumped by one while the major version is kept as
    tagged, so ``v0.8.0`` yields ``0.9``.
    """

    return ReleaseSeries(major=tag.major, minor=tag.minor + 1, contract=contract)


def update_metadata(
    tag: str,
    *,
    contract: str = DEFAULT_CONTRACT,
    repo_dir: Path | str = ".",
    dry_run: bool = False,
) -> UpdateResult:
    """Record the release series for ``tag`` in ``<repo_dir>/metadata.yaml``.

    Patch releases and series that are already listed leave the file
    untouched. With ``dry_run`` the updated document is returned in the
    result but not written.

    Raises:
        ParseError: if ``tag`` is not a ``vMAJOR.MINOR.PATCH`` tag.
        MetadataIOError: if the metadata file cannot be read or written.
        FormatError: if the metadata file content is malformed.
    """

    LOGGER.info("Processing tag: %s", tag)
    info = parse_tag(tag)

    if info.is_patch:
        LOGGER.info("Skipping patch release: %s", tag)
        return UpdateResult(status=SKIPPED_PATCH, tag=info)

    LOGGER.info(
        "Adding new release with major: %d, minor: %d+1, contract: %s",
        info.major,
        info.minor,
        contract,
    )

    metadata_path = Path(repo_dir) / METADATA_FILENAME
    metadata = load_metadata(metadata_path)
    entry = next_release_series(info, contract)

    if metadata.find(entry.major, entry.minor) is not None:
        LOGGER.info("Release %d.%d already exists, skipping", entry.major, entry.minor)
        return UpdateResult(
            status=SKIPPED_DUPLICATE,
            tag=info,
            entry=entry,
            metadata_path=metadata_path,
            metadata=metadata,
        )

    metadata.release_series.append(entry)

    if dry_run:
        LOGGER.info("Dry run: not writing %s", metadata_path)
    else:
        save_metadata(metadata_path, metadata)
        LOGGER.info(
            "Successfully updated %s with new release: %d.%d",
            metadata_path.name,
            entry.major,
            entry.minor,
        )

    return UpdateResult(
        status=UPDATED,
        tag=info,
        entry=entry,
        metadata_path=metadata_path,
        metadata=metadata,
    )
