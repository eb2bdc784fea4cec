"""Runtime configuration for the release-metadata updater."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


DEFAULT_CONTRACT = "v1beta1"
TAG_ENV_VAR = "GITHUB_REF_NAME"
METADATA_FILENAME = "metadata.yaml"


@dataclass
class UpdateConfig:
    """Inputs for a single metadata update run."""

    contract: str = DEFAULT_CONTRACT
    repo_dir: Path = field(default_factory=lambda: Path("."))
    tag_env_var: str = TAG_ENV_VAR
