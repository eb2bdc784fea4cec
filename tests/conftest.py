from pathlib import Path
from typing import Callable

import pytest

API_VERSION = "clusterctl.cluster.x-k8s.io/v1alpha3"

METADATA_YAML = f"""\
apiVersion: {API_VERSION}
releaseSeries:
  - major: 1
    minor: 7
    contract: v1beta1
"""


@pytest.fixture()
def metadata_yaml() -> str:
    return METADATA_YAML


@pytest.fixture()
def api_version() -> str:
    return API_VERSION


@pytest.fixture()
def repo_dir(tmp_path: Path) -> Path:
    (tmp_path / "metadata.yaml").write_text(METADATA_YAML, encoding="utf-8")
    return tmp_path


@pytest.fixture()
def write_metadata(tmp_path: Path) -> Callable[[str], Path]:
    def _writer(text: str) -> Path:
        path = tmp_path / "metadata.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _writer
