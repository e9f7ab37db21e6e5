import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

import pytest


@pytest.fixture(autouse=True)
def ensure_valid_cwd():
    try:
        os.getcwd()
    except FileNotFoundError:
        os.chdir(Path(__file__).resolve().parents[1])
    yield


@pytest.fixture(autouse=True)
def isolate_config(tmp_path):
    """Point LOCALREPO_CONFIG at a missing file so a user's config never leaks in.

    Tests that need configuration write their own file and pass --config.
    """
    old_value = os.environ.get('LOCALREPO_CONFIG')
    os.environ['LOCALREPO_CONFIG'] = str(tmp_path / "no-such-config.toml")

    yield

    # Restore the original value
    if old_value is not None:
        os.environ['LOCALREPO_CONFIG'] = old_value
    else:
        os.environ.pop('LOCALREPO_CONFIG', None)


def pom_xml(group_id: str, artifact_id: str, version: str,
            description: Optional[str] = None) -> str:
    description_xml = f"\n  <description>{description}</description>" if description is not None else ""
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<project xmlns="http://maven.apache.org/POM/4.0.0">\n'
        '  <modelVersion>4.0.0</modelVersion>\n'
        f'  <groupId>{group_id}</groupId>\n'
        f'  <artifactId>{artifact_id}</artifactId>\n'
        f'  <version>{version}</version>'
        f'{description_xml}\n'
        '</project>\n'
    )


@pytest.fixture
def pom():
    """Factory for small POM documents."""
    return pom_xml


@pytest.fixture
def make_repo(tmp_path):
    """Build a repository tree under tmp_path.

    Accepts either an iterable of relative file paths (each gets a few bytes of
    content) or a mapping of relative path -> str/bytes content.
    """
    def _make(files: Union[Iterable[str], Dict[str, Union[str, bytes]]],
              name: str = "repo") -> Path:
        root = tmp_path / name
        root.mkdir(exist_ok=True)
        items = files.items() if isinstance(files, dict) else ((f, b"data") for f in files)
        for rel_path, content in items:
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return root

    return _make
