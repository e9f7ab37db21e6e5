"""
Local installation of an artifact into a repository.

Installs lay files out the way Maven does for ``mvn install:install-file``:

    <repo>/<group path>/<artifactId>/<version>/<artifactId>-<version>.<ext>
    <repo>/<group path>/<artifactId>/<version>/<artifactId>-<version>.pom
    <repo>/<group path>/<artifactId>/maven-metadata-local.xml

with a ``.sha1`` checksum next to each installed file.
"""

from __future__ import annotations

import hashlib
import logging
import shutil
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Union

from localrepo.repo.coordinates import split_artifact_id

logger = logging.getLogger(__name__)

METADATA_FILENAME = "maven-metadata-local.xml"
DEFAULT_EXTENSION = ".jar"


def artifact_dir(repo_root: Union[str, Path], group_id: str, artifact_id: str) -> Path:
    return Path(repo_root).joinpath(*group_id.split("."), artifact_id)


def write_checksum(path: Path) -> Path:
    """Write ``<path>.sha1`` holding the hex SHA-1 of ``path``."""
    digest = hashlib.sha1()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(65536), b""):
            digest.update(chunk)
    checksum_path = path.with_name(path.name + ".sha1")
    checksum_path.write_text(digest.hexdigest(), encoding="ascii")
    return checksum_path


def _read_versions(metadata_path: Path) -> List[str]:
    if not metadata_path.is_file():
        return []
    try:
        root = ET.parse(metadata_path).getroot()
    except (OSError, ET.ParseError) as exc:
        logger.warning("Rewriting unreadable metadata %s: %s", metadata_path, exc)
        return []
    return [node.text.strip() for node in root.iterfind("./versioning/versions/version")
            if node.text and node.text.strip()]


def update_metadata(repo_root: Union[str, Path], group_id: str, artifact_id: str,
                    version: str) -> Path:
    """Add ``version`` to the artifact's maven-metadata-local.xml."""
    metadata_path = artifact_dir(repo_root, group_id, artifact_id) / METADATA_FILENAME
    versions = _read_versions(metadata_path)
    if version not in versions:
        versions.append(version)

    metadata = ET.Element("metadata")
    ET.SubElement(metadata, "groupId").text = group_id
    ET.SubElement(metadata, "artifactId").text = artifact_id
    versioning = ET.SubElement(metadata, "versioning")
    ET.SubElement(versioning, "release").text = version
    versions_node = ET.SubElement(versioning, "versions")
    for known in versions:
        ET.SubElement(versions_node, "version").text = known
    ET.SubElement(versioning, "lastUpdated").text = (
        datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    )

    tree = ET.ElementTree(metadata)
    ET.indent(tree)
    metadata_path.parent.mkdir(parents=True, exist_ok=True)
    tree.write(metadata_path, encoding="UTF-8", xml_declaration=True)
    return metadata_path


def install_artifact(
    repo_root: Union[str, Path],
    content_file: Union[str, Path],
    pom_file: Union[str, Path],
    coordinate: str,
    version: str,
) -> Path:
    """
    Copy a content file and its POM into the repository.

    Args:
        repo_root: Repository root directory (validated by the caller)
        content_file: The jar (or other archive) to install
        pom_file: Descriptor installed next to it
        coordinate: ``artifactId`` or ``groupId/artifactId``
        version: Version to install under

    Returns:
        Path of the installed content file.
    """
    group_id, artifact_id = split_artifact_id(coordinate)
    content = Path(content_file)
    extension = content.suffix or DEFAULT_EXTENSION

    version_dir = artifact_dir(repo_root, group_id, artifact_id) / version
    version_dir.mkdir(parents=True, exist_ok=True)
    base_name = f"{artifact_id}-{version}"

    installed = version_dir / f"{base_name}{extension}"
    installed_pom = version_dir / f"{base_name}.pom"
    shutil.copyfile(content, installed)
    shutil.copyfile(pom_file, installed_pom)
    write_checksum(installed)
    write_checksum(installed_pom)
    update_metadata(repo_root, group_id, artifact_id, version)

    logger.info("Installed %s as %s:%s:%s -> %s",
                content, group_id, artifact_id, version, installed)
    return installed
