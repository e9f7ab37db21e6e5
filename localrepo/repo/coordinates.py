"""
Coordinate handling: turning repository paths and bare filenames into
Maven coordinates.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import List, Tuple, Union

from localrepo.errors import CoordinateGuessError, UsageError
from localrepo.repo.package import ArtifactEntry
from localrepo.repo.scanner import iter_artifact_files

logger = logging.getLogger(__name__)

DESCRIPTOR_EXTENSION = "pom"

# <artifact>-<version>.<ext> where the version starts with a digit
_VERSIONED_FILENAME_RE = re.compile(r"(.+)-(\d.+)\.(\w+)")


def _strip_extension(filename: str) -> str:
    base, dot, _ = filename.rpartition('.')
    return base if dot else filename


def descriptor_path_for(content_path: Union[str, Path]) -> Path:
    """Path of the POM that shares ``content_path``'s directory and base name."""
    content = Path(content_path)
    return content.parent / f"{_strip_extension(content.name)}.{DESCRIPTOR_EXTENSION}"


def group_id_for(group_dir: Union[str, Path], repo_root: Union[str, Path]) -> str:
    """Dotted groupId for the directory path between ``repo_root`` and ``group_dir``."""
    rel_path = os.path.relpath(os.path.abspath(group_dir), os.path.abspath(repo_root))
    if rel_path == os.curdir:
        return ""
    return rel_path.strip(os.sep).replace(os.sep, ".")


def resolve_entry(content_path: Union[str, Path], repo_root: Union[str, Path]) -> ArtifactEntry:
    """
    Build the ArtifactEntry for a content file found below ``repo_root``.

    The file's parent directory is the version, the grandparent is the
    artifactId and everything between the repository root and the
    great-grandparent is the groupId. No validation is done beyond this path
    arithmetic: a file that sits too close to the root gets a nonsensical
    groupId rather than an error.
    """
    content = Path(os.path.abspath(content_path))
    version_dir = content.parent
    artifact_dir = version_dir.parent
    return ArtifactEntry(
        group_id=group_id_for(artifact_dir.parent, repo_root),
        artifact_id=artifact_dir.name,
        version=version_dir.name,
        content_path=content,
        descriptor_path=descriptor_path_for(content),
    )


def read_artifact_entries(repo_root: Union[str, Path]) -> List[ArtifactEntry]:
    """Scan ``repo_root`` and resolve every content file found."""
    entries = [resolve_entry(path, repo_root) for path in iter_artifact_files(repo_root)]
    logger.debug("Resolved %d artifact entries in %s", len(entries), repo_root)
    return entries


def guess_coordinates(filepath: str) -> Tuple[str, str, str]:
    """
    Guess coordinates of a file from its Maven-style name.

    Example:
        Input  -  local/jars/foo-bar-1.0.6.jar
        Output - ("local/jars/foo-bar-1.0.6.jar", "foo-bar/foo-bar", "1.0.6")

    Raises:
        CoordinateGuessError: if the filename has no ``-<version>.<ext>`` suffix.
    """
    filename = os.path.basename(filepath)
    match = _VERSIONED_FILENAME_RE.search(filename)
    if match is None:
        raise CoordinateGuessError(filename)
    artifact_id, version, _ = match.groups()
    return filepath, f"{artifact_id}/{artifact_id}", version


def split_artifact_id(artifact_id: str) -> Tuple[str, str]:
    """
    Split a ``groupId/artifactId`` string; a bare ``artifactId`` is its own group.

    Raises:
        UsageError: for an empty group or more than one '/'.
    """
    tokens = artifact_id.split("/")
    while tokens and tokens[-1] == "":
        tokens.pop()
    if not tokens or len(tokens) > 2 or not tokens[0]:
        raise UsageError(f"Invalid groupId/artifactId: {artifact_id}", command="install")
    if len(tokens) == 1:
        return tokens[0], tokens[0]
    return tokens[0], tokens[1]
