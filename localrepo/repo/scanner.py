"""Repository scanner for local Maven repositories.

A local repository nests content files as
``<group path>/<artifactId>/<version>/<files>``. The scanner treats every
directory as exactly one of two things:

- a branch: it has at least one (non-hidden) sub-directory. All
  sub-directories are scanned and any files sitting next to them are ignored.
- a leaf: it has no sub-directories. Its files are candidate content files,
  minus the metadata files rejected by :func:`is_artifact_file`.

Files and sub-directories are never combined as siblings, which is what keeps
``maven-metadata-local.xml`` and friends at the artifact level out of the
listing. Entries whose name starts with '.' are skipped at every depth.

The walk uses an explicit stack instead of recursion so deep trees cannot
exhaust the interpreter stack; the output order is the same as a recursive
depth-first walk over sorted children.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, List, Tuple, Union

from localrepo.repo.filters import is_artifact_file

logger = logging.getLogger(__name__)


def _list_children(directory: Path) -> Tuple[List[Path], List[Path]]:
    """Split the visible children of ``directory`` into (dirs, non-dirs)."""
    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        # Same policy as os.walk: an unreadable directory contributes nothing.
        logger.warning("Cannot list %s: %s", directory, exc)
        return [], []

    subdirs: List[Path] = []
    nondirs: List[Path] = []
    for child in children:
        if child.name.startswith('.'):
            continue
        if child.is_dir():
            subdirs.append(child)
        else:
            nondirs.append(child)
    return subdirs, nondirs


def iter_artifact_files(root: Union[str, Path]) -> Iterator[Path]:
    """
    Yield the content files below ``root``.

    Args:
        root: Repository root (or a subtree of it). Must be a directory;
            callers validate this with ``require_directory``.

    Yields:
        Absolute paths of qualifying content files, in depth-first order.
    """
    root_path = Path(os.path.abspath(root))
    pending: List[Path] = [root_path]

    while pending:
        directory = pending.pop()
        subdirs, nondirs = _list_children(directory)

        if subdirs:
            if nondirs:
                logger.debug(
                    "Ignoring %d file(s) beside sub-directories in %s",
                    len(nondirs), directory,
                )
            # Reversed so the first child is the next one popped.
            pending.extend(reversed(subdirs))
            continue

        for candidate in nondirs:
            if is_artifact_file(candidate.name):
                yield candidate


def scan_artifact_files(root: Union[str, Path]) -> List[Path]:
    """Return :func:`iter_artifact_files` as a list."""
    files = list(iter_artifact_files(root))
    logger.debug("Found %d artifact file(s) under %s", len(files), root)
    return files
