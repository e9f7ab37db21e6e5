"""
Metadata file filtering for repository scans.
"""

from typing import FrozenSet

# Checksums, descriptors, tracking and update-marker files written next to
# artifacts by Maven and friends.
IGNORED_EXTENSIONS: FrozenSet[str] = frozenset({
    'lastUpdated',
    'pom',
    'properties',
    'repositories',
    'sha1',
    'xml',
})


def filename_extension(filename: str) -> str:
    """Return the text after the last '.', or '' when there is none."""
    _, dot, ext = filename.rpartition('.')
    return ext if dot else ''


def is_artifact_file(filename: str) -> bool:
    """True unless the filename carries one of the metadata extensions."""
    if '.' not in filename:
        return True
    return filename_extension(filename) not in IGNORED_EXTENSIONS
