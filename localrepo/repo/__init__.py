"""
Repository indexing, listing and installation.
"""

from .package import ArtifactEntry, ArtifactGroup, coordinate_key
from .filters import IGNORED_EXTENSIONS, is_artifact_file
from .scanner import iter_artifact_files, scan_artifact_files
from .coordinates import (
    descriptor_path_for,
    guess_coordinates,
    read_artifact_entries,
    resolve_entry,
    split_artifact_id,
)
from .grouping import ArtifactIndex
from .reporter import ListingMode, Reporter
from .installer import install_artifact

__all__ = [
    'ArtifactEntry',
    'ArtifactGroup',
    'coordinate_key',
    'IGNORED_EXTENSIONS',
    'is_artifact_file',
    'iter_artifact_files',
    'scan_artifact_files',
    'descriptor_path_for',
    'guess_coordinates',
    'read_artifact_entries',
    'resolve_entry',
    'split_artifact_id',
    'ArtifactIndex',
    'ListingMode',
    'Reporter',
    'install_artifact',
]
