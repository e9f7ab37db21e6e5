"""
Artifact dataclasses for localrepo repository scanning.

This module contains dataclasses that are used across different modules
to avoid circular import issues.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List


@dataclass(frozen=True, order=True)
class ArtifactEntry:
    """One content file discovered in the repository."""
    group_id: str         # Dot-separated, from the directories above the artifact dir
    artifact_id: str      # Name of the artifact directory
    version: str          # Name of the version directory (parent of the file)
    content_path: Path    # Absolute path to the content file (jar, war, ...)
    descriptor_path: Path  # Same base name with a .pom extension, may not exist

    @property
    def coordinate_key(self) -> str:
        """``artifactId`` when group and artifact match, else ``groupId/artifactId``."""
        return coordinate_key(self.group_id, self.artifact_id)

    @property
    def filename(self) -> str:
        return self.content_path.name


def coordinate_key(group_id: str, artifact_id: str) -> str:
    if group_id == artifact_id:
        return artifact_id
    return f"{group_id}/{artifact_id}"


@dataclass
class ArtifactGroup:
    """Entries that share one coordinate key, in discovery order."""
    key: str
    entries: List[ArtifactEntry] = field(default_factory=list)

    @property
    def versions(self) -> List[str]:
        """Distinct versions in order of first appearance."""
        seen = []
        for entry in self.entries:
            if entry.version not in seen:
                seen.append(entry.version)
        return seen

    @property
    def versions_text(self) -> str:
        return ", ".join(self.versions)
