"""
Grouping of artifact entries by coordinate key.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from .package import ArtifactEntry, ArtifactGroup


class ArtifactIndex:
    """Artifact entries grouped by coordinate key, in first-appearance order."""

    def __init__(self, entries: Iterable[ArtifactEntry]):
        self.entries: List[ArtifactEntry] = list(entries)
        self._groups: Dict[str, ArtifactGroup] = {}
        for entry in self.entries:
            key = entry.coordinate_key
            group = self._groups.get(key)
            if group is None:
                group = self._groups[key] = ArtifactGroup(key=key)
            group.entries.append(entry)

    def __iter__(self) -> Iterator[ArtifactGroup]:
        return iter(self._groups.values())

    def __len__(self) -> int:
        return len(self._groups)

    def __contains__(self, key: str) -> bool:
        return key in self._groups

    def keys(self) -> List[str]:
        return list(self._groups)

    def get(self, key: str) -> Optional[ArtifactGroup]:
        return self._groups.get(key)

    def versions(self, key: str) -> List[str]:
        """Distinct versions of ``key``; empty when the key is unknown."""
        group = self._groups.get(key)
        return group.versions if group else []

    def sorted(self) -> 'ArtifactIndex':
        """
        A new index over the same entries sorted lexicographically.

        Entries sort on (groupId, artifactId, version, content path), so both
        the groups and the versions inside each group come out in display order.
        """
        return ArtifactIndex(sorted(self.entries))
