"""
Text reports over an ArtifactIndex.

Four listing modes are supported:

- concise:     ``<coordinate> (<v1>, <v2>, ...)`` per coordinate
- description: concise line plus the project description from the POM
- filename:    one column-aligned line per content file with size and mtime
- detail:      concise line plus the whole POM tree pretty-printed
"""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Iterator

from .descriptor import read_description, read_details
from .grouping import ArtifactIndex
from .package import ArtifactEntry, ArtifactGroup

logger = logging.getLogger(__name__)

NAME_WIDTH = 20
COORDINATE_WIDTH = 30
FILENAME_WIDTH = 30
LABEL_WIDTH = 62
LINE_WIDTH = 70
SIZE_WIDTH = 10


class ListingMode(Enum):
    CONCISE = "concise"
    DESCRIPTION = "description"
    FILENAME = "filename"
    DETAIL = "detail"


def ljustify(value, width: int) -> str:
    """Trim, then left-justify to ``width``; wider values are kept whole."""
    text = str(value).strip()
    if len(text) > width:
        return text
    return text.ljust(width)


def rjustify(value, width: int) -> str:
    """Trim, then right-justify to ``width``; wider values are kept whole."""
    text = str(value).strip()
    if len(text) > width:
        return text
    return text.rjust(width)


class Reporter:
    """Render an index in one ListingMode."""

    def __init__(self, index: ArtifactIndex, mode: ListingMode = ListingMode.CONCISE,
                 date_format: str = "%c"):
        self.index = index
        self.mode = mode
        self.date_format = date_format

    def lines(self) -> Iterator[str]:
        render_group = {
            ListingMode.CONCISE: self._concise,
            ListingMode.DESCRIPTION: self._description,
            ListingMode.DETAIL: self._detail,
        }.get(self.mode)

        for group in self.index:
            if self.mode is ListingMode.FILENAME:
                for entry in group.entries:
                    yield self._filename(group, entry)
            else:
                yield render_group(group)

    def render(self) -> str:
        return "\n".join(self.lines())

    def _concise(self, group: ArtifactGroup) -> str:
        return f"{group.key} ({group.versions_text})"

    def _description(self, group: ArtifactGroup) -> str:
        description = ""
        for entry in group.entries:
            found = read_description(entry.descriptor_path)
            if found is not None:
                description = found
                break
        return f"{ljustify(group.key, NAME_WIDTH)} ({group.versions_text}) -- {description}"

    def _detail(self, group: ArtifactGroup) -> str:
        details = read_details(group.entries[0].descriptor_path) if group.entries else ""
        return f"{ljustify(group.key, NAME_WIDTH)} ({group.versions_text})\n{details}"

    def _filename(self, group: ArtifactGroup, entry: ArtifactEntry) -> str:
        try:
            stat = entry.content_path.stat()
            size, mtime = stat.st_size, stat.st_mtime
        except OSError as exc:
            # Dangling links and files removed mid-listing show as empty
            logger.debug("Cannot stat %s: %s", entry.content_path, exc)
            size, mtime = 0, 0
        coordinate = ljustify(f'[{group.key} "{entry.version}"]', COORDINATE_WIDTH)
        name = ljustify(entry.filename, FILENAME_WIDTH)
        label = ljustify(f"{coordinate} {name}", LABEL_WIDTH)
        size_text = rjustify(size, min(LINE_WIDTH - len(label), SIZE_WIDTH))
        modified = datetime.fromtimestamp(mtime).strftime(self.date_format)
        return f"{label} {size_text} {modified}"
