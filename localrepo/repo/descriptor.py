"""
Project descriptor (POM) reading and generation.

Descriptors are kept as a generic tree instead of a typed model: an element
with child elements becomes a dict mapping each child tag to the list of its
occurrences, an element without child elements becomes its text. The root is
wrapped as ``{root_tag: node}``, so a POM description reads as
``tree["project"]["description"][0]``.
"""

from __future__ import annotations

import json
import logging
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, Optional, Union
from xml.sax.saxutils import escape

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "(No description available)"
NO_DETAILS = "(No details available)"

DEFAULT_POM_FORMAT = """<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance" xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd">
  <modelVersion>4.0.0</modelVersion>
  <groupId>{group_id}</groupId>
  <artifactId>{artifact_id}</artifactId>
  <version>{version}</version>
  <name>{name}</name>
</project>
"""


def _local_name(tag: str) -> str:
    # "{http://maven.apache.org/POM/4.0.0}project" -> "project"
    return tag.rsplit("}", 1)[-1]


def element_to_tree(element: ET.Element) -> Any:
    """Convert an element into the generic descriptor tree."""
    children = list(element)
    if not children:
        return (element.text or "").strip()
    node: Dict[str, list] = {}
    for child in children:
        node.setdefault(_local_name(child.tag), []).append(element_to_tree(child))
    return node


def read_descriptor(pom_path: Union[str, Path]) -> Optional[Dict[str, Any]]:
    """Parse a descriptor file; None when it is missing or not valid XML."""
    path = Path(pom_path)
    if not path.is_file():
        return None
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError) as exc:
        logger.debug("Unreadable descriptor %s: %s", path, exc)
        return None
    return {_local_name(root.tag): element_to_tree(root)}


def read_description(pom_path: Union[str, Path]) -> Optional[str]:
    """
    Project description from a descriptor.

    Returns:
        The description text, NO_DESCRIPTION when the descriptor is missing
        or unparsable, or None when it parses but has no description.
    """
    tree = read_descriptor(pom_path)
    if tree is None:
        return NO_DESCRIPTION
    project = tree.get("project")
    if not isinstance(project, dict):
        return None
    descriptions = project.get("description") or []
    for description in descriptions:
        if isinstance(description, str):
            return description
    return None


def read_details(pom_path: Union[str, Path]) -> str:
    """Pretty-printed descriptor tree, or NO_DETAILS."""
    tree = read_descriptor(pom_path)
    if tree is None:
        return NO_DETAILS
    return json.dumps(tree, indent=2, ensure_ascii=False)


def default_pom(group_id: str, artifact_id: str, version: str) -> str:
    """Minimal POM text for an artifact installed without one."""
    return DEFAULT_POM_FORMAT.format(
        group_id=escape(group_id),
        artifact_id=escape(artifact_id),
        version=escape(version),
        name=escape(artifact_id),
    )


def write_default_pom(group_id: str, artifact_id: str, version: str) -> Path:
    """Write the minimal POM to a temporary file; the caller removes it."""
    with tempfile.NamedTemporaryFile(
        "w", prefix="pom", suffix=".xml", delete=False, encoding="utf-8"
    ) as handle:
        handle.write(default_pom(group_id, artifact_id, version))
    logger.debug("Generated default POM for %s/%s %s at %s",
                 group_id, artifact_id, version, handle.name)
    return Path(handle.name)
