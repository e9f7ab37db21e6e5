"""
Tests for POM reading and generation.
"""

import json

from localrepo.repo.descriptor import (
    NO_DESCRIPTION,
    NO_DETAILS,
    default_pom,
    read_description,
    read_descriptor,
    read_details,
    write_default_pom,
)


def test_tree_drops_namespaces(tmp_path, pom):
    path = tmp_path / "bar-1.0.pom"
    path.write_text(pom("com.foo", "bar", "1.0", "A library"), encoding="utf-8")

    tree = read_descriptor(path)

    assert list(tree) == ["project"]
    assert tree["project"]["modelVersion"] == ["4.0.0"]
    assert tree["project"]["description"] == ["A library"]


def test_repeated_children_become_lists(tmp_path):
    path = tmp_path / "deps.pom"
    path.write_text(
        "<project><dependencies>"
        "<dependency><artifactId>a</artifactId></dependency>"
        "<dependency><artifactId>b</artifactId></dependency>"
        "</dependencies></project>",
        encoding="utf-8",
    )
    tree = read_descriptor(path)
    dependencies = tree["project"]["dependencies"][0]["dependency"]
    assert [d["artifactId"] for d in dependencies] == [["a"], ["b"]]


def test_missing_and_broken_descriptors(tmp_path):
    broken = tmp_path / "broken.pom"
    broken.write_text("<project><description>", encoding="utf-8")

    assert read_descriptor(tmp_path / "missing.pom") is None
    assert read_descriptor(broken) is None
    assert read_description(tmp_path / "missing.pom") == NO_DESCRIPTION
    assert read_description(broken) == NO_DESCRIPTION
    assert read_details(broken) == NO_DETAILS


def test_description_absent_from_valid_pom(tmp_path, pom):
    path = tmp_path / "bar-1.0.pom"
    path.write_text(pom("com.foo", "bar", "1.0"), encoding="utf-8")
    assert read_description(path) is None


def test_details_are_pretty_printed_tree(tmp_path, pom):
    path = tmp_path / "bar-1.0.pom"
    path.write_text(pom("com.foo", "bar", "1.0", "A library"), encoding="utf-8")

    details = read_details(path)

    assert "\n" in details
    assert json.loads(details) == read_descriptor(path)


def test_default_pom_round_trip(tmp_path):
    path = tmp_path / "default.pom"
    path.write_text(default_pom("com.example", "demo", "1.2"), encoding="utf-8")

    project = read_descriptor(path)["project"]

    assert project["groupId"] == ["com.example"]
    assert project["artifactId"] == ["demo"]
    assert project["version"] == ["1.2"]
    assert project["name"] == ["demo"]


def test_default_pom_escapes_values(tmp_path):
    path = tmp_path / "escaped.pom"
    path.write_text(default_pom("g", "a&b", "1<2"), encoding="utf-8")
    project = read_descriptor(path)["project"]
    assert project["artifactId"] == ["a&b"]
    assert project["version"] == ["1<2"]


def test_write_default_pom_creates_temp_file():
    path = write_default_pom("g", "a", "1.0")
    try:
        assert path.suffix == ".xml"
        assert path.name.startswith("pom")
        assert read_descriptor(path)["project"]["artifactId"] == ["a"]
    finally:
        path.unlink()
