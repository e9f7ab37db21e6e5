"""
Tests for coordinate resolution and guessing.
"""

import pytest

from localrepo.errors import CoordinateGuessError, UsageError
from localrepo.repo.coordinates import (
    descriptor_path_for,
    group_id_for,
    guess_coordinates,
    read_artifact_entries,
    resolve_entry,
    split_artifact_id,
)


class TestResolveEntry:

    def test_basic_layout(self, make_repo):
        root = make_repo(["com/foo/bar/1.0/bar-1.0.jar", "com/foo/bar/1.0/bar-1.0.pom"])
        entry = resolve_entry(root / "com/foo/bar/1.0/bar-1.0.jar", root)

        assert entry.group_id == "com.foo"
        assert entry.artifact_id == "bar"
        assert entry.version == "1.0"
        assert entry.content_path == root / "com/foo/bar/1.0/bar-1.0.jar"
        assert entry.descriptor_path == root / "com/foo/bar/1.0/bar-1.0.pom"
        assert entry.coordinate_key == "com.foo/bar"

    def test_deep_group(self, make_repo):
        path = "org/apache/commons/commons-lang3/3.12.0/commons-lang3-3.12.0.jar"
        root = make_repo([path])
        entry = resolve_entry(root / path, root)
        assert entry.group_id == "org.apache.commons"
        assert entry.artifact_id == "commons-lang3"
        assert entry.version == "3.12.0"

    def test_group_equal_to_artifact(self, make_repo):
        root = make_repo(["junit/junit/4.13/junit-4.13.jar"])
        entry = resolve_entry(root / "junit/junit/4.13/junit-4.13.jar", root)
        assert entry.group_id == "junit"
        assert entry.coordinate_key == "junit"

    def test_descriptor_need_not_exist(self, make_repo):
        root = make_repo(["g/a/1.0/a-1.0.jar"])
        entry = resolve_entry(root / "g/a/1.0/a-1.0.jar", root)
        assert not entry.descriptor_path.exists()
        assert entry.descriptor_path.name == "a-1.0.pom"

    def test_artifact_directly_under_root(self, make_repo):
        root = make_repo(["bar/1.0/bar-1.0.jar"])
        entry = resolve_entry(root / "bar/1.0/bar-1.0.jar", root)
        assert entry.group_id == ""
        assert entry.coordinate_key == "/bar"

    def test_malformed_tree_does_not_crash(self, make_repo):
        root = make_repo(["1.0/x-1.0.jar"])
        entry = resolve_entry(root / "1.0/x-1.0.jar", root)
        assert entry.version == "1.0"
        assert entry.artifact_id == root.name

    def test_invariant_holds_for_every_scanned_file(self, make_repo):
        root = make_repo([
            "com/foo/bar/1.0/bar-1.0.jar",
            "com/foo/bar/2.0/bar-2.0.jar",
            "org/a/b/c/lib/0.1/lib-0.1.zip",
            "junit/junit/4.13/junit-4.13.jar",
        ])
        entries = read_artifact_entries(root)
        assert len(entries) == 4
        for entry in entries:
            version_dir = entry.content_path.parent
            assert version_dir.name == entry.version
            assert version_dir.parent.name == entry.artifact_id
            group_dir = version_dir.parent.parent
            assert group_dir.relative_to(root).as_posix().replace("/", ".") == entry.group_id


def test_group_id_for_strips_separators(tmp_path):
    assert group_id_for(tmp_path / "com" / "foo", tmp_path) == "com.foo"
    assert group_id_for(tmp_path, tmp_path) == ""


@pytest.mark.parametrize("content, descriptor", [
    ("bar-1.0.jar", "bar-1.0.pom"),
    ("lib-2.0.tar.gz", "lib-2.0.tar.pom"),
    ("noext", "noext.pom"),
])
def test_descriptor_path_for(tmp_path, content, descriptor):
    assert descriptor_path_for(tmp_path / content) == tmp_path / descriptor


class TestGuessCoordinates:

    def test_reference_example(self):
        assert guess_coordinates("local/jars/foo-bar-1.0.6.jar") == (
            "local/jars/foo-bar-1.0.6.jar", "foo-bar/foo-bar", "1.0.6"
        )

    def test_qualified_version(self):
        _, coordinate, version = guess_coordinates("foo-bar-1.0.6-SNAPSHOT.jar")
        assert coordinate == "foo-bar/foo-bar"
        assert version == "1.0.6-SNAPSHOT"

    def test_hyphenated_artifact(self):
        assert guess_coordinates("commons-io-2.11.0.jar")[1:] == ("commons-io/commons-io", "2.11.0")

    @pytest.mark.parametrize("filename", ["foo.jar", "foo-bar.jar", "foo-1", "libs/"])
    def test_unmatched_names_raise(self, filename):
        with pytest.raises(CoordinateGuessError):
            guess_coordinates(filename)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            guess_coordinates("nothing-here.jar")


class TestSplitArtifactId:

    def test_group_and_artifact(self):
        assert split_artifact_id("com.foo/bar") == ("com.foo", "bar")

    def test_bare_artifact_is_its_own_group(self):
        assert split_artifact_id("bar") == ("bar", "bar")

    def test_trailing_slash_ignored(self):
        assert split_artifact_id("bar/") == ("bar", "bar")

    @pytest.mark.parametrize("value", ["a/b/c", "", "/bar"])
    def test_invalid(self, value):
        with pytest.raises(UsageError) as excinfo:
            split_artifact_id(value)
        assert excinfo.value.command == "install"
