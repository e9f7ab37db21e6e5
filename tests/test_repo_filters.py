"""
Tests for metadata extension filtering.
"""

import pytest

from localrepo.repo.filters import IGNORED_EXTENSIONS, filename_extension, is_artifact_file


@pytest.mark.parametrize("filename", [
    "bar-1.0.jar",
    "bar-1.0-sources.jar",
    "bar-1.0.war",
    "bar-1.0.tar.gz",
    "README",
])
def test_content_files_pass(filename):
    assert is_artifact_file(filename)


@pytest.mark.parametrize("filename", [
    "bar-1.0.pom",
    "bar-1.0.jar.sha1",
    "bar-1.0.jar.lastUpdated",
    "_remote.repositories",
    "resolver-status.properties",
    "maven-metadata-local.xml",
])
def test_metadata_files_rejected(filename):
    assert not is_artifact_file(filename)


def test_extension_is_text_after_last_dot():
    assert filename_extension("bar-1.0.jar.sha1") == "sha1"
    assert filename_extension("archive.tar.gz") == "gz"
    assert filename_extension("noext") == ""


def test_extension_match_is_exact():
    # Only whole extensions are excluded, not prefixes or other cases
    assert is_artifact_file("bar-1.0.pomx")
    assert is_artifact_file("bar-1.0.XML")
    assert "sha1" in IGNORED_EXTENSIONS
