"""Tests for VERSION file and Maven descriptor handling."""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from ci_release.core.version import Version
from ci_release.exceptions import BuildToolError, FileWriteError
from ci_release.project.maven import (
    build_versions_set_args,
    find_build_descriptors,
    set_project_version,
)
from ci_release.project.version_file import write_version_file


class TestVersionFile:
    """Tests for write_version_file()."""

    def test_write_overwrites(self, tmp_path: Path):
        path = tmp_path / "VERSION"
        path.write_text("1.2.3\nold junk\n")

        write_version_file(path, Version(1, 2, 4))

        assert path.read_text() == "1.2.4\n"

    def test_write_creates(self, tmp_path: Path):
        path = write_version_file(tmp_path / "VERSION", Version(0, 0, 1))
        assert path.read_text() == "0.0.1\n"

    def test_write_into_missing_directory(self, tmp_path: Path):
        """OS errors surface as FileWriteError."""
        with pytest.raises(FileWriteError, match="Could not write"):
            write_version_file(tmp_path / "missing" / "VERSION", Version(0, 0, 1))


class TestSetProjectVersion:
    """Tests for set_project_version()."""

    def test_args(self):
        assert build_versions_set_args("mvn", "1.2.4-SNAPSHOT") == [
            "mvn",
            "versions:set",
            "-DnewVersion=1.2.4-SNAPSHOT",
            "-DgenerateBackupPoms=false",
            "-DprocessAllModules",
        ]

    def test_runs_maven_in_project(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="[INFO] BUILD SUCCESS", returncode=0)

            output = set_project_version(tmp_path, "1.2.4-SNAPSHOT", executable="./mvnw")

            assert "BUILD SUCCESS" in output
            assert mock_run.call_args[0][0][0] == "./mvnw"
            assert mock_run.call_args.kwargs["cwd"] == tmp_path
            assert mock_run.call_args.kwargs["check"] is True

    def test_maven_failure(self, tmp_path: Path):
        """Maven's stdout is kept when stderr is empty."""
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                1, "mvn", output="[ERROR] No pom.xml", stderr=""
            )

            with pytest.raises(BuildToolError) as exc_info:
                set_project_version(tmp_path, "1.2.4-SNAPSHOT")

            assert "exit code 1" in str(exc_info.value)
            assert exc_info.value.stderr == "[ERROR] No pom.xml"

    def test_maven_missing(self, tmp_path: Path):
        with patch("subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("mvn")

            with pytest.raises(BuildToolError, match="mvn not found"):
                set_project_version(tmp_path, "1.2.4-SNAPSHOT")


class TestFindBuildDescriptors:
    """Tests for find_build_descriptors()."""

    def test_root_and_modules(self, tmp_path: Path):
        (tmp_path / "pom.xml").write_text("<project/>")
        for module in ("core", "api"):
            (tmp_path / module).mkdir()
            (tmp_path / module / "pom.xml").write_text("<project/>")
        (tmp_path / "docs").mkdir()

        found = find_build_descriptors(tmp_path, ["pom.xml", "*/pom.xml"])

        assert found == [Path("pom.xml"), Path("api/pom.xml"), Path("core/pom.xml")]

    def test_nested_modules_not_matched(self, tmp_path: Path):
        """The default globs only reach one directory level."""
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "pom.xml").write_text("<project/>")

        assert find_build_descriptors(tmp_path, ["pom.xml", "*/pom.xml"]) == []

    def test_duplicates_dropped(self, tmp_path: Path):
        (tmp_path / "pom.xml").write_text("<project/>")
        assert find_build_descriptors(tmp_path, ["pom.xml", "*.xml"]) == [Path("pom.xml")]

    def test_hidden_directories_skipped(self, tmp_path: Path):
        """``*`` does not reach into hidden directories such as .mvn."""
        for module in (".mvn", "core"):
            (tmp_path / module).mkdir()
            (tmp_path / module / "pom.xml").write_text("<project/>")

        assert find_build_descriptors(tmp_path, ["*/pom.xml"]) == [Path("core/pom.xml")]

    def test_explicit_hidden_pattern(self, tmp_path: Path):
        """A pattern that names a hidden directory still matches it."""
        (tmp_path / ".mvn").mkdir()
        (tmp_path / ".mvn" / "pom.xml").write_text("<project/>")

        assert find_build_descriptors(tmp_path, [".mvn/pom.xml"]) == [Path(".mvn/pom.xml")]
