"""Tests for ${#} version scanning."""

import asyncio
from pathlib import Path

import pytest

from core import ResolutionContext, VersionOutcome, VersionStatus
from template_resolver.versioning import (
    LocalFilesystem,
    VersionScanner,
    build_version_regex,
    destination_directory,
)


def _touch(directory: Path, *names: str) -> None:
    for name in names:
        (directory / name).write_text("")


def _next(scanner: VersionScanner, pattern: str, ctx: ResolutionContext) -> VersionOutcome:
    return asyncio.run(scanner.next_version(pattern, ctx))


class TestBuildVersionRegex:
    """Regex derived from the file name part of a pattern."""

    def test_no_marker(self):
        assert build_version_regex("part.stl") is None

    def test_captures_number(self):
        regex = build_version_regex("part_v${#}.stl")
        assert regex.fullmatch("part_v12.stl").group("version") == "12"

    def test_literal_text_escaped(self):
        regex = build_version_regex("part (copy)+${#}.stl")
        assert regex.fullmatch("part (copy)+3.stl")
        assert not regex.fullmatch("part copy+3.stl")
        assert not regex.fullmatch("part (copy)+3xstl")

    @pytest.mark.parametrize("name", ["part_v0.stl", "part_v01.stl", "part_v.stl", "part_vx.stl"])
    def test_rejects_zero_and_leading_zeros(self, name):
        assert build_version_regex("part_v${#}.stl").search(name) is None

    def test_repeated_marker_must_repeat_number(self):
        regex = build_version_regex("${#}_part_v${#}.stl")
        assert regex.fullmatch("2_part_v2.stl").group("version") == "2"
        assert regex.fullmatch("3_part_v4.stl") is None


class TestDestinationDirectory:
    def test_relative_pattern_uses_file_directory(self, proj_ctx):
        assert destination_directory("part_v${#}.stl", proj_ctx) == Path("/proj/src")

    def test_relative_pattern_with_subdirectory(self, proj_ctx):
        assert destination_directory("../out/part_v${#}.stl", proj_ctx) == Path("/proj/out")

    def test_absolute_pattern(self, proj_ctx):
        assert destination_directory("/exports/part_v${#}.stl", proj_ctx) == Path("/exports")


class TestVersionScanner:
    """Scanning real directories."""

    def test_not_requested_without_marker(self, proj_ctx, make_fs):
        fs = make_fs()
        outcome = _next(VersionScanner(fs), "part.stl", proj_ctx)
        assert outcome == VersionOutcome.not_requested()
        assert outcome.code == -1
        assert fs.calls == []

    def test_next_after_highest_ignores_gaps(self, project, project_ctx):
        _touch(project / "src", "part_v1.stl", "part_v2.stl", "part_v5.stl")
        outcome = _next(VersionScanner(), "part_v${#}.stl", project_ctx)
        assert outcome.status is VersionStatus.RESOLVED
        assert outcome.number == 6

    def test_empty_directory_starts_at_one(self, project, project_ctx):
        (project / "out").mkdir()
        outcome = _next(VersionScanner(), "../out/part_v${#}.stl", project_ctx)
        assert outcome.number == 1

    def test_creates_missing_directory(self, project, project_ctx):
        outcome = _next(VersionScanner(), "exports/part_v${#}.stl", project_ctx)
        assert outcome.number == 1
        assert (project / "src" / "exports").is_dir()

    def test_absolute_pattern(self, tmp_path, project_ctx):
        target = tmp_path / "abs"
        target.mkdir()
        _touch(target, "part_v7.stl")
        outcome = _next(VersionScanner(), f"{target}/part_v${{#}}.stl", project_ctx)
        assert outcome.number == 8

    def test_entries_match_anywhere_in_name(self, project, project_ctx):
        _touch(
            project / "src",
            "part_v2.stl",
            "part_v9.stl.bak",
            "oldpart_v8.stl",
            "part_v07.stl",
            "part_v4.3mf",
        )
        outcome = _next(VersionScanner(), "part_v${#}.stl", project_ctx)
        assert outcome.number == 10

    def test_trailing_suffix_counts(self, project, project_ctx):
        _touch(project / "src", "part_v9.stl.bak")
        outcome = _next(VersionScanner(), "part_v${#}.stl", project_ctx)
        assert outcome.number == 10

    def test_null_byte_in_path_is_scan_failure(self, project_ctx):
        outcome = _next(VersionScanner(), "out\x00dir/part_v${#}.stl", project_ctx)
        assert outcome == VersionOutcome.scan_failed()

    def test_large_numbers(self, project, project_ctx):
        _touch(project / "src", "part_v99999999999999999999.stl")
        outcome = _next(VersionScanner(), "part_v${#}.stl", project_ctx)
        assert outcome.number == 100000000000000000000

    def test_missing_parent_is_scan_failure(self, project, project_ctx):
        """Only one directory level is created."""
        outcome = _next(VersionScanner(), "a/b/part_v${#}.stl", project_ctx)
        assert outcome == VersionOutcome.scan_failed()
        assert outcome.code == -2
        assert not (project / "src" / "a").exists()

    def test_marker_only_in_directory(self, proj_ctx, make_fs):
        fs = make_fs()
        outcome = _next(VersionScanner(fs), "build_${#}/part.stl", proj_ctx)
        assert outcome.number == 1
        assert fs.calls == []


class TestVersionScannerCollaborators:
    """Scanning through a stubbed filesystem."""

    def test_listing_failure(self, proj_ctx, make_fs):
        fs = make_fs({"/proj/src": ["part_v1.stl"]}, fail_listing=True)
        outcome = _next(VersionScanner(fs), "part_v${#}.stl", proj_ctx)
        assert outcome.status is VersionStatus.SCAN_FAILED

    def test_existing_directory_not_recreated(self, proj_ctx, make_fs):
        fs = make_fs({"/proj/src": ["part_v1.stl", "part_v3.stl"]})
        outcome = _next(VersionScanner(fs), "part_v${#}.stl", proj_ctx)
        assert outcome.number == 4
        assert ("make_dir", Path("/proj/src")) not in fs.calls

    def test_missing_directory_created_once(self, proj_ctx, make_fs):
        fs = make_fs()
        outcome = _next(VersionScanner(fs), "out/part_v${#}.stl", proj_ctx)
        assert outcome.number == 1
        assert fs.calls == [
            ("exists", Path("/proj/src/out")),
            ("make_dir", Path("/proj/src/out")),
            ("list_dir", Path("/proj/src/out")),
        ]

    def test_local_filesystem_make_dir_is_single_level(self, tmp_path):
        fs = LocalFilesystem()
        with pytest.raises(FileNotFoundError):
            fs.make_dir(tmp_path / "x" / "y")
        fs.make_dir(tmp_path / "x")
        assert fs.exists(tmp_path / "x")
        assert fs.list_dir(tmp_path) == ["x"]
