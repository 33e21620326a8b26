"""Shared fixtures and collaborator stubs."""

from pathlib import Path

import pytest

from core import ResolutionContext


class RecordingNotifier:
    """Notifier that remembers every message."""

    def __init__(self):
        self.messages: list[str] = []

    def error(self, message: str) -> None:
        self.messages.append(message)


class FakeFilesystem:
    """In-memory Filesystem with call recording.

    directories maps a directory path to its entry names.
    """

    def __init__(self, directories: dict[str, list[str]] | None = None, fail_listing=False):
        self.directories = {Path(k): list(v) for k, v in (directories or {}).items()}
        self.fail_listing = fail_listing
        self.calls: list[tuple[str, Path]] = []

    def exists(self, path: Path) -> bool:
        self.calls.append(("exists", path))
        return path in self.directories

    def make_dir(self, path: Path) -> None:
        self.calls.append(("make_dir", path))
        self.directories[path] = []

    def list_dir(self, path: Path) -> list[str]:
        self.calls.append(("list_dir", path))
        if self.fail_listing:
            raise PermissionError(13, "Permission denied", str(path))
        return list(self.directories[path])


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def proj_ctx():
    """Context for /proj/src/part.scad exported as stl."""
    return ResolutionContext(
        file=Path("/proj/src/part.scad"),
        workspace_folder=Path("/proj"),
        export_extension="stl",
    )


@pytest.fixture
def project(tmp_path):
    """Real project tree: <tmp>/proj/src/part.scad."""
    root = tmp_path / "proj"
    src = root / "src"
    src.mkdir(parents=True)
    scad = src / "part.scad"
    scad.write_text("cube(10);\n")
    return root


@pytest.fixture
def project_ctx(project):
    return ResolutionContext(
        file=project / "src" / "part.scad",
        workspace_folder=project,
        export_extension="stl",
    )


@pytest.fixture
def make_fs():
    """Factory for FakeFilesystem instances."""
    return FakeFilesystem
