"""Pytest configuration and shared fixtures for appicons tests."""

from pathlib import Path
from typing import Callable, Tuple

import pytest


def write_file(path: Path, content: str = "") -> Path:
    """Create path (and its parents) with the given text content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def make_file() -> Callable[..., Path]:
    """Return a helper that creates a file with its parent directories."""
    return write_file


@pytest.fixture
def data_dirs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Tuple[Path, Path]:
    """Two empty XDG data directories, d1 before d2 in XDG_DATA_DIRS."""
    d1 = tmp_path / "d1"
    d2 = tmp_path / "d2"
    d1.mkdir()
    d2.mkdir()
    monkeypatch.setenv("XDG_DATA_DIRS", f"{d1}:{d2}")
    return d1, d2


@pytest.fixture
def desktop_file(make_file) -> Callable[..., Path]:
    """Return a helper writing a [Desktop Entry] file from key/value pairs."""

    def _make(path: Path, name: str = "", icon: str = "", exec_cmd: str = "") -> Path:
        lines = ["[Desktop Entry]", "Type=Application"]
        if name:
            lines.append(f"Name={name}")
        if icon:
            lines.append(f"Icon={icon}")
        if exec_cmd:
            lines.append(f"Exec={exec_cmd}")
        return make_file(path, "\n".join(lines) + "\n")

    return _make
