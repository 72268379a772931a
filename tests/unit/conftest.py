"""Shared fixtures for unit tests.

Key Fixtures:
    - repo_workdir: A temporary directory used as a confinement root
    - entries_file: Factory writing a list of paths to a file, one per line
"""

from pathlib import Path

import pytest


@pytest.fixture
def repo_workdir(tmp_path) -> Path:
    """Provide an existing workdir for joins that should land on disk."""
    workdir = tmp_path / "repo"
    workdir.mkdir()
    return workdir


@pytest.fixture
def entries_file(tmp_path):
    """Return a function that writes paths to a file and returns its location."""

    def _write(paths, name="entries.txt"):
        path = tmp_path / name
        path.write_text("\n".join(paths) + "\n", encoding="utf-8")
        return path

    return _write
