"""Pytest configuration and shared fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from maskerad_filesystem.adapters.fs.local import LocalFileSystem
from maskerad_filesystem.adapters.pool.thread_pool import ThreadWorkerPool
from maskerad_filesystem.domain.entities import GameInfos

# ============================================================================
# Environment isolation
# ============================================================================
# Directory resolution reads HOME and the current directory. Both are pointed
# at temporary directories so tests never touch the real user directories.


@pytest.fixture
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty temporary directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def working_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change into an empty temporary working directory.

    Returns the directory as reported by Path.cwd(), which may differ from
    tmp_path when the temporary directory sits behind a symlink.
    """
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    return Path.cwd()


@pytest.fixture
def game_infos() -> GameInfos:
    """Application identity used across tests."""
    return GameInfos("test_filesystem_maskerad", "Malkaviel")


@pytest.fixture
def filesystem(home_dir: Path, working_dir: Path, game_infos: GameInfos) -> LocalFileSystem:
    """LocalFileSystem resolved with the Unix-like layout in temp directories."""
    return LocalFileSystem.new(game_infos, system="Linux")


@pytest.fixture
def worker_pool() -> Iterator[ThreadWorkerPool]:
    """Small worker pool, shut down after the test."""
    with ThreadWorkerPool(max_workers=2) as pool:
        yield pool
