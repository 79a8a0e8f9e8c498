"""Pytest configuration and fixtures"""

import logging
import os
from pathlib import Path
from typing import Callable, Generator

import pytest
import structlog

from fileio.infrastructure.logging import FILE_SYSTEM_LOGGER


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Undo any structlog or channel configuration a test performed"""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    channel = logging.getLogger(FILE_SYSTEM_LOGGER)
    channel.handlers.clear()
    channel.propagate = True
    channel.setLevel(logging.NOTSET)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a small directory tree

    tree/
        a.txt
        empty/
        sub/
            b.txt
            deeper/
                c.txt
    """
    root = tmp_path / "tree"
    (root / "empty").mkdir(parents=True)
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "a.txt").write_text("alpha", encoding="utf-8")
    (root / "sub" / "b.txt").write_text("beta", encoding="utf-8")
    (root / "sub" / "deeper" / "c.txt").write_text("gamma", encoding="utf-8")
    return root


@pytest.fixture
def deny_removal(monkeypatch) -> Callable[[Path], None]:
    """Make os.unlink and os.rmdir fail for registered paths"""
    denied = set()
    real_unlink = os.unlink
    real_rmdir = os.rmdir

    def guarded(real):
        def remove(path, *args, **kwargs):
            if Path(path) in denied:
                raise PermissionError(13, "Permission denied", str(path))
            return real(path, *args, **kwargs)
        return remove

    monkeypatch.setattr(os, "unlink", guarded(real_unlink))
    monkeypatch.setattr(os, "rmdir", guarded(real_rmdir))

    return lambda path: denied.add(Path(path))


@pytest.fixture
def relative_files() -> Callable[[Path], set]:
    """Collect all file paths below a root, relative to it"""
    def collect(root: Path) -> set:
        return {
            path.relative_to(root).as_posix()
            for path in root.rglob("*")
            if path.is_file()
        }

    return collect
