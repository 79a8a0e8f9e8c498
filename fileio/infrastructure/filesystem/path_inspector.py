"""Path identity and containment checks."""
import os
from pathlib import Path
from typing import Iterable

from fileio.core.types import PathLike
from fileio.infrastructure.logging import get_logger

logger = get_logger()


def is_file_on_file_list(files: Iterable[PathLike], file: PathLike) -> bool:
    """Check if an existing file is one of the listed files.

    Only entries with the same name are compared, using the platform's
    same-file test.
    """
    file_path = Path(file)

    if not file_path.exists():
        return False

    for candidate in files:
        candidate_path = Path(candidate)
        if candidate_path.name != file_path.name:
            continue
        try:
            if os.path.samefile(file_path, candidate_path):
                return True
        except OSError:
            # Missing list entries simply do not match
            continue

    return False


def is_file_somewhere_in_directory(file: PathLike, directory: PathLike) -> bool:
    """Check if file lies inside directory, at any depth.

    Paths are compared component by component, so ``/a/database`` is not
    inside ``/a/data``.
    """
    try:
        file_path = Path(file).resolve()
        directory_path = Path(directory).resolve()
    except (OSError, RuntimeError) as e:
        logger.debug("path_resolve_failed", file=str(file), directory=str(directory), error=str(e))
        file_path = Path(file).absolute()
        directory_path = Path(directory).absolute()

    try:
        file_path.relative_to(directory_path)
        return True
    except ValueError:
        return False


def is_same_file(first: PathLike, second: PathLike) -> bool:
    """Check if two paths point at the same file."""
    try:
        return os.path.samefile(first, second)
    except OSError:
        pass

    try:
        return Path(first).resolve() == Path(second).resolve()
    except (OSError, RuntimeError) as e:
        logger.debug("path_resolve_failed", first=str(first), second=str(second), error=str(e))
        return Path(first).absolute() == Path(second).absolute()
