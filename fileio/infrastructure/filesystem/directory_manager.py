"""Directory operations management module."""
import os
from pathlib import Path
from typing import List, Set, Tuple

from structlog.contextvars import bound_contextvars

from fileio.core.exceptions import (
    CopyError,
    DeletionError,
    DirectoryListingError,
    FilesystemError,
)
from fileio.core.types import PathLike
from fileio.infrastructure.filesystem.file_writer import copy_file
from fileio.infrastructure.logging import get_logger

logger = get_logger()


def copy_directory(source: PathLike, target: PathLike) -> None:
    """Recursively copy a directory tree.

    Nothing happens when ``source`` does not exist or when ``target`` lies
    inside the ``source`` tree. A ``source`` that is not a directory is
    copied with :func:`copy_file`. Entries that fail to copy are skipped
    and reported together once the rest of the tree has been copied.
    """
    source_path = Path(source)
    target_path = Path(target)

    if not source_path.exists():
        return

    # Copying a directory into its own subtree would never terminate
    try:
        source_real = source_path.resolve(strict=True)
        target_real = target_path.absolute().resolve()
    except (OSError, RuntimeError) as e:
        logger.warning(
            "copy_directory_resolve_failed",
            source=str(source_path),
            target=str(target_path),
            error=str(e),
        )
        return

    if target_real == source_real or source_real in target_real.parents:
        logger.debug(
            "copy_directory_into_itself_skipped",
            source=str(source_path),
            target=str(target_path),
        )
        return

    if not source_path.is_dir():
        copy_file(source_path, target_path)
        return

    failed: List[Path] = []
    visited: Set[Path] = set()

    with bound_contextvars(operation="copy_directory", root=str(source_path)):
        pending: List[Tuple[Path, Path]] = [(source_path, target_path)]
        while pending:
            current_source, current_target = pending.pop()

            if not current_source.is_dir():
                try:
                    copy_file(current_source, current_target)
                except FilesystemError:
                    failed.append(current_source)
                continue

            real = current_source.resolve()
            if real in visited:
                logger.warning("copy_directory_cycle_skipped", path=str(current_source))
                continue
            visited.add(real)

            try:
                current_target.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                logger.error(
                    "directory_create_failed",
                    path=str(current_target),
                    error=str(e),
                    exc_info=True,
                )
                failed.append(current_source)
                continue

            # Reversed so that entries are copied in listing order
            children = _list_children(current_source)
            pending.extend(
                (current_source / name, current_target / name) for name in reversed(children)
            )

    if failed:
        raise CopyError(
            source_path,
            target_path,
            f"{len(failed)} entries could not be copied",
            failed_paths=failed,
        )


def delete_dir(path: PathLike) -> bool:
    """Delete a directory tree, children before parents.

    Stops at the first entry that cannot be removed and raises
    :class:`DeletionError` naming it. Symbolic links are removed, never
    followed.
    """
    root = Path(path)

    with bound_contextvars(operation="delete_dir", root=str(root)):
        pending: List[Tuple[Path, bool]] = [(root, False)]
        while pending:
            current, expanded = pending.pop()

            if not expanded and _is_real_dir(current):
                pending.append((current, True))
                children = _list_children(current)
                pending.extend((current / name, False) for name in reversed(children))
                continue

            try:
                if _is_real_dir(current):
                    os.rmdir(current)
                else:
                    os.unlink(current)
            except OSError as e:
                logger.error("delete_failed", path=str(current), error=str(e))
                raise DeletionError(root, [current]) from e

    return True


def empty_directory(path: PathLike, *excludes: str) -> None:
    """Delete every entry of a directory except the excluded ones.

    An entry is kept when its absolute path ends with one of ``excludes``.
    """
    directory = Path(path)

    if not directory.is_dir():
        return

    failed: List[Path] = []

    with bound_contextvars(operation="empty_directory", root=str(directory)):
        for name in _list_children(directory):
            child = directory / name
            absolute = str(child.absolute())
            if any(absolute.endswith(exclude) for exclude in excludes):
                continue

            try:
                if _is_real_dir(child):
                    delete_dir(child)
                else:
                    os.unlink(child)
            except DeletionError as e:
                failed.extend(e.failed_paths)
            except OSError as e:
                logger.error("delete_failed", path=str(child), error=str(e))
                failed.append(child)

    if failed:
        raise DeletionError(directory, failed)


def remove_empty_dirs(path: PathLike) -> bool:
    """Prune empty subdirectories bottom-up.

    Returns whether ``path`` itself is empty afterwards; ``path`` is never
    removed.
    """
    root = Path(path)
    directories: List[Path] = []

    pending: List[Path] = [root]
    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as entries:
                subdirs = [Path(entry.path) for entry in entries if entry.is_dir(follow_symlinks=False)]
        except OSError as e:
            if current == root:
                logger.error("directory_list_failed", path=str(root), error=str(e))
                raise DirectoryListingError(f"Cannot list directory: {e}", path=root) from e
            logger.warning("directory_list_failed", path=str(current), error=str(e))
            continue
        if current != root:
            directories.append(current)
        pending.extend(subdirs)

    # Reverse discovery order visits children before their parents
    for directory in reversed(directories):
        try:
            if not os.listdir(directory):
                os.rmdir(directory)
        except OSError as e:
            logger.warning("empty_directory_remove_failed", path=str(directory), error=str(e))

    try:
        return not os.listdir(root)
    except OSError as e:
        logger.error("directory_list_failed", path=str(root), error=str(e))
        raise DirectoryListingError(f"Cannot list directory: {e}", path=root) from e


def list_files_recursively(path: PathLike) -> List[Path]:
    """List every file below a directory, at any depth."""
    root = Path(path)

    if not root.is_dir():
        return []

    def _on_error(error: OSError) -> None:
        logger.warning("directory_list_failed", path=error.filename, error=str(error))

    files: List[Path] = []
    for dirpath, _, filenames in os.walk(root, onerror=_on_error):
        files.extend(Path(dirpath) / name for name in filenames)

    return files


def _list_children(directory: Path) -> List[str]:
    """Entry names in native order; an unreadable directory has none."""
    try:
        return os.listdir(directory)
    except OSError as e:
        logger.warning("directory_list_failed", path=str(directory), error=str(e))
        return []


def _is_real_dir(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()
