"""File writing operations module."""
import shutil
from pathlib import Path

from PIL import Image

from fileio.core.exceptions import CopyError, FileWriteError, InvalidOperationError
from fileio.core.types import PathLike
from fileio.infrastructure.logging import get_logger

logger = get_logger()


def touch_file(path: PathLike) -> None:
    """Create an empty file if it does not exist yet."""
    full_path = Path(path)

    try:
        _ensure_parent(full_path)
        # Append mode creates the file without truncating an existing one
        with open(full_path, "ab"):
            pass
    except OSError as e:
        logger.error("file_touch_failed", path=str(full_path), error=str(e), exc_info=True)
        raise FileWriteError(f"Failed to touch file: {e}", path=full_path) from e


def write_string_to_file(content: str, path: PathLike) -> None:
    """Write text to file as UTF-8, replacing previous content."""
    full_path = Path(path)

    try:
        _ensure_parent(full_path)
        with open(full_path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except (OSError, UnicodeEncodeError) as e:
        logger.error("file_write_failed", path=str(full_path), error=str(e), exc_info=True)
        raise FileWriteError(f"Failed to write file: {e}", path=full_path) from e


def write_bytes_to_file(content: bytes, path: PathLike) -> None:
    """Write raw bytes to file, replacing previous content."""
    full_path = Path(path)

    try:
        _ensure_parent(full_path)
        with open(full_path, "wb") as f:
            f.write(content)
    except OSError as e:
        logger.error("file_write_failed", path=str(full_path), error=str(e), exc_info=True)
        raise FileWriteError(f"Failed to write file: {e}", path=full_path) from e


def write_image_to_png_file(image: Image.Image, path: PathLike) -> None:
    """Encode image as PNG and write it to file."""
    full_path = Path(path)

    try:
        _ensure_parent(full_path)
        image.save(full_path, format="PNG")
    except (OSError, ValueError) as e:
        logger.error("image_write_failed", path=str(full_path), error=str(e), exc_info=True)
        raise FileWriteError(f"Failed to write image: {e}", path=full_path) from e


def copy_file(source: PathLike, target: PathLike) -> None:
    """Copy a single file, replacing the target if it exists."""
    source_path = Path(source)
    target_path = Path(target)

    if source_path.is_dir():
        logger.critical("copy_folder_as_file", source=str(source_path), target=str(target_path))
        raise InvalidOperationError(
            f"Trying to copy folder as a file: {source_path}", path=source_path
        )

    try:
        _ensure_parent(target_path)
        # copyfile refuses a directory target instead of copying into it
        shutil.copyfile(source_path, target_path)
        shutil.copymode(source_path, target_path)
    except (OSError, shutil.Error) as e:
        logger.error(
            "file_copy_failed",
            source=str(source_path),
            target=str(target_path),
            error=str(e),
            exc_info=True,
        )
        raise CopyError(source_path, target_path, str(e)) from e


def _ensure_parent(path: Path) -> None:
    parent = path.absolute().parent
    if not parent.is_dir():
        parent.mkdir(parents=True, exist_ok=True)
