"""Error-swallowing variants of the file system operations.

Each function here has the same name and arguments as its counterpart in
the strict modules, but never raises :class:`FilesystemError`. The failure
is already logged where it happened; the caller gets a benign value
instead: ``""`` for reads, ``False`` for ``delete_dir`` and
``remove_empty_dirs``, ``None`` for writes, copies and ``empty_directory``.

Only failures are relaxed into defaults. Misuse such as ``copy_file`` on a
directory still copies nothing, and containment checks still compare whole
path components.
"""
from functools import wraps
from typing import Any, Callable, TypeVar

from fileio.core.exceptions import FilesystemError
from fileio.infrastructure.filesystem import directory_manager, file_reader, file_writer
from fileio.infrastructure.filesystem.directory_manager import list_files_recursively
from fileio.infrastructure.filesystem.path_inspector import (
    is_file_on_file_list,
    is_file_somewhere_in_directory,
    is_same_file,
)

F = TypeVar("F", bound=Callable[..., Any])


def swallow_errors(default: Any) -> Callable[[F], F]:
    """Return ``default`` when the wrapped operation raises FilesystemError."""
    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except FilesystemError:
                return default
        return wrapper  # type: ignore[return-value]
    return decorator


read_file_to_string = swallow_errors("")(file_reader.read_file_to_string)
read_file_to_bytes = swallow_errors(b"")(file_reader.read_file_to_bytes)
read_resource_to_string = swallow_errors("")(file_reader.read_resource_to_string)
read_url_to_string = swallow_errors("")(file_reader.read_url_to_string)

touch_file = swallow_errors(None)(file_writer.touch_file)
write_string_to_file = swallow_errors(None)(file_writer.write_string_to_file)
write_bytes_to_file = swallow_errors(None)(file_writer.write_bytes_to_file)
write_image_to_png_file = swallow_errors(None)(file_writer.write_image_to_png_file)
copy_file = swallow_errors(None)(file_writer.copy_file)

copy_directory = swallow_errors(None)(directory_manager.copy_directory)
delete_dir = swallow_errors(False)(directory_manager.delete_dir)
empty_directory = swallow_errors(None)(directory_manager.empty_directory)
remove_empty_dirs = swallow_errors(False)(directory_manager.remove_empty_dirs)

__all__ = [
    'copy_directory',
    'copy_file',
    'delete_dir',
    'empty_directory',
    'is_file_on_file_list',
    'is_file_somewhere_in_directory',
    'is_same_file',
    'list_files_recursively',
    'read_file_to_bytes',
    'read_file_to_string',
    'read_resource_to_string',
    'read_url_to_string',
    'remove_empty_dirs',
    'swallow_errors',
    'touch_file',
    'write_bytes_to_file',
    'write_image_to_png_file',
    'write_string_to_file',
]
