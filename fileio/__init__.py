"""File system helpers: read, write, copy, delete and inspect files."""

__version__ = "0.1.0"

from fileio.infrastructure.filesystem import (  # noqa: E402
    copy_directory,
    copy_file,
    delete_dir,
    empty_directory,
    is_file_on_file_list,
    is_file_somewhere_in_directory,
    is_same_file,
    lenient,
    list_files_recursively,
    read_file_to_bytes,
    read_file_to_string,
    read_resource_to_string,
    read_url_to_string,
    remove_empty_dirs,
    touch_file,
    write_bytes_to_file,
    write_image_to_png_file,
    write_string_to_file,
)

__all__ = [
    'copy_directory',
    'copy_file',
    'delete_dir',
    'empty_directory',
    'is_file_on_file_list',
    'is_file_somewhere_in_directory',
    'is_same_file',
    'lenient',
    'list_files_recursively',
    'read_file_to_bytes',
    'read_file_to_string',
    'read_resource_to_string',
    'read_url_to_string',
    'remove_empty_dirs',
    'touch_file',
    'write_bytes_to_file',
    'write_image_to_png_file',
    'write_string_to_file',
]
