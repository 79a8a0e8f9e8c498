"""Filesystem infrastructure module."""
from .file_reader import (
    read_file_to_bytes,
    read_file_to_string,
    read_resource_to_string,
    read_url_to_string,
)
from .file_writer import (
    copy_file,
    touch_file,
    write_bytes_to_file,
    write_image_to_png_file,
    write_string_to_file,
)
from .directory_manager import (
    copy_directory,
    delete_dir,
    empty_directory,
    list_files_recursively,
    remove_empty_dirs,
)
from .path_inspector import (
    is_file_on_file_list,
    is_file_somewhere_in_directory,
    is_same_file,
)
from . import lenient

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
