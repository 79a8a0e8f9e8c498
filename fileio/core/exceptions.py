"""Exception hierarchy for file system operations"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union


class FilesystemError(Exception):
    """Base exception for all file system operation errors"""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.path = Path(path) if path is not None else None
        self.details = details or {}
        super().__init__(self.message)


class FileReadError(FilesystemError):
    """Raised when a file cannot be read or decoded"""
    pass


class FileWriteError(FilesystemError):
    """Raised when a file cannot be created or written"""
    pass


class CopyError(FilesystemError):
    """Raised when a file cannot be copied"""

    def __init__(
        self,
        source: Union[str, Path],
        target: Union[str, Path],
        reason: str,
        failed_paths: Optional[Sequence[Union[str, Path]]] = None,
    ):
        self.source = Path(source)
        self.target = Path(target)
        self.reason = reason
        self.failed_paths: List[Path] = [Path(p) for p in failed_paths or ()]
        super().__init__(
            f"Failed to copy {source} to {target}: {reason}",
            path=source,
            details={
                "source": str(source),
                "target": str(target),
                "reason": reason,
                "failed_paths": [str(p) for p in self.failed_paths],
            },
        )


class InvalidOperationError(FilesystemError):
    """Raised when an operation is called with the wrong kind of path"""
    pass


class DeletionError(FilesystemError):
    """Raised when one or more entries could not be deleted"""

    def __init__(self, path: Union[str, Path], failed_paths: Sequence[Union[str, Path]]):
        self.failed_paths: List[Path] = [Path(p) for p in failed_paths]
        super().__init__(
            f"Failed to delete {len(self.failed_paths)} entr"
            f"{'y' if len(self.failed_paths) == 1 else 'ies'} under {path}",
            path=path,
            details={"failed_paths": [str(p) for p in self.failed_paths]},
        )


class DirectoryListingError(FilesystemError):
    """Raised when a directory's entries cannot be listed"""
    pass


class ResourceNotFoundError(FilesystemError):
    """Raised when a named resource does not exist"""

    def __init__(self, resource: str, package: str):
        self.resource = resource
        self.package = package
        super().__init__(
            f"Resource not found: {resource} (package {package})",
            details={"resource": resource, "package": package},
        )


class ResourceReadError(FilesystemError):
    """Raised when a resource exists but cannot be read"""
    pass


class UnsupportedResourceError(FilesystemError):
    """Raised when a resource locator uses an unsupported scheme"""

    def __init__(self, url: str, scheme: str):
        self.url = url
        self.scheme = scheme
        super().__init__(
            f"Unsupported resource scheme '{scheme}': {url}",
            details={"url": url, "scheme": scheme},
        )
