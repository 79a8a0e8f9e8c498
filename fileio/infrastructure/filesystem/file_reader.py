"""File and resource reading operations module."""
from importlib import resources
from pathlib import Path
from types import ModuleType
from typing import Optional, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

from fileio.core.config import settings
from fileio.core.types import PathLike
from fileio.core.exceptions import (
    FileReadError,
    ResourceNotFoundError,
    ResourceReadError,
    UnsupportedResourceError,
)
from fileio.infrastructure.logging import get_logger

logger = get_logger()


def read_file_to_string(path: PathLike) -> str:
    """Read entire file content as UTF-8 text."""
    return _decode(read_file_to_bytes(path), path)


def read_file_to_bytes(path: PathLike) -> bytes:
    """Read entire file content."""
    full_path = Path(path)

    try:
        with open(full_path, "rb") as f:
            return f.read()
    except OSError as e:
        logger.error("file_read_failed", path=str(full_path), error=str(e), exc_info=True)
        raise FileReadError(f"Failed to read file: {e}", path=full_path) from e


def read_resource_to_string(
    resource: Optional[str],
    package: Optional[Union[str, ModuleType]] = None,
) -> Optional[str]:
    """Read a resource bundled inside a package.

    ``package`` is the package (or module) the resource name is resolved
    against; it defaults to the configured ``default_resource_package``.
    A single leading ``/`` is stripped so that resource names written as
    absolute paths still resolve relative to the package root.

    Returns ``None`` when ``resource`` is ``None``.
    """
    if resource is None:
        return None

    if resource.startswith("/"):
        resource = resource[1:]

    anchor = package if package is not None else settings.default_resource_package
    anchor_name = anchor if isinstance(anchor, str) else anchor.__name__

    try:
        traversable = resources.files(anchor).joinpath(resource)
        if not traversable.is_file():
            raise ResourceNotFoundError(resource, anchor_name)
        content = traversable.read_bytes()
    except ResourceNotFoundError:
        logger.error("resource_not_found", resource=resource, package=anchor_name)
        raise
    except (ImportError, OSError, TypeError) as e:
        logger.error(
            "resource_read_failed",
            resource=resource,
            package=anchor_name,
            error=str(e),
            exc_info=True,
        )
        raise ResourceReadError(
            f"Failed to read resource {resource}: {e}",
            details={"resource": resource, "package": anchor_name},
        ) from e

    return _decode(content, resource, error_cls=ResourceReadError)


def read_url_to_string(
    url: Optional[str],
    transport: Optional[httpx.BaseTransport] = None,
) -> Optional[str]:
    """Read the resource a URL points at.

    ``file:`` URLs are read from disk, ``http:`` and ``https:`` URLs are
    fetched. Returns ``None`` when ``url`` is ``None``.
    """
    if url is None:
        return None

    parsed = urlparse(url)
    scheme = parsed.scheme.lower()

    if scheme == "file":
        path = Path(url2pathname(parsed.path))
        try:
            return read_file_to_string(path)
        except FileReadError as e:
            raise ResourceReadError(e.message, path=path, details={"url": url}) from e

    if scheme not in ("http", "https"):
        logger.error("resource_scheme_unsupported", url=url, scheme=scheme)
        raise UnsupportedResourceError(url, scheme)

    try:
        with httpx.Client(
            timeout=settings.url_timeout_seconds,
            follow_redirects=True,
            transport=transport,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            content = response.content
    except httpx.HTTPError as e:
        logger.error("resource_fetch_failed", url=url, error=str(e), exc_info=True)
        raise ResourceReadError(
            f"Failed to fetch resource {url}: {e}", details={"url": url}
        ) from e

    return _decode(content, url, error_cls=ResourceReadError)


def _decode(content: bytes, source: PathLike, error_cls=FileReadError) -> str:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.error("content_decode_failed", source=str(source), error=str(e))
        raise error_cls(f"Content is not valid UTF-8: {e}", details={"source": str(source)}) from e
