"""Path resolution utilities for root-relative class paths."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

CLASS_PATH_SEPARATOR = ":"


def resolve_root_path(
    path: Union[str, Path],
    root_path: Union[str, Path],
) -> Path:
    """Resolve a path relative to the configured root directory.

    - Absolute paths: returned as-is (resolved to canonical form)
    - Relative paths: resolved relative to root_path

    Args:
        path: Path to resolve (can be absolute or relative)
        root_path: Directory relative paths are anchored to

    Returns:
        Resolved absolute Path object

    Examples:
        >>> resolve_root_path("lib/a.jar", "/app")
        Path("/app/lib/a.jar")

        >>> resolve_root_path("/opt/lib/b.jar", "/app")
        Path("/opt/lib/b.jar")
    """
    path_obj = Path(path)

    if path_obj.is_absolute():
        return path_obj.resolve()

    return (Path(root_path).resolve() / path_obj).resolve()


def split_class_path(class_path: str) -> List[str]:
    """Split a colon-delimited class path, dropping empty segments."""
    return [segment for segment in class_path.split(CLASS_PATH_SEPARATOR) if segment]


def resolve_class_path(
    class_path: Union[str, List[str], tuple],
    root_path: Union[str, Path],
) -> str:
    """Resolve every class path segment and join with the host separator.

    Args:
        class_path: Colon-delimited string, or already split segments
        root_path: Directory relative segments are anchored to

    Returns:
        Class path string for ``-cp`` (``;`` on Windows, ``:`` elsewhere)

    Examples:
        >>> resolve_class_path("lib/a.jar:lib/b.jar", "/app")
        "/app/lib/a.jar:/app/lib/b.jar"
    """
    if isinstance(class_path, str):
        segments = split_class_path(class_path)
    else:
        segments = list(class_path)

    return os.pathsep.join(
        str(resolve_root_path(segment, root_path)) for segment in segments
    )
