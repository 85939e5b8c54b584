"""Utility modules (path)."""

from .path import (
    resolve_class_path,
    resolve_root_path,
    split_class_path,
)

__all__ = [
    "resolve_root_path",
    "resolve_class_path",
    "split_class_path",
]
