"""Invocation targets and java argument vector assembly."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from ..runtime.specs import RUNTIME_FLAG_PREFIXES
from ..utils.path import resolve_class_path, split_class_path

DEFAULT_CLASS_PATH = "."


@dataclass(frozen=True)
class JarTarget:
    """Run ``java -jar <path>``."""

    path: str


@dataclass(frozen=True)
class ClassTarget:
    """Run ``java -cp <class_path> <main_class>``."""

    class_path: Tuple[str, ...]
    main_class: str


InvocationTarget = Union[JarTarget, ClassTarget]


def resolve_target(
    jar: Optional[str] = None,
    class_path: Optional[str] = None,
    main_class: Optional[str] = None,
) -> InvocationTarget:
    """Pick the invocation mode. A jar wins over class path + main class.

    Raises:
        ValueError: If neither a jar nor a main class is given
    """
    if jar:
        return JarTarget(path=jar)

    if not main_class:
        raise ValueError("Either a jar or a main class must be configured")

    segments = split_class_path(class_path or DEFAULT_CLASS_PATH)
    return ClassTarget(class_path=tuple(segments), main_class=main_class)


def partition_arguments(args: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split arguments into (java flags, program arguments), keeping order."""
    java_args: List[str] = []
    program_args: List[str] = []
    for arg in args:
        if arg.startswith(RUNTIME_FLAG_PREFIXES):
            java_args.append(arg)
        else:
            program_args.append(arg)
    return java_args, program_args


def build_arguments(
    target: InvocationTarget,
    user_args: Sequence[str],
    root_path: Union[str, Path] = ".",
    class_path_str: Optional[str] = None,
) -> List[str]:
    """Assemble the argument vector passed to java.

    Java flags come first, then the ``-jar``/``-cp`` selector, then the
    program arguments. Flags placed after the selector would reach the
    program instead of the JVM.

    Args:
        target: Jar or class invocation target
        user_args: Caller arguments, flags and program arguments mixed
        root_path: Directory the jar and class path are relative to
        class_path_str: Pre-resolved class path (resolved from target if None)

    Returns:
        Arguments to append after the java executable
    """
    java_args, program_args = partition_arguments(user_args)

    all_args = list(java_args)
    if isinstance(target, JarTarget):
        all_args += ["-jar", f"{root_path}/{target.path}"]
    else:
        if class_path_str is None:
            class_path_str = resolve_class_path(target.class_path, root_path)
        all_args += ["-cp", class_path_str, target.main_class]
    all_args += program_args
    return all_args
