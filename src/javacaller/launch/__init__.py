"""Argument assembly and process invocation."""

from .arguments import (
    ClassTarget,
    InvocationTarget,
    JarTarget,
    build_arguments,
    partition_arguments,
    resolve_target,
)
from .invoker import ProcessInvoker, ProcessState, RunOptions, resolve_executable

__all__ = [
    "ClassTarget",
    "InvocationTarget",
    "JarTarget",
    "ProcessInvoker",
    "ProcessState",
    "RunOptions",
    "build_arguments",
    "partition_arguments",
    "resolve_executable",
    "resolve_target",
]
