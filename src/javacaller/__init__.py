"""Run jars and Java classes under a suitable, auto-provisioned Java runtime."""

from .caller import JavaCaller
from .config import JavaCallerConfig, load_config
from .launch import ClassTarget, JarTarget, RunOptions
from .models import (
    SPAWN_ERROR_STATUS,
    InstallReport,
    InstallStatus,
    RunOutcome,
    RunResult,
)
from .runtime import RuntimeRequirement, UnsupportedPlatformError

__version__ = "0.1.0"

__all__ = [
    "SPAWN_ERROR_STATUS",
    "ClassTarget",
    "InstallReport",
    "InstallStatus",
    "JarTarget",
    "JavaCaller",
    "JavaCallerConfig",
    "RunOptions",
    "RunOutcome",
    "RunResult",
    "RuntimeRequirement",
    "UnsupportedPlatformError",
    "load_config",
]
