"""Java runtime discovery, location and PATH binding."""

from .environment import JavaPathBinder
from .locator import EmbeddedRuntimeLocator
from .specs import (
    NODE_JRE,
    PLATFORM_LAYOUTS,
    RUNTIME_FLAG_PREFIXES,
    UnsupportedPlatformError,
    get_platform_layout,
)
from .state import ResolutionContext, ResolutionState, default_context
from .types import RuntimeRequirement
from .version import JavaVersionProbe, extract_java_version, parse_java_version

__all__ = [
    "EmbeddedRuntimeLocator",
    "JavaPathBinder",
    "JavaVersionProbe",
    "NODE_JRE",
    "PLATFORM_LAYOUTS",
    "RUNTIME_FLAG_PREFIXES",
    "ResolutionContext",
    "ResolutionState",
    "RuntimeRequirement",
    "UnsupportedPlatformError",
    "default_context",
    "extract_java_version",
    "get_platform_layout",
    "parse_java_version",
]
