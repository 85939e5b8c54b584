"""Declarative specifications for the Java runtime and the embedded JRE.

This is DATA, not code. To support a new platform layout, add it here.
"""

import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


class UnsupportedPlatformError(RuntimeError):
    """Raised when the host platform has no known embedded JRE layout."""

    def __init__(self, platform_name: str):
        self.platform_name = platform_name
        super().__init__(f"unsupported platform: {platform_name}")


@dataclass(frozen=True)
class VersionCheck:
    """Configuration for checking runtime version."""
    args: List[str]
    parse: str  # Regex pattern to extract version


@dataclass(frozen=True)
class PlatformLayout:
    """Where the java executable lives inside an embedded JRE folder."""
    platform_id: str
    executable_subpath: Tuple[str, ...]


@dataclass(frozen=True)
class EmbeddedPackageSpec:
    """npm package providing the embedded JRE."""
    package: str
    install_command: List[str]
    runtime_subdir: Tuple[str, ...]
    manifest: Dict[str, str] = field(default_factory=dict)


JAVA_VERSION_CHECK = VersionCheck(
    args=["-version"],
    parse=r'version "(.*?)"',
)

# Arguments with these prefixes are handed to the JVM, not to the program
RUNTIME_FLAG_PREFIXES: Tuple[str, ...] = ("-D", "-X")

# Keyed by sys.platform
PLATFORM_LAYOUTS: Dict[str, PlatformLayout] = {
    "darwin": PlatformLayout(
        platform_id="macosx",
        executable_subpath=("Contents", "Home", "bin"),
    ),
    "win32": PlatformLayout(
        platform_id="windows",
        executable_subpath=("bin",),
    ),
    "linux": PlatformLayout(
        platform_id="linux",
        executable_subpath=("bin",),
    ),
}

NODE_JRE = EmbeddedPackageSpec(
    package="node-jre",
    install_command=["npm", "install", "node-jre", "--save"],
    runtime_subdir=("node_modules", "node-jre", "jre"),
    manifest={"name": "java-caller-support", "version": "1.0.0"},
)


def get_platform_layout(platform_name: Optional[str] = None) -> PlatformLayout:
    """Get the embedded JRE layout for a platform.

    Args:
        platform_name: Value of ``sys.platform``; the host platform if None

    Returns:
        Platform layout (typed dataclass)

    Raises:
        UnsupportedPlatformError: If the platform has no known layout
    """
    if platform_name is None:
        platform_name = sys.platform

    if platform_name not in PLATFORM_LAYOUTS:
        raise UnsupportedPlatformError(platform_name)

    return PLATFORM_LAYOUTS[platform_name]
