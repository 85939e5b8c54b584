"""Locate an embedded JRE installed by npm into the support directory."""

import logging
from pathlib import Path
from typing import Optional

from .specs import NODE_JRE, EmbeddedPackageSpec, get_platform_layout

logger = logging.getLogger(__name__)


class EmbeddedRuntimeLocator:
    """Resolves the bin directory of the embedded JRE.

    The npm package unpacks a single version folder under ``jre/``; the
    executable directory inside it depends on the platform.
    """

    def __init__(
        self,
        support_dir: Path,
        package: EmbeddedPackageSpec = NODE_JRE,
        platform_name: Optional[str] = None,
    ):
        """Initialize locator.

        Args:
            support_dir: Directory npm installs the JRE package into
            package: Embedded package specification
            platform_name: Override for ``sys.platform`` (tests)
        """
        self.support_dir = Path(support_dir)
        self.package = package
        self.platform_name = platform_name
        self._java_dir: Optional[Path] = None

    @property
    def jre_root(self) -> Path:
        return self.support_dir.joinpath(*self.package.runtime_subdir)

    def locate(self, force_refresh: bool = False) -> Path:
        """Get the embedded java bin directory.

        The path is returned even when nothing is installed yet; use
        ``is_present`` before relying on it.

        Args:
            force_refresh: Ignore the cached location

        Returns:
            Embedded JRE bin directory, or the would-be JRE root

        Raises:
            UnsupportedPlatformError: If the host platform is not supported
        """
        if self._java_dir is not None and not force_refresh:
            return self._java_dir

        layout = get_platform_layout(self.platform_name)
        jre_dir = self.jre_root

        try:
            version_dirs = sorted(entry for entry in jre_dir.iterdir() if entry.is_dir())
        except OSError as e:
            logger.debug(f"Error while getting embedded java dir {jre_dir}: {e}")
            self._java_dir = jre_dir
            return jre_dir

        if not version_dirs:
            logger.debug(f"No JRE version folder found in {jre_dir}")
            self._java_dir = jre_dir
            return jre_dir

        java_dir = version_dirs[0].joinpath(*layout.executable_subpath)
        self._java_dir = java_dir
        logger.debug(f"Embedded java dir ({layout.platform_id}): {java_dir}")
        return java_dir

    def is_present(self, java_dir: Path) -> bool:
        """Whether a located dir is an unpacked JRE (the bare jre root is not)."""
        return java_dir != self.jre_root and java_dir.exists()
