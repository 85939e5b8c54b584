"""PATH binding for the resolved Java runtime."""

import logging
import os
from typing import MutableMapping, Optional

from .locator import EmbeddedRuntimeLocator

logger = logging.getLogger(__name__)


class JavaPathBinder:
    """Puts the embedded JRE, or ``$JAVA_HOME/bin``, first on PATH.

    Prepending is skipped when the directory already appears in PATH, so
    binding any number of times never duplicates a segment.
    """

    def __init__(
        self,
        locator: EmbeddedRuntimeLocator,
        environ: Optional[MutableMapping[str, str]] = None,
    ):
        self.locator = locator
        self.environ = os.environ if environ is None else environ

    def bind(self) -> bool:
        """Update PATH in place.

        Returns:
            True if PATH was changed
        """
        path_before = self.environ.get("PATH", "")
        embedded_dir = self.locator.locate()

        new_path = path_before
        if self.locator.is_present(embedded_dir):
            if str(embedded_dir) not in path_before:
                new_path = self._prepend(str(embedded_dir), path_before)
        else:
            java_home = self.environ.get("JAVA_HOME")
            if java_home and "jdk" not in path_before and "jre" not in path_before:
                if java_home not in path_before:
                    new_path = self._prepend(os.path.join(java_home, "bin"), path_before)

        if new_path == path_before:
            return False

        self.environ["PATH"] = new_path
        logger.debug(f"New PATH value: {new_path}")
        return True

    @staticmethod
    def _prepend(directory: str, path: str) -> str:
        if not path:
            return directory
        return f"{directory}{os.pathsep}{path}"
