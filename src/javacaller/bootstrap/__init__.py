"""Bootstrap utilities for provisioning an embedded Java runtime."""

from .jre_installer import (
    MANIFEST_FILE_NAME,
    JREInstaller,
    run_install_command,
)

__all__ = [
    "MANIFEST_FILE_NAME",
    "JREInstaller",
    "run_install_command",
]
