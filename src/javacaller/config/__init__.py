"""Configuration management for javacaller."""

from .parser import (
    CONFIG_FILE_NAME,
    FORCE_EMBEDDED_ENV,
    SUPPORT_DIR_ENV,
    InstallConfig,
    JavaCallerConfig,
    JavaConfig,
    RunConfig,
    default_support_dir,
    env_flag,
    env_force_embedded,
    find_config_file,
    load_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "FORCE_EMBEDDED_ENV",
    "SUPPORT_DIR_ENV",
    "InstallConfig",
    "JavaCallerConfig",
    "JavaConfig",
    "RunConfig",
    "default_support_dir",
    "env_flag",
    "env_force_embedded",
    "find_config_file",
    "load_config",
]
