"""Configuration file parser for javacaller."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from dotenv import load_dotenv

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Fallback for Python 3.10

from ..runtime.types import DEFAULT_MINIMUM_JAVA_VERSION

CONFIG_FILE_NAME = ".javacaller.toml"
SUPPORT_DIR_NAME = ".java-caller"

FORCE_EMBEDDED_ENV = "JAVA_CALLER_USE_NODE_JRE"
SUPPORT_DIR_ENV = "JAVA_CALLER_SUPPORT_DIR"

_FALSE_VALUES = {"", "0", "false", "no", "off"}


def env_flag(value: Optional[str]) -> bool:
    """Interpret an environment variable as a boolean flag."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_VALUES


def env_force_embedded(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Whether the environment forces use of the embedded JRE."""
    environ = os.environ if environ is None else environ
    return env_flag(environ.get(FORCE_EMBEDDED_ENV))


def default_support_dir(environ: Optional[Mapping[str, str]] = None) -> Path:
    """Per-user directory the embedded JRE is installed into."""
    environ = os.environ if environ is None else environ
    override = environ.get(SUPPORT_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / SUPPORT_DIR_NAME


@dataclass
class JavaConfig:
    """What to run and which java versions are accepted."""

    jar: Optional[str] = None
    class_path: str = "."
    main_class: Optional[str] = None
    root_path: str = "."
    java_executable: str = "java"
    additional_java_args: List[str] = field(default_factory=list)
    minimum_version: float = DEFAULT_MINIMUM_JAVA_VERSION
    maximum_version: Optional[float] = None


@dataclass
class InstallConfig:
    """Embedded JRE installation settings."""

    support_dir: Path = field(default_factory=default_support_dir)
    force_embedded: bool = False


@dataclass
class RunConfig:
    """Default launch options."""

    detached: bool = False
    wait_for_error_ms: int = 500
    cwd: Optional[str] = None


@dataclass
class JavaCallerConfig:
    """Complete javacaller configuration."""

    java: JavaConfig = field(default_factory=JavaConfig)
    install: InstallConfig = field(default_factory=InstallConfig)
    run: RunConfig = field(default_factory=RunConfig)

    # Project root for resolving paths
    project_root: Path = field(default_factory=Path.cwd)

    def resolve_path(self, path_template: str) -> str:
        """Resolve template variables in paths.

        Supports:
            ${PROJECT_ROOT} - absolute path to project root
            ${HOME} - current user's home directory
        """
        result = path_template
        result = result.replace("${PROJECT_ROOT}", str(self.project_root))
        result = result.replace("${HOME}", str(Path.home()))
        return result


def find_config_file(project_path: Path) -> Optional[Path]:
    """Find .javacaller.toml in project root.

    Args:
        project_path: Root path of the project

    Returns:
        Path to .javacaller.toml if found, None otherwise
    """
    config_file = project_path / CONFIG_FILE_NAME
    if config_file.exists():
        return config_file
    return None


def load_config(project_path: Path) -> JavaCallerConfig:
    """Load configuration from .javacaller.toml or use defaults.

    A ``.env`` file in the project root is loaded first; variables already
    set in the environment win over it.

    Args:
        project_path: Root path of the project

    Returns:
        JavaCallerConfig with loaded or default configuration
    """
    project_path = Path(project_path)

    dotenv_file = project_path / ".env"
    if dotenv_file.exists():
        load_dotenv(dotenv_file, override=False)

    config = JavaCallerConfig(project_root=project_path)

    config_file = find_config_file(project_path)
    data: Dict[str, Any] = {}
    if config_file:
        try:
            with open(config_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError):
            # If TOML parsing fails, use defaults
            data = {}

    if "java" in data:
        _parse_java_section(config, data["java"])

    if "install" in data:
        install_data = data["install"]
        support_dir = install_data.get("support_dir")
        if support_dir:
            config.install.support_dir = Path(config.resolve_path(support_dir)).expanduser()
        config.install.force_embedded = install_data.get("force_embedded", False)

    if "run" in data:
        run_data = data["run"]
        config.run.detached = run_data.get("detached", False)
        config.run.wait_for_error_ms = run_data.get("wait_for_error_ms", 500)
        cwd = run_data.get("cwd")
        config.run.cwd = config.resolve_path(cwd) if cwd else None

    # Environment overrides
    if env_force_embedded():
        config.install.force_embedded = True
    if os.environ.get(SUPPORT_DIR_ENV):
        config.install.support_dir = default_support_dir()

    return config


def _parse_java_section(config: JavaCallerConfig, java_data: Dict[str, Any]) -> None:
    config.java.jar = java_data.get("jar")
    config.java.class_path = java_data.get("class_path", ".")
    config.java.main_class = java_data.get("main_class")
    config.java.root_path = config.resolve_path(java_data.get("root_path", "."))
    config.java.java_executable = config.resolve_path(
        java_data.get("java_executable", "java")
    )
    config.java.additional_java_args = list(java_data.get("additional_java_args", []))
    config.java.minimum_version = float(
        java_data.get("minimum_version", DEFAULT_MINIMUM_JAVA_VERSION)
    )
    maximum_version = java_data.get("maximum_version")
    config.java.maximum_version = (
        float(maximum_version) if maximum_version is not None else None
    )
