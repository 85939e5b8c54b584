"""Unit tests for configuration system."""

import os
import tempfile
from pathlib import Path
from unittest.mock import patch

from javacaller.config import (
    FORCE_EMBEDDED_ENV,
    SUPPORT_DIR_ENV,
    JavaCallerConfig,
    default_support_dir,
    env_flag,
    env_force_embedded,
    find_config_file,
    load_config,
)


class TestConfigParsing:
    """Test TOML configuration parsing."""

    def test_find_config_file_exists(self):
        """Test finding .javacaller.toml when it exists."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            config_file = project_path / ".javacaller.toml"
            config_file.write_text("[java]\njar = 'app.jar'\n")

            found = find_config_file(project_path)
            assert found == config_file

    def test_find_config_file_missing(self):
        """Test finding .javacaller.toml when it doesn't exist."""
        with tempfile.TemporaryDirectory() as tmp_dir:
            found = find_config_file(Path(tmp_dir))
            assert found is None

    @patch.dict(os.environ, {}, clear=False)
    def test_load_config_defaults(self):
        """Test loading config uses defaults when no file exists."""
        os.environ.pop(FORCE_EMBEDDED_ENV, None)
        os.environ.pop(SUPPORT_DIR_ENV, None)
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            config = load_config(project_path)

            assert config.java.jar is None
            assert config.java.class_path == "."
            assert config.java.java_executable == "java"
            assert config.java.minimum_version == 1.8
            assert config.java.maximum_version is None
            assert config.install.support_dir == Path.home() / ".java-caller"
            assert config.install.force_embedded is False
            assert config.run.detached is False
            assert config.run.wait_for_error_ms == 500
            assert config.project_root == project_path

    @patch.dict(os.environ, {}, clear=False)
    def test_load_config_full(self):
        """Test loading every section."""
        os.environ.pop(FORCE_EMBEDDED_ENV, None)
        os.environ.pop(SUPPORT_DIR_ENV, None)
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            (project_path / ".javacaller.toml").write_text("""
[java]
class_path = "lib/a.jar:lib/b.jar"
main_class = "com.example.Main"
root_path = "${PROJECT_ROOT}/dist"
additional_java_args = ["-Xmx512m"]
minimum_version = 11
maximum_version = 17

[install]
support_dir = "${PROJECT_ROOT}/.jre"
force_embedded = true

[run]
detached = true
wait_for_error_ms = 1000
cwd = "${PROJECT_ROOT}"
""")

            config = load_config(project_path)

            assert config.java.class_path == "lib/a.jar:lib/b.jar"
            assert config.java.main_class == "com.example.Main"
            assert config.java.root_path == f"{project_path}/dist"
            assert config.java.additional_java_args == ["-Xmx512m"]
            assert config.java.minimum_version == 11.0
            assert config.java.maximum_version == 17.0
            assert config.install.support_dir == project_path / ".jre"
            assert config.install.force_embedded is True
            assert config.run.detached is True
            assert config.run.wait_for_error_ms == 1000
            assert config.run.cwd == str(project_path)

    def test_invalid_toml_uses_defaults(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            (project_path / ".javacaller.toml").write_text("[java\njar = ")

            config = load_config(project_path)

            assert config.java.jar is None

    def test_resolve_path_templates(self):
        config = JavaCallerConfig(project_root=Path("/work/project"))

        assert config.resolve_path("${PROJECT_ROOT}/lib") == "/work/project/lib"
        assert config.resolve_path("${HOME}/.java-caller") == f"{Path.home()}/.java-caller"


class TestEnvironmentOverrides:
    """Environment variables and .env files."""

    def test_env_flag(self):
        assert env_flag("1") is True
        assert env_flag("true") is True
        assert env_flag("yes") is True
        assert env_flag("0") is False
        assert env_flag("false") is False
        assert env_flag("") is False
        assert env_flag(None) is False

    def test_env_force_embedded(self):
        assert env_force_embedded({FORCE_EMBEDDED_ENV: "true"}) is True
        assert env_force_embedded({}) is False

    def test_default_support_dir_override(self):
        assert default_support_dir({SUPPORT_DIR_ENV: "/srv/jre"}) == Path("/srv/jre")
        assert default_support_dir({}) == Path.home() / ".java-caller"

    @patch.dict(os.environ, {FORCE_EMBEDDED_ENV: "1", SUPPORT_DIR_ENV: "/srv/jre"})
    def test_environment_wins_over_file(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            (project_path / ".javacaller.toml").write_text("""
[install]
support_dir = "/from/file"
force_embedded = false
""")

            config = load_config(project_path)

            assert config.install.force_embedded is True
            assert config.install.support_dir == Path("/srv/jre")

    @patch.dict(os.environ, {}, clear=False)
    def test_dotenv_loaded(self):
        """A .env file in the project root feeds the overrides."""
        os.environ.pop(FORCE_EMBEDDED_ENV, None)
        os.environ.pop(SUPPORT_DIR_ENV, None)
        with tempfile.TemporaryDirectory() as tmp_dir:
            project_path = Path(tmp_dir)
            (project_path / ".env").write_text(f"{FORCE_EMBEDDED_ENV}=true\n")

            config = load_config(project_path)

            assert config.install.force_embedded is True
