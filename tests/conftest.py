"""Pytest configuration and shared fixtures."""

import tempfile
from pathlib import Path
from typing import Dict, Generator

import pytest

from javacaller.runtime import ResolutionContext


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory (symlinks resolved, e.g. macOS /private/var)."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir).resolve()


@pytest.fixture
def support_dir(temp_dir: Path) -> Path:
    """Path of a not yet created embedded JRE support directory."""
    return temp_dir / ".java-caller"


@pytest.fixture
def context() -> ResolutionContext:
    """Fresh resolution context, isolated from the process-wide one.

    The process-wide context is never reset, so every test that resolves
    or installs a runtime must use its own.
    """
    return ResolutionContext()


@pytest.fixture
def environ() -> Dict[str, str]:
    """Isolated environment mapping."""
    return {"PATH": "/usr/local/bin:/usr/bin:/bin"}


@pytest.fixture
def fake_java_bin(temp_dir: Path) -> Path:
    """Directory for a fake ``java`` (see tests.fixtures.java_layouts)."""
    return temp_dir / "fake-java-bin"
