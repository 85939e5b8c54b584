from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# Never a real exit code: POSIX codes stay within 0-255, signals are negative
SPAWN_ERROR_STATUS = 666


class RunOutcome(str, Enum):
    """How far a run got.

    - COMPLETED: the child was spawned and its status is its own
    - DEGRADED: the child was spawned, but runtime setup reported problems
    - FAILED: nothing useful was spawned (spawn error, unsupported platform)
    """

    COMPLETED = "completed"
    DEGRADED = "degraded"
    FAILED = "failed"


class InstallStatus(str, Enum):
    """Result of the embedded JRE install sequence."""

    SATISFIED = "satisfied"  # Found java matches the requirement
    INSTALLED = "installed"  # npm installed the embedded JRE
    EMBEDDED_PRESENT = "embedded_present"  # Embedded JRE was already there
    FAILED = "failed"
    SKIPPED = "skipped"  # Already initialized in this process


@dataclass
class InstallReport:
    status: InstallStatus
    found_version: Optional[float] = None
    active_version: Optional[float] = None
    diagnostics: List[str] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return self.status is InstallStatus.FAILED


@dataclass
class RunResult:
    """Outcome of a java invocation.

    ``status`` is the child's exit code, ``SPAWN_ERROR_STATUS`` when it could
    not be spawned, or None for a detached child still running.
    """

    status: Optional[int]
    stdout: bytes = b""
    stderr: bytes = b""
    child: Optional[asyncio.subprocess.Process] = None
    outcome: RunOutcome = RunOutcome.COMPLETED
    diagnostics: List[str] = field(default_factory=list)

    @property
    def stdout_text(self) -> str:
        return self.stdout.decode(errors="replace")

    @property
    def stderr_text(self) -> str:
        return self.stderr.decode(errors="replace")

    @property
    def spawn_failed(self) -> bool:
        return self.status == SPAWN_ERROR_STATUS

    def add_diagnostic(self, message: str) -> None:
        """Record a setup problem and surface it on stderr."""
        self.diagnostics.append(message)
        separator = b"\n" if self.stderr and not self.stderr.endswith(b"\n") else b""
        self.stderr += separator + message.encode() + b"\n"
        if self.outcome is RunOutcome.COMPLETED:
            self.outcome = RunOutcome.DEGRADED
