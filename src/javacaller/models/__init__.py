from .results import (
    SPAWN_ERROR_STATUS,
    InstallReport,
    InstallStatus,
    RunOutcome,
    RunResult,
)

__all__ = [
    "SPAWN_ERROR_STATUS",
    "InstallReport",
    "InstallStatus",
    "RunOutcome",
    "RunResult",
]
