"""Process-wide resolution state.

Installing a runtime is a one-time side effect of the whole process, so the
latch lives in a context object shared by every ``JavaCaller`` unless one is
injected explicitly.
"""

from dataclasses import dataclass
from enum import Enum


class ResolutionState(Enum):
    """Lifecycle of runtime resolution."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"


@dataclass
class ResolutionContext:
    """Shared state for runtime resolution.

    Attributes:
        state: Where the one-time install sequence currently stands
        install_attempts: Number of times the package manager was invoked
    """

    state: ResolutionState = ResolutionState.UNINITIALIZED
    install_attempts: int = 0

    def begin(self) -> bool:
        """Move to INITIALIZING. Returns False if already started or done."""
        if self.state is not ResolutionState.UNINITIALIZED:
            return False
        self.state = ResolutionState.INITIALIZING
        return True

    def finish(self) -> None:
        self.state = ResolutionState.INITIALIZED

    @property
    def is_initialized(self) -> bool:
        return self.state is ResolutionState.INITIALIZED


_default_context = ResolutionContext()


def default_context() -> ResolutionContext:
    """Get the context shared by the whole process."""
    return _default_context
