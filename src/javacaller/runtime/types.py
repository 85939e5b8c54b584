"""Data types for runtime resolution."""

from dataclasses import dataclass
from typing import Optional

DEFAULT_MINIMUM_JAVA_VERSION = 1.8


@dataclass(frozen=True)
class RuntimeRequirement:
    """Java version window an invocation demands.

    Attributes:
        minimum_version: Lowest accepted version (e.g. 1.8, 11.0)
        maximum_version: Highest accepted version, unbounded if None
    """

    minimum_version: float = DEFAULT_MINIMUM_JAVA_VERSION
    maximum_version: Optional[float] = None

    def __post_init__(self) -> None:
        if (
            self.maximum_version is not None
            and self.minimum_version > self.maximum_version
        ):
            raise ValueError(
                f"Minimum Java version {self.minimum_version} is greater than "
                f"maximum Java version {self.maximum_version}"
            )

    def is_satisfied_by(self, version: Optional[float]) -> bool:
        """Check a probed version against the window (None never satisfies)."""
        if version is None:
            return False
        if version < self.minimum_version:
            return False
        if self.maximum_version is not None and version > self.maximum_version:
            return False
        return True

    def describe(self) -> str:
        if self.maximum_version is None:
            return f">= {self.minimum_version}"
        return f"between {self.minimum_version} and {self.maximum_version}"

    def __repr__(self) -> str:
        return f"<RuntimeRequirement java {self.describe()}>"
