"""Java version probing."""

import asyncio
import logging
import os
import re
from typing import Mapping, Optional

from .specs import JAVA_VERSION_CHECK, VersionCheck

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"\d+")


def parse_java_version(version_str: str) -> Optional[float]:
    """Convert a dotted Java version string to a comparable number.

    Only the first two components count; update suffixes are dropped.

    Examples:
        >>> parse_java_version("1.8.0_292")
        1.8
        >>> parse_java_version("11.0.2")
        11.0
        >>> parse_java_version("17")
        17.0
    """
    parts = version_str.strip().split(".")
    numbers = []
    for part in parts[:2]:
        # "0_292", "21-ea" -> leading digits only
        match = _LEADING_DIGITS.match(part.split("_")[0])
        if not match:
            break
        numbers.append(match.group(0))

    if not numbers:
        return None
    if len(numbers) == 1:
        numbers.append("0")

    return float(".".join(numbers))


def extract_java_version(output: str, version_check: VersionCheck = JAVA_VERSION_CHECK) -> Optional[float]:
    """Find and parse the version in ``java -version`` output."""
    match = re.search(version_check.parse, output)
    if not match:
        return None
    return parse_java_version(match.group(1))


class JavaVersionProbe:
    """Runs ``java -version`` and parses the reported version."""

    def __init__(
        self,
        executable: str = "java",
        version_check: VersionCheck = JAVA_VERSION_CHECK,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self.executable = executable
        self.version_check = version_check
        self.environ = os.environ if environ is None else environ

    async def probe(self) -> Optional[float]:
        """Get the version of the java found on PATH.

        Returns:
            Version number, or None if java is missing or unparseable
        """
        try:
            process = await asyncio.create_subprocess_exec(
                self.executable,
                *self.version_check.args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=dict(self.environ),
            )
            stdout, stderr = await process.communicate()
        except OSError as e:
            logger.debug(f"Java not found: {e}")
            return None

        # java -version writes to stderr on most JDKs
        output = stderr.decode(errors="replace") + stdout.decode(errors="replace")
        version = extract_java_version(output, self.version_check)
        if version is None:
            logger.debug(f"Unable to parse Java version from output: {output[:200]!r}")
        else:
            logger.debug(f"Found Java version {version}")
        return version
