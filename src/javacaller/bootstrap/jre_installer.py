"""Embedded JRE installation and verification.

Installs a JRE with npm when the java found on PATH does not match the
required version window.
"""

import asyncio
import json
import shutil
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from ..models.results import InstallReport, InstallStatus
from ..runtime.environment import JavaPathBinder
from ..runtime.locator import EmbeddedRuntimeLocator
from ..runtime.specs import NODE_JRE, EmbeddedPackageSpec
from ..runtime.state import ResolutionContext, default_context
from ..runtime.types import RuntimeRequirement
from ..runtime.version import JavaVersionProbe

MANIFEST_FILE_NAME = "package.json"


async def run_install_command(command: List[str], cwd: Path) -> Tuple[bool, str]:
    """Run a package manager command.

    Args:
        command: Command and arguments, e.g. ``["npm", "install", ...]``
        cwd: Directory to run in

    Returns:
        (success, output or error text)
    """
    # npm is a .cmd shim on Windows, exec needs the full path
    executable = shutil.which(command[0])
    if executable is None:
        return False, f"{command[0]} not found: install Node.js from https://nodejs.org/"

    try:
        process = await asyncio.create_subprocess_exec(
            executable,
            *command[1:],
            cwd=str(cwd),
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()
    except OSError as e:
        return False, f"{' '.join(command)} could not be started: {e}"

    if process.returncode == 0:
        return True, stdout.decode(errors="replace")

    error_msg = stderr.decode(errors="replace")[:500]
    return False, f"{' '.join(command)} failed with status {process.returncode}: {error_msg}"


class JREInstaller:
    """Makes sure a java matching the requirement is reachable.

    The sequence runs at most once per resolution context; later calls
    report ``InstallStatus.SKIPPED``.
    """

    def __init__(
        self,
        support_dir: Path,
        locator: EmbeddedRuntimeLocator,
        binder: JavaPathBinder,
        probe: Optional[JavaVersionProbe] = None,
        context: Optional[ResolutionContext] = None,
        force_embedded: bool = False,
        package: EmbeddedPackageSpec = NODE_JRE,
    ):
        """Initialize installer.

        Args:
            support_dir: Directory the embedded JRE is installed into
            locator: Embedded JRE locator
            binder: PATH binder re-run after installation
            probe: Version probe (``java -version`` on PATH if None)
            context: Shared resolution context (process-wide if None)
            force_embedded: Use the embedded JRE whatever java is found
            package: Embedded package specification
        """
        self.support_dir = Path(support_dir)
        self.locator = locator
        self.binder = binder
        self.probe = probe or JavaVersionProbe()
        self.context = context or default_context()
        self.force_embedded = force_embedded
        self.package = package

    async def ensure_installed(self, requirement: RuntimeRequirement) -> InstallReport:
        """Probe java and install the embedded JRE if the requirement is unmet.

        Failures are reported in the returned InstallReport, not raised.

        Raises:
            UnsupportedPlatformError: If the embedded JRE layout is unknown
        """
        if not self.context.begin():
            return InstallReport(status=InstallStatus.SKIPPED)

        try:
            return await self._ensure_installed(requirement)
        finally:
            self.context.finish()

    async def _ensure_installed(self, requirement: RuntimeRequirement) -> InstallReport:
        found_version = await self.probe.probe()

        if requirement.is_satisfied_by(found_version) and not self.force_embedded:
            return InstallReport(
                status=InstallStatus.SATISFIED,
                found_version=found_version,
                active_version=found_version,
            )

        report = InstallReport(
            status=InstallStatus.EMBEDDED_PRESENT,
            found_version=found_version,
        )

        try:
            self._prepare_support_dir()
        except OSError as e:
            report.status = InstallStatus.FAILED
            report.diagnostics.append(
                f"Unable to prepare Java support directory {self.support_dir}: {e}"
            )
            return report

        embedded_dir = self.locator.locate()
        if not self.locator.is_present(embedded_dir):
            found_str = f" ({found_version} found)" if found_version is not None else ""
            print(f"☕ Java {requirement.describe()} is required{found_str}", file=sys.stderr)
            print(f"📦 Installing/Updating JRE in {self.support_dir}...", file=sys.stderr)

            self.context.install_attempts += 1
            success, detail = await run_install_command(
                self.package.install_command, self.support_dir
            )
            embedded_dir = self.locator.locate(force_refresh=True)

            if success:
                print(f"✅ Installed/Updated JRE in {embedded_dir}", file=sys.stderr)
                report.status = InstallStatus.INSTALLED
            else:
                print(f"❌ Failed to install {self.package.package}", file=sys.stderr)
                print(f"   Error: {detail[:200]}", file=sys.stderr)
                report.status = InstallStatus.FAILED
                report.diagnostics.append(f"Embedded JRE installation failed: {detail}")

        self.binder.bind()
        report.active_version = await self.probe.probe()
        if report.active_version is not None:
            print(f"☕ Using Java version {report.active_version}", file=sys.stderr)
        return report

    def _prepare_support_dir(self) -> None:
        """Create the support directory with a manifest npm can install into."""
        self.support_dir.mkdir(mode=0o777, parents=True, exist_ok=True)

        manifest = self.support_dir / MANIFEST_FILE_NAME
        if not manifest.exists():
            manifest.write_text(json.dumps(self.package.manifest), encoding="utf-8")
