from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, MutableMapping, Optional, Sequence

from .bootstrap import JREInstaller
from .config import JavaCallerConfig, default_support_dir, env_force_embedded
from .launch import ProcessInvoker, RunOptions, build_arguments, resolve_target
from .models.results import SPAWN_ERROR_STATUS, InstallReport, RunOutcome, RunResult
from .runtime import (
    EmbeddedRuntimeLocator,
    JavaPathBinder,
    JavaVersionProbe,
    ResolutionContext,
    RuntimeRequirement,
    UnsupportedPlatformError,
    default_context,
)
from .runtime.types import DEFAULT_MINIMUM_JAVA_VERSION

DEFAULT_JAVA_EXECUTABLE = "java"


class JavaCaller:
    """Runs a jar or a main class under a suitable java.

    Unless ``java_executable`` is overridden, the first run puts a matching
    java on PATH, installing an embedded JRE with npm when needed.

    Attributes:
        status: Exit status of the most recent run(), mirroring
            ``RunResult.status``; None before the first run
    """

    def __init__(
        self,
        jar: Optional[str] = None,
        class_path: str = ".",
        main_class: Optional[str] = None,
        minimum_java_version: float = DEFAULT_MINIMUM_JAVA_VERSION,
        maximum_java_version: Optional[float] = None,
        root_path: str = ".",
        java_executable: str = DEFAULT_JAVA_EXECUTABLE,
        additional_java_args: Optional[Sequence[str]] = None,
        support_dir: Optional[Path] = None,
        force_embedded: Optional[bool] = None,
        run_options: Optional[RunOptions] = None,
        context: Optional[ResolutionContext] = None,
        environ: Optional[MutableMapping[str, str]] = None,
    ) -> None:
        """Initialize the caller.

        Args:
            jar: Jar to run, relative to root_path (wins over main_class)
            class_path: Colon-delimited class path, relative to root_path
            main_class: Main class to run when no jar is given
            minimum_java_version: Lowest accepted java version
            maximum_java_version: Highest accepted java version, if any
            root_path: Directory the jar and class path are relative to
            java_executable: java to run; anything but "java" skips resolution
            additional_java_args: Arguments appended to every run
            support_dir: Embedded JRE install directory (~/.java-caller)
            force_embedded: Always use the embedded JRE
                (JAVA_CALLER_USE_NODE_JRE if None)
            run_options: Default launch options for run()
            context: Resolution context (process-wide if None)
            environ: Environment to read and update (os.environ if None)

        Raises:
            ValueError: If no jar or main class is given, or the version
                range is inverted
        """
        self.target = resolve_target(jar, class_path, main_class)
        self.requirement = RuntimeRequirement(minimum_java_version, maximum_java_version)
        self.root_path = root_path
        self.java_executable = java_executable
        self.additional_java_args: List[str] = list(additional_java_args or [])
        self.run_options = run_options
        self.context = context or default_context()
        self.environ = os.environ if environ is None else environ
        self.support_dir = Path(support_dir) if support_dir else default_support_dir(self.environ)
        self.force_embedded = force_embedded
        self.status: Optional[int] = None

        self.locator = EmbeddedRuntimeLocator(self.support_dir)
        self.binder = JavaPathBinder(self.locator, environ=self.environ)
        self.installer = JREInstaller(
            self.support_dir,
            self.locator,
            self.binder,
            probe=JavaVersionProbe(environ=self.environ),
            context=self.context,
        )

    @classmethod
    def from_config(cls, config: JavaCallerConfig, **kwargs) -> "JavaCaller":
        """Create a caller from a loaded configuration."""
        run_options = RunOptions(
            detached=config.run.detached,
            wait_for_error_ms=config.run.wait_for_error_ms,
            cwd=config.run.cwd,
        )
        return cls(
            jar=config.java.jar,
            class_path=config.java.class_path,
            main_class=config.java.main_class,
            minimum_java_version=config.java.minimum_version,
            maximum_java_version=config.java.maximum_version,
            root_path=config.java.root_path,
            java_executable=config.java.java_executable,
            additional_java_args=config.java.additional_java_args,
            support_dir=config.install.support_dir,
            force_embedded=config.install.force_embedded or None,
            run_options=run_options,
            **kwargs,
        )

    async def initialize(self) -> InstallReport:
        """Install the embedded JRE if the java on PATH does not match.

        Runs once per process; later calls report ``InstallStatus.SKIPPED``.

        Raises:
            UnsupportedPlatformError: If the host platform is not supported
        """
        if self.force_embedded is None:
            self.installer.force_embedded = env_force_embedded(self.environ)
        else:
            self.installer.force_embedded = self.force_embedded
        return await self.installer.ensure_installed(self.requirement)

    async def run(
        self,
        user_arguments: Optional[Sequence[str]] = None,
        options: Optional[RunOptions] = None,
    ) -> RunResult:
        """Run java with the caller's target.

        ``-D`` and ``-X`` arguments go to the JVM, the rest to the program.

        Args:
            user_arguments: Mixed java flags and program arguments
            options: Launch options (run_options or defaults if None)

        Returns:
            RunResult; problems are reported in it rather than raised
        """
        options = options or self.run_options or RunOptions()

        report: Optional[InstallReport] = None
        if self.java_executable == DEFAULT_JAVA_EXECUTABLE:
            try:
                self.binder.bind()
                report = await self.initialize()
            except UnsupportedPlatformError as e:
                return self._fail(str(e))

        args = build_arguments(
            self.target,
            list(user_arguments or []) + self.additional_java_args,
            root_path=self.root_path,
        )
        invoker = ProcessInvoker(environ=self.environ)
        result = await invoker.invoke(self.java_executable, args, options)

        if report is not None:
            for diagnostic in report.diagnostics:
                result.add_diagnostic(diagnostic)

        self.status = result.status
        return result

    def _fail(self, reason: str) -> RunResult:
        print(reason, file=sys.stderr)
        self.status = SPAWN_ERROR_STATUS
        return RunResult(
            status=SPAWN_ERROR_STATUS,
            stderr=reason.encode(),
            outcome=RunOutcome.FAILED,
            diagnostics=[reason],
        )
