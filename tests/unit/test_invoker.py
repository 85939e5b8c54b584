"""Unit tests for process invocation."""

import os
import sys
import time

import pytest

from javacaller.launch import ProcessInvoker, ProcessState, RunOptions, resolve_executable
from javacaller.models import SPAWN_ERROR_STATUS, RunOutcome


class TestRunOptions:
    """Test launch option defaults and validation."""

    def test_defaults(self):
        options = RunOptions()

        assert options.detached is False
        assert options.wait_for_error_ms == 500
        assert options.cwd == os.getcwd()

    def test_zero_grace_period_allowed(self):
        assert RunOptions(wait_for_error_ms=0).wait_for_error_ms == 0

    def test_negative_grace_period(self):
        with pytest.raises(ValueError, match="wait_for_error_ms"):
            RunOptions(wait_for_error_ms=-1)


class TestResolveExecutable:
    """Test Windows executable path handling."""

    def test_plain_name_untouched(self):
        assert resolve_executable("java") == ("java", "java")

    def test_path_without_spaces_untouched(self):
        assert resolve_executable("/usr/bin/java") == ("/usr/bin/java", "/usr/bin/java")

    def test_windows_path_with_spaces_quoted(self):
        spawn_path, display = resolve_executable("C:/Program Files/Java/bin/java.EXE")

        assert display == f'"{spawn_path}"'
        assert os.path.isabs(spawn_path)

    def test_already_quoted(self):
        quoted = "'C:/Program Files/Java/bin/java.exe'"

        spawn_path, display = resolve_executable(quoted)

        assert display == quoted
        assert spawn_path == "C:/Program Files/Java/bin/java.exe"


@pytest.mark.asyncio
class TestAttachedInvocation:
    """Attached runs wait for the child and capture its output."""

    async def test_captures_output_and_status(self):
        code = "import sys; sys.stdout.write('out'); sys.stderr.write('err'); sys.exit(3)"
        invoker = ProcessInvoker()

        result = await invoker.invoke(sys.executable, ["-c", code])

        assert result.status == 3
        assert result.stdout == b"out"
        assert result.stderr == b"err"
        assert result.outcome is RunOutcome.COMPLETED
        assert result.child is not None
        assert invoker.state is ProcessState.EXITED

    async def test_zero_exit(self):
        result = await ProcessInvoker().invoke(sys.executable, ["-c", "print('hello')"])

        assert result.status == 0
        assert result.stdout_text.strip() == "hello"

    async def test_large_output_both_streams(self):
        """Both pipes are drained while the child runs."""
        code = (
            "import sys\n"
            "for _ in range(64):\n"
            "    sys.stdout.write('o' * 16384)\n"
            "    sys.stderr.write('e' * 16384)\n"
        )

        result = await ProcessInvoker().invoke(sys.executable, ["-c", code])

        assert result.status == 0
        assert len(result.stdout) == 64 * 16384
        assert len(result.stderr) == 64 * 16384

    async def test_working_directory(self, temp_dir):
        options = RunOptions(cwd=str(temp_dir))

        result = await ProcessInvoker().invoke(
            sys.executable, ["-c", "import os; print(os.getcwd())"], options
        )

        assert os.path.realpath(result.stdout_text.strip()) == str(temp_dir)

    async def test_environment_passed(self):
        environ = dict(os.environ, JAVACALLER_TEST_VAR="from-environ")

        result = await ProcessInvoker(environ=environ).invoke(
            sys.executable,
            ["-c", "import os; print(os.environ['JAVACALLER_TEST_VAR'])"],
        )

        assert result.stdout_text.strip() == "from-environ"


@pytest.mark.asyncio
class TestSpawnFailures:
    """Spawn problems are reported, never raised."""

    async def test_missing_executable(self, temp_dir):
        invoker = ProcessInvoker()

        result = await invoker.invoke(str(temp_dir / "no-such-java"), ["-version"])

        assert result.status == SPAWN_ERROR_STATUS
        assert result.stderr_text.startswith("Java spawn error: ")
        assert result.outcome is RunOutcome.FAILED
        assert result.child is None
        assert invoker.state is ProcessState.SPAWN_FAILED

    async def test_invalid_spawn_arguments(self):
        """Errors from the spawn call itself have their own prefix."""
        result = await ProcessInvoker().invoke(sys.executable, ["-c", "print(1)\0"])

        assert result.status == SPAWN_ERROR_STATUS
        assert result.stderr_text.startswith("Java spawn fatal error: ")
        assert result.spawn_failed

    async def test_detached_missing_executable(self, temp_dir):
        result = await ProcessInvoker().invoke(
            str(temp_dir / "no-such-java"), [], RunOptions(detached=True)
        )

        assert result.status == SPAWN_ERROR_STATUS
        assert "Java spawn error" in result.stderr_text


@pytest.mark.asyncio
class TestDetachedInvocation:
    """Detached runs return after the grace period with a live child."""

    async def test_returns_after_grace_period(self):
        invoker = ProcessInvoker()
        start = time.monotonic()

        result = await invoker.invoke(
            sys.executable,
            ["-c", "import time; time.sleep(30)"],
            RunOptions(detached=True, wait_for_error_ms=200),
        )
        elapsed = time.monotonic() - start

        try:
            assert result.child is not None
            assert result.child.returncode is None
            assert result.status is None
            assert result.stdout == b""
            assert invoker.state is ProcessState.RUNNING
            assert elapsed < 5
        finally:
            result.child.kill()
            await result.child.wait()

    async def test_early_exit_is_reported(self):
        """A child failing within the grace period reports its status."""
        result = await ProcessInvoker().invoke(
            sys.executable,
            ["-c", "import sys; sys.exit(4)"],
            RunOptions(detached=True, wait_for_error_ms=3000),
        )

        assert result.status == 4
        assert result.child is not None
