"""Synchronous shell runner.

Commands are run one at a time through ``<shell> -c <command line>``; the
call blocks until the child exits. There is no timeout: a hung command
hangs the run.
"""

from __future__ import annotations

import os
import subprocess
import time
from collections.abc import Mapping
from pathlib import Path

from yake.exceptions import CommandExecutionError
from yake.logging import get_logger
from yake.runners.models import CommandResult

__all__ = ["ShellRunner"]

logger = get_logger(__name__)

DEFAULT_SHELL = "bash"


class ShellRunner:
    """Execute command lines through a POSIX shell.

    Attributes:
        shell: Shell binary, invoked as ``shell -c command``.
        cwd: Working directory for commands (None = current directory).

    Example:
        ```python
        runner = ShellRunner()
        result = runner.run("echo $GREETING", env={"GREETING": "hi"})
        assert result.stdout_lines == ["hi"]
        ```
    """

    def __init__(self, shell: str = DEFAULT_SHELL, cwd: Path | None = None) -> None:
        """Initialize the ShellRunner.

        Args:
            shell: Shell binary used for ``-c`` invocation.
            cwd: Working directory for commands. If None, uses current directory.
        """
        self._shell = shell
        self._cwd = cwd

    @property
    def shell(self) -> str:
        return self._shell

    @property
    def cwd(self) -> Path | None:
        return self._cwd

    def _build_env(
        self, extra_env: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Build environment by overlaying target variables on the host env.

        Args:
            extra_env: Variables to add/override.

        Returns:
            Complete environment dictionary.
        """
        env = os.environ.copy()
        if extra_env:
            env.update(extra_env)
        return env

    def run(
        self, command: str, env: Mapping[str, str] | None = None
    ) -> CommandResult:
        """Execute a command line and return its captured output.

        Args:
            command: Command line, interpreted by the shell.
            env: Variables overlaid on the host process environment.

        Returns:
            CommandResult with returncode, stdout, stderr and duration_ms.

        Raises:
            CommandExecutionError: If the shell cannot be spawned or the output
                is not valid UTF-8.
        """
        start_time = time.monotonic()
        logger.debug("command_spawning", command=command, shell=self._shell)

        try:
            completed = subprocess.run(
                [self._shell, "-c", command],
                capture_output=True,
                cwd=self._cwd,
                env=self._build_env(env),
                check=False,
            )
        except OSError as e:
            raise CommandExecutionError(
                f'failed to execute command "{command}": {e}',
                command=command,
            ) from e

        try:
            stdout_str = completed.stdout.decode("utf-8")
            stderr_str = completed.stderr.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CommandExecutionError(
                f'output of command "{command}" is not valid UTF-8: {e}',
                command=command,
                returncode=completed.returncode,
            ) from e

        duration_ms = int((time.monotonic() - start_time) * 1000)

        return CommandResult(
            command=command,
            returncode=completed.returncode,
            stdout=stdout_str,
            stderr=stderr_str,
            duration_ms=duration_ms,
        )
