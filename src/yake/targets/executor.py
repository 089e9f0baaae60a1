"""Sequential execution of a target and its direct dependencies.

Execution protocol for a requested target ``name``:

1. Resolve the target, its direct dependencies and its environment. Any
   failure here aborts before a single command runs.
2. Run each dependency's commands, in ``depends`` order.
3. Run the target's own commands.

Every command, including those of dependencies, runs with the environment
resolved for ``name``; dependencies do not get an environment of their own.
Only callable targets have their ``exec`` list run.
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.text import Text

from yake.document.schema import Document, Target
from yake.exceptions import CommandExecutionError, UnknownTargetError
from yake.logging import get_logger
from yake.runners.models import CommandResult
from yake.runners.protocols import CommandRunner
from yake.runners.shell import ShellRunner
from yake.targets.dependencies import dependencies_of
from yake.targets.environment import resolved_env
from yake.targets.tree import get_target, target_names

__all__ = ["ExecutionResult", "TargetExecutor"]

logger = get_logger(__name__)

LINE_MARKER = "┆"


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Outcome of a completed execution.

    Attributes:
        target_name: The target that was requested.
        commands: Results of every command run, in execution order.
    """

    target_name: str
    commands: tuple[CommandResult, ...] = ()

    @property
    def success(self) -> bool:
        return all(result.success for result in self.commands)


class TargetExecutor:
    """Run targets of a composed document.

    Attributes:
        document: The composed document; never mutated.
        runner: Executes single command lines.
        console: Receives progress lines and command stdout.
        err_console: Receives command stderr.
        stop_on_failure: Abort on the first command exiting non-zero.

    Example:
        ```python
        executor = TargetExecutor(document, runner=ShellRunner())
        executor.execute("group.sub")
        ```
    """

    def __init__(
        self,
        document: Document,
        runner: CommandRunner | None = None,
        console: Console | None = None,
        err_console: Console | None = None,
        stop_on_failure: bool = False,
    ) -> None:
        self.document = document
        self.runner = runner if runner is not None else ShellRunner()
        self.console = console if console is not None else Console()
        self.err_console = (
            err_console if err_console is not None else Console(stderr=True)
        )
        self.stop_on_failure = stop_on_failure

    def execute(self, name: str) -> ExecutionResult:
        """Run the dependencies of ``name``, then ``name`` itself.

        Args:
            name: Qualified name of the requested target.

        Returns:
            ExecutionResult listing every command that ran.

        Raises:
            UnknownTargetError: If ``name`` or a dependency does not resolve.
            ReservedEnvironmentVariableError: If the resolved environment
                contains a reserved variable.
            CommandExecutionError: If a command cannot be run (or, with
                ``stop_on_failure``, exits non-zero). Nothing after it runs.
        """
        target = get_target(self.document, name)
        if target is None:
            raise UnknownTargetError(name, available=target_names(self.document))

        dependencies = dependencies_of(self.document, name)
        env = resolved_env(self.document, name)

        log = logger.bind(target_name=name)
        log.info("target_started", dependencies=len(dependencies))

        results: list[CommandResult] = []
        for dependency in dependencies:
            results.extend(self._run_target(dependency, env))
        results.extend(self._run_target(target, env))

        log.info("target_finished", commands=len(results))
        return ExecutionResult(target_name=name, commands=tuple(results))

    def _run_target(self, target: Target, env: dict[str, str]) -> list[CommandResult]:
        if not target.is_callable or not target.commands:
            return []

        results = [self._run_command(command, env) for command in target.commands]
        self.console.print(Text("↪ Done", style="bold blue"))
        return results

    def _run_command(self, command: str, env: dict[str, str]) -> CommandResult:
        self.console.print(
            Text.assemble(
                ("↪ Executing", "bold blue"), " ", (command, "bold green"), ":"
            ),
            soft_wrap=True,
        )
        logger.debug("command_started", command=command)

        result = self.runner.run(command, env)

        for line in result.stdout_lines:
            self._emit(self.console, line, "bold green")
        for line in result.stderr_lines:
            self._emit(self.err_console, line, "bold red")

        logger.debug(
            "command_finished",
            command=command,
            returncode=result.returncode,
            duration_ms=result.duration_ms,
        )

        if not result.success:
            logger.warning(
                "command_failed", command=command, returncode=result.returncode
            )
            if self.stop_on_failure:
                raise CommandExecutionError(
                    f'command "{command}" exited with status {result.returncode}',
                    command=command,
                    returncode=result.returncode,
                )

        return result

    @staticmethod
    def _emit(console: Console, line: str, style: str) -> None:
        console.print(
            Text.assemble((LINE_MARKER, style), "  ", line),
            soft_wrap=True,
            highlight=False,
        )
