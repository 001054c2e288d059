"""Interactive action executor.

Shows every parsed action, then asks before running each one. Only an exact
``y`` answer runs an action; explanations are printed without asking.
Failures are logged and never stop the remaining actions.

Per-action outcome: executed | skipped | failed
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from debugr.domain.action_parser import format_action
from debugr.domain.models import Action, ActionKind
from debugr.infrastructure.file_writer import FileWriter
from debugr.infrastructure.shell import CommandError, ShellRunner
from debugr.logging_utils import get_logger
from debugr.ports.outbound import CommandRunnerPort, FileWriterPort

CONFIRM_PROMPT = "Execute this action? (y/n): "


@dataclass
class ExecutionReport:
    executed: List[Action] = field(default_factory=list)
    skipped: List[Action] = field(default_factory=list)
    failed: List[Action] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class ActionExecutor:
    def __init__(
        self,
        writer: Optional[FileWriterPort] = None,
        runner: Optional[CommandRunnerPort] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        log=None,
    ):
        self.writer = writer or FileWriter()
        self.runner = runner or ShellRunner()
        self._input = input_fn
        self._output = output_fn
        self.log = log or get_logger("executor")
        self._stdin_closed = False

    def render(self, actions: List[Action]):
        self._output("Suggested actions:")
        for i, action in enumerate(actions, start=1):
            self._output(format_action(action, i))

    def confirm(self) -> bool:
        if self._stdin_closed:
            return False
        try:
            answer = self._input(CONFIRM_PROMPT)
        except EOFError:
            self._stdin_closed = True
            self._output("")
            return False
        return answer.strip() == "y"

    def run(self, actions: List[Action], dry_run: bool = False) -> ExecutionReport:
        """Render actions and, unless dry_run, confirm and execute them in order."""
        report = ExecutionReport()
        self.render(actions)
        if dry_run:
            report.skipped.extend(actions)
            return report

        for action in actions:
            if action.kind is ActionKind.EXPLANATION:
                self._output(action.content)
                continue
            if not self.confirm():
                report.skipped.append(action)
                continue
            if self.execute(action):
                report.executed.append(action)
            else:
                report.failed.append(action)
        return report

    def execute(self, action: Action) -> bool:
        """Perform one confirmed action. Returns False if it failed."""
        if action.is_file_action:
            verb = action.kind.value.lower()
            try:
                self.writer.write(action.path, action.content)
            except (OSError, ValueError) as e:
                self.log.warning("Failed to {}: {}", verb, e)
                return False
            self._output(f"File {verb[: -len('_file')]}: {action.path}")
            return True

        if action.kind is ActionKind.COMMAND:
            try:
                self.runner.run(action.content)
            except CommandError as e:
                self.log.warning("Failed to execute command: {}", e)
                return False
            return True

        return True
