"""Tests for executor.py — confirmation flow with mock ports."""

import pytest

from debugr.domain.models import Action, ActionKind
from debugr.executor import CONFIRM_PROMPT, ActionExecutor
from debugr.infrastructure.file_writer import FileWriter
from debugr.infrastructure.shell import CommandError, ShellRunner


class MockWriter:
    def __init__(self, error=None):
        self.error = error
        self.writes = []

    def write(self, path, content):
        if self.error:
            raise self.error
        self.writes.append((path, content))


class MockRunner:
    def __init__(self, fail_on=()):
        self.fail_on = set(fail_on)
        self.commands = []

    def run(self, command):
        self.commands.append(command)
        if command in self.fail_on:
            raise CommandError(command, 1)
        return 0


class MockWarnLog:
    def __init__(self):
        self.warnings = []

    def warning(self, msg, *args):
        self.warnings.append(msg.format(*args))

    def debug(self, msg, *args):
        pass


def _answers(*values):
    it = iter(values)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    return _input, prompts


def _make(answers=(), writer=None, runner=None):
    input_fn, prompts = _answers(*answers)
    out = []
    log = MockWarnLog()
    executor = ActionExecutor(
        writer=writer or MockWriter(),
        runner=runner or MockRunner(),
        input_fn=input_fn,
        output_fn=out.append,
        log=log,
    )
    return executor, prompts, out, log


FILE = Action(kind=ActionKind.CREATE_FILE, path="a.go", content="package a\n")
MODIFY = Action(kind=ActionKind.MODIFY_FILE, path="b.py", content="x = 1\n")
CMD = Action(kind=ActionKind.COMMAND, content="go test ./...")
NOTE = Action(kind=ActionKind.EXPLANATION, content="Check the logs.")


def test_render():
    executor, _, out, _ = _make()
    executor.render([FILE, CMD, NOTE])
    assert out == [
        "Suggested actions:",
        "1. CREATE_FILE: a.go\nContent:-\npackage a\n",
        "2. Execute:- go test ./...",
        "3. Note:- Check the logs.",
    ]


def test_dry_run_executes_nothing():
    writer, runner = MockWriter(), MockRunner()
    executor, prompts, _, _ = _make(writer=writer, runner=runner)
    report = executor.run([FILE, CMD], dry_run=True)
    assert prompts == []
    assert writer.writes == []
    assert runner.commands == []
    assert report.skipped == [FILE, CMD]


def test_yes_executes_all():
    writer, runner = MockWriter(), MockRunner()
    executor, prompts, out, _ = _make(["y", "y", "y"], writer, runner)
    report = executor.run([FILE, MODIFY, CMD])
    assert prompts == [CONFIRM_PROMPT] * 3
    assert writer.writes == [("a.go", "package a\n"), ("b.py", "x = 1\n")]
    assert runner.commands == ["go test ./..."]
    assert "File create: a.go" in out
    assert "File modify: b.py" in out
    assert report.executed == [FILE, MODIFY, CMD]
    assert report.ok


@pytest.mark.parametrize("answer", ["n", "Y", "yes", "", " n "])
def test_only_exact_y_proceeds(answer):
    runner = MockRunner()
    executor, _, _, _ = _make([answer], runner=runner)
    report = executor.run([CMD])
    assert runner.commands == []
    assert report.skipped == [CMD]


def test_answer_is_stripped():
    runner = MockRunner()
    executor, _, _, _ = _make([" y \n"], runner=runner)
    executor.run([CMD])
    assert runner.commands == ["go test ./..."]


def test_explanations_not_confirmed():
    executor, prompts, out, _ = _make(["y"])
    executor.run([NOTE, CMD])
    assert prompts == [CONFIRM_PROMPT]
    assert out[-1] == "Check the logs."


def test_failures_continue():
    runner = MockRunner(fail_on={"false"})
    executor, _, _, log = _make(["y", "y"], runner=runner)
    bad = Action(kind=ActionKind.COMMAND, content="false")
    report = executor.run([bad, CMD])
    assert runner.commands == ["false", "go test ./..."]
    assert report.failed == [bad]
    assert report.executed == [CMD]
    assert not report.ok
    assert "Failed to execute command" in log.warnings[0]


def test_write_failure_logged():
    executor, _, _, log = _make(["y", "y"], writer=MockWriter(error=PermissionError("denied")))
    report = executor.run([FILE, CMD])
    assert report.failed == [FILE]
    assert report.executed == [CMD]
    assert log.warnings == ["Failed to create_file: denied"]


def test_eof_skips_remaining():
    runner = MockRunner()
    executor, prompts, _, _ = _make([], runner=runner)
    report = executor.run([CMD, CMD])
    assert len(prompts) == 1
    assert runner.commands == []
    assert report.skipped == [CMD, CMD]


def test_null_byte_path_is_not_fatal(tmp_path):
    runner = MockRunner()
    executor, _, _, log = _make(["y", "y"], writer=FileWriter(), runner=runner)
    bad = Action(kind=ActionKind.CREATE_FILE, path=str(tmp_path / "a\x00b.txt"), content="x")
    report = executor.run([bad, CMD])
    assert report.failed == [bad]
    assert runner.commands == ["go test ./..."]
    assert report.executed == [CMD]
    assert log.warnings[0].startswith("Failed to create_file:")


def test_null_byte_command_is_not_fatal(tmp_path):
    writer = MockWriter()
    executor, _, _, log = _make(["y", "y"], writer=writer, runner=ShellRunner(cwd=tmp_path))
    bad = Action(kind=ActionKind.COMMAND, content="echo a\x00b")
    report = executor.run([bad, FILE])
    assert report.failed == [bad]
    assert writer.writes == [("a.go", "package a\n")]
    assert "Failed to execute command" in log.warnings[0]
