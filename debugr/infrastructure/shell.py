"""Shell execution for COMMAND actions."""

import subprocess
from pathlib import Path
from typing import Optional


class CommandError(Exception):
    """Raised when a command cannot be started or exits non-zero"""

    def __init__(self, command: str, returncode: Optional[int], reason: str = ""):
        self.command = command
        self.returncode = returncode
        detail = reason or f"exit status {returncode}"
        super().__init__(f"{detail}\nCommand was: {command}")


class ShellRunner:
    """Runs commands through the system shell. Implements CommandRunnerPort.

    stdout/stderr are inherited so the user sees output as it is produced.
    """

    def __init__(self, cwd: Optional[Path] = None, timeout: Optional[float] = None):
        self.cwd = cwd
        self.timeout = timeout

    def run(self, command: str) -> int:
        try:
            result = subprocess.run(command, shell=True, cwd=self.cwd, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise CommandError(command, None, f"timed out after {e.timeout}s") from e
        except (OSError, ValueError) as e:
            raise CommandError(command, None, str(e)) from e
        if result.returncode != 0:
            raise CommandError(command, result.returncode)
        return result.returncode
