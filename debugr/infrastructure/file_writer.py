"""File writes for CREATE_FILE / MODIFY_FILE actions.

Content is whitespace-normalized, then test files get a best-effort fix-up of
their package/import line so it names the directory they are written into.
The fix-up rules are a plain ordered table and can be disabled.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union


@dataclass(frozen=True)
class FixupRule:
    """Marks files for which the first ``marker`` line is rewritten."""

    suffix: str
    matches: Callable[[str], bool]
    marker: str


TEST_FILE_RULES: List[FixupRule] = [
    FixupRule(".go", lambda name: name.endswith("_test.go"), "package"),
    FixupRule(".py", lambda name: name.startswith("test_"), "from . import"),
    FixupRule(
        ".js",
        lambda name: name.startswith("test_") or name.endswith(".test.js"),
        "const { ",
    ),
]


def normalize_content(content: str) -> str:
    """Strip leading whitespace from every line except the first."""
    lines = content.split("\n")
    return "\n".join(lines[:1] + [line.lstrip() for line in lines[1:]])


def ensure_correct_package(content: str, package_name: str, prefix: str) -> str:
    """Rewrite the first line starting with ``prefix`` to reference ``package_name``."""
    lines = content.split("\n")
    for i, line in enumerate(lines):
        if line.strip().startswith(prefix):
            lines[i] = f"{prefix.strip()} {package_name}"
            break
    return "\n".join(lines)


def find_rule(path: Path) -> Optional[FixupRule]:
    for rule in TEST_FILE_RULES:
        if path.suffix == rule.suffix and rule.matches(path.name):
            return rule
    return None


def prepare_content(path: Union[str, Path], content: str, fixups: bool = True) -> str:
    """Return the exact text that ``write_file`` puts on disk."""
    path = Path(path)
    content = normalize_content(content)
    if fixups:
        rule = find_rule(path)
        if rule is not None:
            package_name = path.resolve().parent.name
            content = ensure_correct_package(content, package_name, rule.marker)
    return content


def write_file(path: Union[str, Path], content: str, fixups: bool = True) -> Path:
    """Write an action's content, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(prepare_content(path, content, fixups), encoding="utf-8")
    return path


class FileWriter:
    """Implements FileWriterPort on the local filesystem."""

    def __init__(self, fixups: bool = True):
        self.fixups = fixups

    def write(self, path: str, content: str) -> None:
        write_file(path, content, fixups=self.fixups)
