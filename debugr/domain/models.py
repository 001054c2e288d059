"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ActionKind(str, Enum):
    """What a parsed action does. Values match the directive names."""

    CREATE_FILE = "CREATE_FILE"
    MODIFY_FILE = "MODIFY_FILE"
    COMMAND = "COMMAND"
    EXPLANATION = "EXPLANATION"


FILE_KINDS = (ActionKind.CREATE_FILE, ActionKind.MODIFY_FILE)


@dataclass(frozen=True)
class Action:
    """Parsed action from LLM response."""

    kind: ActionKind
    content: str = ""
    path: Optional[str] = None  # file actions only

    def __post_init__(self):
        if self.kind in FILE_KINDS:
            if not self.path:
                raise ValueError(f"{self.kind.value} action requires a path")
        elif self.path is not None:
            raise ValueError(f"{self.kind.value} action cannot carry a path")

    @property
    def is_file_action(self) -> bool:
        return self.kind in FILE_KINDS


@dataclass
class File:
    """One source file sent to the model as context."""

    path: str
    content: str
    language: str = "Unknown"


@dataclass
class FileContext:
    files: List[File] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.files
