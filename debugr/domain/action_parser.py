"""Response parsing: turns free-text LLM replies into executable actions.

Pure Python, no framework dependencies.

The reply is read line by line. File bodies are captured through two
interacting modes (an open file directive and a ``` fence), modelled as an
explicit ``ParserState`` with a transition table. Lines outside both modes
are classified by an ordered rule table: shell commands first, prose last.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from debugr.domain.models import Action, ActionKind

DIRECTIVE_PREFIXES: Dict[str, ActionKind] = {
    "CREATE_FILE:": ActionKind.CREATE_FILE,
    "MODIFY_FILE:": ActionKind.MODIFY_FILE,
}

FENCE = "```"

# Only the "$ " form is stripped; "$foo" and "go test" are kept verbatim.
COMMAND_PREFIX = "$ "

# Ordered (predicate, kind) pairs for lines outside file bodies.
# The first match wins; unmatched lines become explanations.
LINE_RULES: List[Tuple[Callable[[str], bool], ActionKind]] = [
    (lambda line: line.startswith("$"), ActionKind.COMMAND),
    (lambda line: line.startswith("go "), ActionKind.COMMAND),
]


class ParserState(Enum):
    IDLE = "idle"
    IN_FENCE = "in_fence"
    IN_FILE_ACTION = "in_file_action"
    IN_FILE_ACTION_AND_FENCE = "in_file_action_and_fence"

    @property
    def in_file_action(self) -> bool:
        return self in (ParserState.IN_FILE_ACTION, ParserState.IN_FILE_ACTION_AND_FENCE)

    @property
    def captures_body(self) -> bool:
        return self is not ParserState.IDLE


class ParserEvent(Enum):
    DIRECTIVE = "directive"
    FENCE = "fence"


# (state, event) -> (next state, flush open file action?)
TRANSITIONS: Dict[Tuple[ParserState, ParserEvent], Tuple[ParserState, bool]] = {
    (ParserState.IDLE, ParserEvent.DIRECTIVE): (ParserState.IN_FILE_ACTION, False),
    (ParserState.IN_FENCE, ParserEvent.DIRECTIVE): (ParserState.IN_FILE_ACTION, False),
    (ParserState.IN_FILE_ACTION, ParserEvent.DIRECTIVE): (ParserState.IN_FILE_ACTION, True),
    (ParserState.IN_FILE_ACTION_AND_FENCE, ParserEvent.DIRECTIVE): (ParserState.IN_FILE_ACTION, True),
    (ParserState.IDLE, ParserEvent.FENCE): (ParserState.IN_FENCE, False),
    (ParserState.IN_FENCE, ParserEvent.FENCE): (ParserState.IDLE, False),
    (ParserState.IN_FILE_ACTION, ParserEvent.FENCE): (ParserState.IN_FILE_ACTION_AND_FENCE, False),
    (ParserState.IN_FILE_ACTION_AND_FENCE, ParserEvent.FENCE): (ParserState.IDLE, True),
}


def transition(state: ParserState, event: ParserEvent) -> Tuple[ParserState, bool]:
    """Return the next state and whether the open file action must be flushed."""
    return TRANSITIONS[(state, event)]


def parse_directive(line: str) -> Optional[Tuple[ActionKind, str]]:
    """Parse a ``CREATE_FILE:<path>:...`` line into (kind, path).

    Returns None when the line is not a usable directive. Any inline content
    after the path is dropped; bodies come from the following lines.
    """
    for prefix, kind in DIRECTIVE_PREFIXES.items():
        if line.startswith(prefix):
            parts = line.split(":", 2)
            if len(parts) < 2:
                return None
            path = parts[1].strip()
            if not path:
                return None
            return kind, path
    return None


def is_fence(line: str) -> bool:
    return line == FENCE


def classify_line(line: str) -> Action:
    """Classify a line found outside any file body."""
    for predicate, kind in LINE_RULES:
        if predicate(line):
            if kind is ActionKind.COMMAND and line.startswith(COMMAND_PREFIX):
                return Action(kind=kind, content=line[len(COMMAND_PREFIX):])
            return Action(kind=kind, content=line)
    return Action(kind=ActionKind.EXPLANATION, content=line)


class ResponseParser:
    """Single-use parser for one reply. Use ``parse_actions`` instead."""

    def __init__(self):
        self.state = ParserState.IDLE
        self.actions: List[Action] = []
        self._buffer: List[str] = []
        self._open: Optional[Tuple[ActionKind, str]] = None

    def _flush(self):
        if self._open is not None:
            kind, path = self._open
            self.actions.append(Action(kind=kind, path=path, content="".join(self._buffer)))
        self._open = None
        self._buffer = []

    def _apply(self, event: ParserEvent):
        self.state, flush = transition(self.state, event)
        if flush:
            self._flush()

    def feed(self, raw_line: str):
        line = raw_line.strip()
        if not line:
            return

        directive = parse_directive(line)
        if directive is not None:
            self._apply(ParserEvent.DIRECTIVE)
            self._open = directive
            return
        if any(line.startswith(prefix) for prefix in DIRECTIVE_PREFIXES):
            return

        if is_fence(line):
            self._apply(ParserEvent.FENCE)
            return

        if self.state.captures_body:
            self._buffer.append(line + "\n")
            return

        self.actions.append(classify_line(line))

    def close(self) -> List[Action]:
        if self.state.in_file_action:
            self._flush()
        self.state = ParserState.IDLE
        return self.actions


def parse_actions(text: str) -> List[Action]:
    """Extract ordered actions from LLM response text. Never raises."""
    parser = ResponseParser()
    for line in text.strip().split("\n"):
        parser.feed(line)
    return parser.close()


def format_action(action: Action, index: int) -> str:
    """Render one action for review, numbered from 1."""
    if action.is_file_action:
        return f"{index}. {action.kind.value}: {action.path}\nContent:-\n{action.content}"
    if action.kind is ActionKind.COMMAND:
        return f"{index}. Execute:- {action.content}"
    return f"{index}. Note:- {action.content}"
