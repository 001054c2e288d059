"""Domain layer — pure Python, no framework dependencies."""

from debugr.domain.models import Action, ActionKind, File, FileContext
from debugr.domain.action_parser import ParserState, format_action, parse_actions
from debugr.domain.assistant import DebugAssistant
from debugr.domain.prompt import SYSTEM_PROMPT, build_user_message, detect_language

__all__ = [
    "Action",
    "ActionKind",
    "DebugAssistant",
    "File",
    "FileContext",
    "ParserState",
    "SYSTEM_PROMPT",
    "build_user_message",
    "detect_language",
    "format_action",
    "parse_actions",
]
