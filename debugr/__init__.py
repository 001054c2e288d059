"""debugr: LLM-assisted debugging and testing from the command line."""

__version__ = "0.1.0"

from debugr.config import AppConfig, ConfigError
from debugr.domain.models import Action, ActionKind, File, FileContext
from debugr.domain.action_parser import parse_actions

__all__ = [
    "__version__",
    "Action",
    "ActionKind",
    "AppConfig",
    "ConfigError",
    "File",
    "FileContext",
    "parse_actions",
]
