"""Prompt assembly for the debugging assistant."""

from pathlib import PurePath
from typing import Dict, Optional

from debugr.domain.models import FileContext

SYSTEM_PROMPT = """You are a helpful debugging and testing assistant.
Provide concise, actionable suggestions for debugging or testing the described issue.
Each suggestion should be a separate, executable command, a clear instruction, or a file operation.
For file operations, use the following format:
CREATE_FILE:<path>:<content>
or
MODIFY_FILE:<path>:<content>
When providing code, ensure it is complete, well-formatted, and includes proper indentation.
If you can't provide a specific action, suggest a general approach or next step."""

UNKNOWN_LANGUAGE = "Unknown"

# Extension -> language tag shown to the model
LANGUAGES: Dict[str, str] = {
    ".py": "Python",
    ".go": "Go",
    ".js": "JavaScript",
    ".ts": "TypeScript",
    ".rs": "Rust",
    ".java": "Java",
    ".rb": "Ruby",
    ".c": "C",
    ".cpp": "C++",
    ".sh": "Shell",
}


def detect_language(path: str) -> str:
    return LANGUAGES.get(PurePath(path).suffix, UNKNOWN_LANGUAGE)


def build_user_message(prompt: str, context: Optional[FileContext] = None) -> str:
    """Build the user message, prefixing file context when there is any.

    Each file becomes a block with its path, language and fenced content,
    in context order, followed by a final ``Request:`` line.
    """
    if context is None or context.is_empty:
        return prompt

    parts = ["Context:\n"]
    for f in context.files:
        parts.append(
            f"File: {f.path}\nLanguage: {f.language}\nContent:\n```\n{f.content}\n```\n\n"
        )
    parts.append("Request: " + prompt)
    return "".join(parts)
