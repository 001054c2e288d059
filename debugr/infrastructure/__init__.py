"""Infrastructure: filesystem and shell access."""

from debugr.infrastructure.context import ContextError, load_directory_context, load_file_context
from debugr.infrastructure.file_writer import FileWriter, write_file
from debugr.infrastructure.shell import CommandError, ShellRunner

__all__ = [
    "CommandError",
    "ContextError",
    "FileWriter",
    "ShellRunner",
    "load_directory_context",
    "load_file_context",
    "write_file",
]
