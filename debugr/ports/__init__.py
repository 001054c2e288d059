"""Port interfaces (Hexagonal Architecture)."""

from debugr.ports.outbound import CommandRunnerPort, FileWriterPort, LLMPort

__all__ = [
    "CommandRunnerPort",
    "FileWriterPort",
    "LLMPort",
]
