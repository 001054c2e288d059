"""Outbound ports — interfaces for external system adapters."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LLMPort(Protocol):
    """Interface for LLM completion backends."""

    async def execute(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str: ...


@runtime_checkable
class FileWriterPort(Protocol):
    """Interface for writing file actions to disk."""

    def write(self, path: str, content: str) -> None: ...


@runtime_checkable
class CommandRunnerPort(Protocol):
    """Interface for running shell commands."""

    def run(self, command: str) -> int: ...
