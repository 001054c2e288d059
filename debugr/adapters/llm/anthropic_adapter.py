"""Anthropic Messages API adapter — implements LLMPort over aiohttp."""

import asyncio
from typing import List, Optional

import aiohttp
from pydantic import BaseModel, ValidationError

from debugr.config import API_VERSION, AppConfig
from debugr.logging_utils import get_logger


class LLMError(Exception):
    """Base class for failed completion requests"""
    pass


class MarshalError(LLMError):
    """The request payload could not be serialized"""
    pass


class TransportError(LLMError):
    """The request never produced an HTTP response (network failure, timeout)"""
    pass


class StatusError(LLMError):
    """The API answered with a non-200 status"""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected status code: {status_code}, body: {body}")


class UnmarshalError(LLMError):
    """The response body was not a valid Messages API reply"""
    pass


class ContentBlock(BaseModel):
    type: str = "text"
    text: str = ""


class Message(BaseModel):
    role: str
    content: List[ContentBlock]


class MessagesRequest(BaseModel):
    model: str
    system: str
    messages: List[Message]
    max_tokens: int


class MessagesResponse(BaseModel):
    content: List[ContentBlock] = []


class AnthropicAdapter:
    """Sends one prompt to the Messages API. Implements LLMPort protocol.

    A single attempt is made per call; every failure surfaces as an
    LLMError subclass.
    """

    def __init__(self, config: AppConfig, log=None):
        self.config = config
        self.log = log or get_logger("anthropic")

    def _headers(self) -> dict:
        return {
            "content-type": "application/json",
            "anthropic-version": API_VERSION,
            "x-api-key": self.config.api_key,
        }

    def build_request(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> MessagesRequest:
        return MessagesRequest(
            model=model or self.config.model,
            system=system_prompt or "",
            max_tokens=self.config.max_tokens,
            messages=[
                Message(role="user", content=[ContentBlock(type="text", text=message)]),
            ],
        )

    async def execute(
        self,
        message: str,
        system_prompt: Optional[str] = None,
        model: Optional[str] = None,
    ) -> str:
        """Return the text of the first content block ("" if there is none)."""
        try:
            payload = self.build_request(message, system_prompt, model).model_dump_json()
        except (ValueError, TypeError) as e:
            raise MarshalError(f"failed to marshal request: {e}") from e

        self.log.debug("Sending request to API: {}", payload)

        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(
                    self.config.api_url, data=payload, headers=self._headers()
                ) as resp:
                    status = resp.status
                    body = await resp.text()
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"request timed out after {self.config.timeout_seconds:g}s"
            ) from e
        except aiohttp.ClientError as e:
            raise TransportError(f"failed to send request: {e}") from e

        self.log.debug("Response status: {}", status)
        self.log.debug("Response body: {}", body)

        if status != 200:
            raise StatusError(status, body)

        try:
            reply = MessagesResponse.model_validate_json(body)
        except ValidationError as e:
            raise UnmarshalError(f"failed to unmarshal response: {e}") from e

        if not reply.content:
            return ""
        return reply.content[0].text
