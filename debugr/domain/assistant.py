"""DebugAssistant: prompt in, actions out."""

from typing import List, Optional

from debugr.domain.action_parser import parse_actions
from debugr.domain.models import Action, FileContext
from debugr.domain.prompt import SYSTEM_PROMPT, build_user_message
from debugr.logging_utils import get_logger
from debugr.ports.outbound import LLMPort


class DebugAssistant:
    """Assembles the prompt, asks the LLM port, and parses the reply.

    LLM errors propagate unchanged to the caller.
    """

    def __init__(self, llm: LLMPort, model: Optional[str] = None, log=None):
        self.llm = llm
        self.model = model
        self.log = log or get_logger("assistant")

    async def ask(self, prompt: str, context: Optional[FileContext] = None) -> List[Action]:
        self.log.debug("Sending prompt to AI: {}", prompt)
        message = build_user_message(prompt, context)
        reply = await self.llm.execute(message, system_prompt=SYSTEM_PROMPT, model=self.model)
        actions = parse_actions(reply)
        self.log.debug("Received {} actions", len(actions))
        return actions
