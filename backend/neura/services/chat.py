"""Chat relay service.

Forwards a single user message to the chat model behind the configured
persona directive and seed exchange, and returns the completion text.
"""
import logging
from collections.abc import Iterable

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from neura.schemas.chat import ChatTurn
from neura.services.persona import Persona

logger = logging.getLogger(__name__)


class RelayError(Exception):
    """Raised when the chat model fails to produce a completion."""

    def __init__(self, message: str = "Failed to process your message"):
        self.message = message
        super().__init__(self.message)


def _completion_text(response: BaseMessage) -> str:
    """Extract plain text from a model response (string or content parts)."""
    content = response.content
    if isinstance(content, str):
        return content.strip()

    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type", "text") == "text":
            parts.append(part.get("text") or "")
    return "".join(parts).strip()


class RelayService:
    """Stateless relay between the chat endpoint and the hosted model."""

    def __init__(self, llm: BaseChatModel, persona: Persona):
        self.llm = llm
        self.persona = persona

    def build_messages(
        self, message: str, history: Iterable[ChatTurn] = ()
    ) -> list[BaseMessage]:
        """Build the model input: persona, seed exchange, history, then the message."""
        messages: list[BaseMessage] = [SystemMessage(content=self.persona.instructions)]

        for exchange in self.persona.seed:
            messages.append(HumanMessage(content=exchange.user))
            messages.append(AIMessage(content=exchange.assistant))

        for turn in history:
            if turn.role == "user":
                messages.append(HumanMessage(content=turn.content))
            else:
                messages.append(AIMessage(content=turn.content))

        messages.append(HumanMessage(content=message))
        return messages

    async def reply(self, message: str, history: Iterable[ChatTurn] = ()) -> str:
        """Send the message to the model and await a single completion.

        Raises:
            RelayError: On any provider failure or an empty completion.
        """
        messages = self.build_messages(message, history)

        try:
            response = await self.llm.ainvoke(messages)
            text = _completion_text(response)
        except Exception as e:
            logger.exception(f"Chat LLM error: {e}")
            raise RelayError() from e

        if not text:
            logger.error("Chat LLM returned an empty completion")
            raise RelayError()

        logger.info(f"Chat reply generated ({len(text)} chars)")
        return text
