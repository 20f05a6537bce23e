"""Conversation client for the Neura chat relay.

Keeps the in-memory conversation for one session, sends each new user
message to the relay and appends the reply (or a fixed apology).
One request is in flight at a time: submits made while a request is
pending are ignored, the same way the frontend disables its input.
"""
import logging
import uuid
from collections.abc import Callable
from enum import Enum

import httpx
from pydantic import BaseModel, ConfigDict, Field

from neura.config import ClientSettings, get_client_settings
from neura.schemas.chat import ChatReply

logger = logging.getLogger(__name__)


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """One entry in the conversation. `id` is only a stable rendering key."""

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)


class ClientState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"


ChangeListener = Callable[["ConversationClient"], None]


class ConversationClient:
    """Client-side conversation state and relay calls."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or get_client_settings()
        # No timeout: a request runs until the relay answers or the transport fails
        self._http = http_client or httpx.AsyncClient(timeout=None)
        self._owns_http = http_client is None
        self._listeners: list[ChangeListener] = []

        self.messages: list[Message] = [
            Message(role=Role.ASSISTANT, content=self.settings.greeting)
        ]
        self.draft = ""
        self.state = ClientState.IDLE

    async def __aenter__(self) -> "ConversationClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    @property
    def is_pending(self) -> bool:
        return self.state is ClientState.PENDING

    @property
    def input_enabled(self) -> bool:
        return not self.is_pending

    @property
    def is_typing(self) -> bool:
        """Whether the typing indicator should be shown."""
        return self.is_pending

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a callback invoked after every state or conversation change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self)

    def _append(self, role: Role, content: str) -> Message:
        message = Message(role=role, content=content)
        self.messages.append(message)
        return message

    def _payload(self, text: str) -> dict:
        payload: dict = {"message": text}
        if self.settings.send_history:
            # Everything before the user message that was just appended
            payload["history"] = [
                {"role": m.role.value, "content": m.content} for m in self.messages[:-1]
            ]
        return payload

    async def _request_reply(self, text: str) -> str:
        response = await self._http.post(self.settings.relay_url, json=self._payload(text))
        response.raise_for_status()
        return ChatReply.model_validate(response.json()).reply

    async def submit(self, text: str | None = None) -> Message | None:
        """Submit a user message and wait for the assistant's answer.

        Args:
            text: Message to send. If None, the current draft is sent.

        Returns:
            The assistant message appended (reply or apology), or None if the
            submit was rejected (blank input, or a request already pending).
        """
        text = self.draft if text is None else text

        if self.is_pending:
            logger.debug("Submit ignored: a request is already pending")
            return None
        if not text.strip():
            return None

        self._append(Role.USER, text)
        self.draft = ""
        self.state = ClientState.PENDING

        try:
            self._notify()
            reply = await self._request_reply(text)
        except Exception as e:
            logger.warning(f"Chat request failed: {e}", exc_info=True)
            reply = self.settings.apology
        finally:
            self.state = ClientState.IDLE

        assistant_message = self._append(Role.ASSISTANT, reply)
        self._notify()
        return assistant_message
