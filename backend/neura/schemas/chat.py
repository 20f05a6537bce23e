from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """A single prior message replayed to the relay."""

    role: str = Field(..., pattern="^(user|assistant)$")
    content: str


class ChatRequest(BaseModel):
    """Request body for sending a chat message."""

    message: str = Field(..., min_length=1)
    history: list[ChatTurn] = Field(default_factory=list)


class ChatReply(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
