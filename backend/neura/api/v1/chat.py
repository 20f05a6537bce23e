"""Chat relay endpoint."""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from neura.api.dependencies import get_relay
from neura.schemas.chat import ChatReply, ChatRequest, ErrorResponse
from neura.services.chat import RelayError, RelayService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "",
    response_model=ChatReply,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def send_chat_message(
    request: ChatRequest,
    relay: RelayService = Depends(get_relay),
):
    """Relay one user message to the chat model and return its reply."""
    logger.info(
        f"Incoming chat: message_len={len(request.message)} history_turns={len(request.history)}"
    )

    try:
        reply = await relay.reply(request.message, request.history)
    except RelayError as e:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=e.message).model_dump(),
        )

    return ChatReply(reply=reply)
