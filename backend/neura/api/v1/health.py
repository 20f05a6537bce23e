"""Health check endpoint."""
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(request: Request):
    """
    Health check endpoint.

    Reports whether the chat relay was built at startup and which
    provider/model it talks to. The provider itself is not called.

    Returns:
        JSON response with overall status and relay configuration
    """
    settings = getattr(request.app.state, "settings", None)
    relay = getattr(request.app.state, "relay", None)
    healthy = relay is not None and settings is not None

    if not healthy:
        logger.warning("Health check: chat relay not initialized")

    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "healthy" if healthy else "unhealthy",
            "service": "neura",
            "provider": settings.llm_provider if settings else None,
            "model": settings.llm_chat_model if settings else None,
        },
    )
