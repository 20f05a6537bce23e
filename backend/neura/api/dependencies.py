"""Dependency injection functions for API routes."""
from fastapi import HTTPException, Request

from neura.services.chat import RelayService


def get_relay(request: Request) -> RelayService:
    """Get the relay built at startup.

    Raises:
        HTTPException: If the application has not finished starting up.
    """
    relay = getattr(request.app.state, "relay", None)
    if relay is None:
        raise HTTPException(status_code=503, detail="Chat relay is not ready")
    return relay
