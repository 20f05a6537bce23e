import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from neura.api.router import api_router
from neura.config import ConfigurationError, get_settings
from neura.services.chat import RelayService
from neura.services.llm_provider import get_chat_llm
from neura.services.persona import load_persona
from neura.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info("Neura chat relay starting up...")

    try:
        llm = get_chat_llm(settings)
        persona = load_persona(settings)
    except ConfigurationError as e:
        logger.critical(e.message)
        raise

    app.state.settings = settings
    app.state.relay = RelayService(llm, persona)
    yield
    app.state.relay = None
    logger.info("Neura chat relay shutting down...")


app = FastAPI(
    title="Neura",
    description="Chat relay between the Neura frontend and a hosted language model",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: allow the local frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://frontend:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Message is required"},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": message},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(500)
async def internal_error_handler(request: Request, exc):
    logger.exception("Internal server error")
    return JSONResponse(
        status_code=500,
        content={"error": "Failed to process your message"},
    )
