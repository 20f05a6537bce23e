"""Multi-provider LLM service abstraction.

Supports: Google (Gemini), Groq, OpenAI
"""
import logging
from typing import Literal

from langchain_core.language_models import BaseChatModel

from neura.config import Settings

logger = logging.getLogger(__name__)

LLMProvider = Literal["google", "groq", "openai"]


def get_llm(
    settings: Settings,
    model: str | None = None,
    provider: LLMProvider | None = None,
) -> BaseChatModel:
    """Get an LLM instance for the configured provider.

    Args:
        settings: Application settings carrying the credential and generation config.
        model: Model name. If None, uses LLM_CHAT_MODEL from settings.
        provider: Provider name. If None, uses LLM_PROVIDER from settings.

    Returns:
        BaseChatModel instance for the provider.

    Raises:
        ConfigurationError: If LLM_API_KEY is missing or a placeholder.
        ValueError: If the provider is not supported.
    """
    provider = provider or settings.llm_provider
    model = model or settings.llm_chat_model
    api_key = settings.require_api_key()

    logger.info(f"Creating LLM: provider={provider}, model={model}")

    if provider == "google":
        from langchain_google_genai import ChatGoogleGenerativeAI

        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=settings.llm_temperature,
            top_k=settings.llm_top_k,
            top_p=settings.llm_top_p,
            max_output_tokens=settings.llm_max_output_tokens,
        )

    elif provider == "groq":
        from langchain_groq import ChatGroq

        # Nucleus/top-k sampling limits are left at Groq defaults
        return ChatGroq(
            model=model,
            api_key=api_key,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_output_tokens,
        )

    elif provider == "openai":
        from langchain_openai import ChatOpenAI

        return ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=settings.llm_temperature,
            top_p=settings.llm_top_p,
            max_tokens=settings.llm_max_output_tokens,
        )

    else:
        raise ValueError(
            f"Unknown LLM provider: '{provider}'. Supported: google, groq, openai."
        )


def get_chat_llm(settings: Settings) -> BaseChatModel:
    """Get the LLM configured for the chat relay."""
    return get_llm(
        settings,
        model=settings.llm_chat_model,
        provider=settings.llm_provider,
    )
