from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

PLACEHOLDER_KEYS = ("placeholder", "your-api-key-here", "your-gemini-api-key-here")


class ConfigurationError(Exception):
    """Raised when required configuration is missing at startup."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # LLM - Multi-provider support (google, groq, openai)
    llm_provider: str = "google"
    llm_api_key: str = ""
    llm_chat_model: str = "gemini-2.0-flash"

    # Generation
    llm_temperature: float = 0.7
    llm_top_k: int = 40
    llm_top_p: float = 0.95
    llm_max_output_tokens: int = 1024

    # Persona
    persona_name: str = "therapist"
    seed_user_message: str = "Hello, I could use someone to talk to."
    seed_assistant_message: str = (
        "I'm here to listen and support you. What's on your mind today?"
    )

    # Logging
    log_level: str = "INFO"

    def require_api_key(self) -> str:
        """Return the LLM credential, failing loudly if it is not configured."""
        key = self.llm_api_key.strip()
        if not key or key in PLACEHOLDER_KEYS:
            raise ConfigurationError(
                f"LLM API key not configured. Set LLM_API_KEY in .env for provider '{self.llm_provider}'."
            )
        return key


class ClientSettings(BaseSettings):
    """Settings for the conversation client (NEURA_* environment variables)."""

    model_config = SettingsConfigDict(
        env_prefix="NEURA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    relay_url: str = "http://localhost:8000/api/chat"
    greeting: str = "Hello, I'm Neura, your AI Therapist. How are you feeling today?"
    apology: str = (
        "I'm sorry, I'm having trouble responding right now. Please try again."
    )
    # Replay prior turns to the relay; off keeps single-turn context
    send_history: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_client_settings() -> ClientSettings:
    return ClientSettings()
