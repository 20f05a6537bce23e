"""Persona directive and seed exchange for the chat relay."""
import logging
from dataclasses import dataclass
from pathlib import Path

from neura.config import Settings

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent.parent / "prompts"


@dataclass(frozen=True)
class SeedExchange:
    """A canned user/assistant turn pair placed before the real conversation."""

    user: str
    assistant: str


@dataclass(frozen=True)
class Persona:
    name: str
    instructions: str
    seed: tuple[SeedExchange, ...] = ()


def load_persona_instructions(name: str) -> str:
    """Load the persona directive from the prompts directory."""
    prompt_path = PROMPTS_DIR / f"{name}.txt"
    if not prompt_path.exists():
        raise FileNotFoundError(f"Persona prompt not found: {prompt_path}")
    return prompt_path.read_text(encoding="utf-8").strip()


def load_persona(settings: Settings) -> Persona:
    """Build the configured persona with its seed exchange."""
    instructions = load_persona_instructions(settings.persona_name)
    seed = (
        SeedExchange(
            user=settings.seed_user_message,
            assistant=settings.seed_assistant_message,
        ),
    )
    logger.info(
        f"Loaded persona '{settings.persona_name}' ({len(instructions)} chars, {len(seed)} seed turns)"
    )
    return Persona(name=settings.persona_name, instructions=instructions, seed=seed)
