# utils/settings.py

from dataclasses import dataclass
from functools import lru_cache

from starlette.config import Config

# --- Configuration (Load from Environment) ---
# Values come from OS environment variables, falling back to a local .env file if present.
config = Config(".env")


@dataclass(frozen=True)
class Settings:
    openai_api_key: str = ""
    llm_model: str = "gpt-4-turbo-preview"
    llm_timeout: float = 60.0
    llm_temperature: float = 0.7

    @property
    def llm_enabled(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Reads the service settings once per process."""
    return Settings(
        openai_api_key=config("OPENAI_API_KEY", default=""),
        llm_model=config("SLAINTE_LLM_MODEL", default="gpt-4-turbo-preview"),
        llm_timeout=config("SLAINTE_LLM_TIMEOUT", cast=float, default=60.0),
        llm_temperature=config("SLAINTE_LLM_TEMPERATURE", cast=float, default=0.7),
    )
