"""Hub configuration."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_KEY_STORE_PATH = Path.home() / ".modelhub" / "keys.env"


class HubSettings(BaseSettings):
    """Hub settings loaded from MODELHUB_* environment variables.

    Provider API keys are not settings; they are resolved per provider by
    the credential resolver.
    """

    model_config = SettingsConfigDict(
        env_prefix="MODELHUB_",
        env_file=".env",
        extra="ignore",
    )

    # Persistent key store (dotenv file) consulted after the environment
    key_store_path: Path = DEFAULT_KEY_STORE_PATH

    # Gemini endpoint override
    google_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # Sampling temperature applied to every model; None keeps provider defaults
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)

    # Key store changes to keys containing this marker trigger a rebuild
    reload_key_marker: str = "API_KEY"


settings = HubSettings()
