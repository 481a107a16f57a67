# prakriya/config.py
from enum import Enum
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central configuration for the derivation engine.
    Every field can be overridden with a PRAKRIYA_-prefixed environment
    variable or a .env file.
    """

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Engine ---
    # Keep the per-rule step history on every derivation.
    # Turning this off makes bulk generation cheaper; results are the same.
    LOG_STEPS: bool = True

    # --- Data ---
    # Override for the bundled root table (tab-separated, with a header row).
    DHATUPATHA_PATH: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PRAKRIYA_",
        extra="ignore",
    )


settings = Settings()
