from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ProfileName = Literal["rc4", "rc4small"]


class AppSettings(BaseSettings):
    """
    Global configuration.

    This class is the single source of truth for:
    - environment selection
    - logging behavior
    - which engine profile / key create_engine falls back to
    """

    model_config = SettingsConfigDict(
        env_prefix="RC4RNG_",
        env_file=".env",
        extra="ignore",
    )

    # ---- Environment -------------------------------------------------

    env: Literal["local", "staging", "prod"] = "local"

    # ---- Logging -----------------------------------------------------

    log_level: str = "INFO"

    # ---- Engine defaults ---------------------------------------------

    profile: ProfileName = Field(
        default="rc4",
        description="Engine profile used when none is requested explicitly",
    )

    # When set, unkeyed engines seed from this instead of ambient randomness
    default_key: Optional[str] = Field(
        default=None,
        description="Fallback key for reproducible runs",
    )


# Singleton settings object
settings = AppSettings()
