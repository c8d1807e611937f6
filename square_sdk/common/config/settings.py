"""Application settings and environment variables."""

import os

from dotenv import load_dotenv

load_dotenv()  # Load environment variables from .env file


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    # Emit absent fields as JSON null instead of omitting them
    SERIALIZE_NULLS: bool = _env_bool("SERIALIZE_NULLS", False)
    JSON_INDENT: int = int(os.getenv("JSON_INDENT", "2"))

    # Logging settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")  # INFO, DEBUG, WARNING, ERROR, CRITICAL
    # Codec DEBUG records (ignored payload keys) stay muted unless this is set
    LOG_DECODE_DETAILS: bool = _env_bool("LOG_DECODE_DETAILS", False)


settings = Settings()
