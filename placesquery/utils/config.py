import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from placesquery.core.errors import ConfigError
from placesquery.core.query import BASE_URL

API_KEY_ENV = "GOOGLE_MAPS_API_KEY"


def load_env():
    # load .env from the ROOT of the repo
    env_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(env_path)
    return os.getenv


@dataclass(frozen=True)
class Settings:
    api_key: str
    language: str = "en"
    sensor: str = "false"
    result_format: str = "json"
    timeout: float = 30
    base_url: str = BASE_URL

    @classmethod
    def from_env(cls) -> "Settings":
        getenv = load_env()
        key = getenv(API_KEY_ENV)
        if not key:
            raise ConfigError(f"Missing {API_KEY_ENV} in environment (.env).")
        raw_timeout = getenv("PLACES_TIMEOUT", "30")
        try:
            timeout = float(raw_timeout)
        except ValueError:
            raise ConfigError(f"PLACES_TIMEOUT must be a number, got {raw_timeout!r}") from None
        return cls(
            api_key=key,
            language=getenv("PLACES_LANGUAGE", "en"),
            sensor=getenv("PLACES_SENSOR", "false"),
            result_format=getenv("PLACES_RESULT_FORMAT", "json"),
            timeout=timeout,
            base_url=getenv("PLACES_BASE_URL", BASE_URL),
        )
