# config/bot_config.py
import logging
import os
from dataclasses import dataclass
from dotenv import load_dotenv
load_dotenv()

logger = logging.getLogger("bot_config")


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"⚠️ {name}={raw!r} не является числом, используется значение по умолчанию {default}")
        return default


@dataclass
class BotConfig:
    telegram_token: str
    weather_api_key: str
    default_country: str = "us"
    api_timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def load(cls):
        return cls(
            telegram_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            weather_api_key=os.getenv("OPENWEATHER_API_KEY", ""),
            default_country=os.getenv("WEATHER_DEFAULT_COUNTRY", "").strip() or "us",
            api_timeout=_env_float("WEATHER_API_TIMEOUT", 30.0),
            log_level=os.getenv("LOG_LEVEL", "INFO")
        )

    def secrets(self) -> list:
        """Значения, которые не должны попадать в логи."""
        return [s for s in (self.telegram_token, self.weather_api_key) if s]
