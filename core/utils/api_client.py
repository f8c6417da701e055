# -*- coding: utf-8 -*-
"""
Клиент OpenWeatherMap (текущая погода).

- Один синхронный GET на вызов, без повторов и кэша
- Общая сессия requests, не изменяется между запросами
- Ошибки сети, HTTP-статуса и декодирования поднимаются как WeatherError
"""
import logging
import re
from typing import Optional
from urllib.parse import urlparse

import requests

from core.models.weather_response import LocationQuery, WeatherReport

logger = logging.getLogger("api_client")

# === КОНФИГУРАЦИЯ API ===
API_BASE = "https://api.openweathermap.org/data/2.5/weather"
API_TIMEOUT = 30  # секунд

_APPID_PARAM = re.compile(r"(appid=)[^&\s]+")


class WeatherError(Exception):
    """Базовая ошибка запроса погоды."""


class WeatherRequestError(WeatherError):
    """Сетевая ошибка: запрос не дошёл или ответ не получен."""


class WeatherAPIError(WeatherError):
    """API вернул статус, отличный от 200."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"invalid response: {body}")


class WeatherDecodeError(WeatherError):
    """Тело ответа не удалось разобрать в WeatherReport."""


class OpenWeatherClient:
    """Клиент для OpenWeatherMap API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = API_BASE,
        timeout: float = API_TIMEOUT,
        session: Optional[requests.Session] = None
    ):
        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"could not parse base url: {base_url!r}")

        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_current_weather(self, query: LocationQuery) -> WeatherReport:
        """
        Получает текущую погоду для локации.

        Args:
            query: Локация (текст + страна)

        Returns:
            WeatherReport

        Raises:
            WeatherRequestError, WeatherAPIError, WeatherDecodeError
        """
        params = {"q": query.to_query(), "appid": self.api_key}

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            # Текст исключения requests содержит URL вместе с appid
            logger.error(f"❌ OpenWeatherMap: ошибка запроса для '{query.to_query()}': {self.redact(str(e))}")
            host = urlparse(self.base_url).netloc
            raise WeatherRequestError(f"error making weather request: {type(e).__name__} ({host})") from e

        if response.status_code != 200:
            logger.warning(f"⚠️ OpenWeatherMap: статус {response.status_code} для '{query.to_query()}'")
            raise WeatherAPIError(response.status_code, response.text)

        try:
            report = WeatherReport.from_dict(response.json())
        except (ValueError, TypeError, AttributeError, OverflowError) as e:
            logger.error(f"❌ OpenWeatherMap: неверный ответ для '{query.to_query()}': {e}")
            raise WeatherDecodeError(f"invalid weather response: {e}") from e

        logger.info(f"✅ OpenWeatherMap: погода получена для '{report.name}'")
        return report

    def redact(self, text: str) -> str:
        """Убирает API-ключ из текста (логи, сообщения об ошибках)."""
        text = _APPID_PARAM.sub(r"\1***", text)
        if self.api_key:
            text = text.replace(self.api_key, "***")
        return text

    def close(self):
        self.session.close()
