# -*- coding: utf-8 -*-
"""
Поиск погоды по аргументам команды: аргументы → запрос → API → текст.
"""

import logging
from datetime import datetime
from typing import List, Optional

from core.models.weather_response import ChatMessage, LocationQuery
from core.utils.api_client import OpenWeatherClient
from scripts.weather._processes.formatter import format_weather_report

logger = logging.getLogger("data_fetcher")

USAGE_TEXT = "Usage: !weather (city[,country])|(postal code[,country])"


def usage_message() -> ChatMessage:
    """Справка по команде (notice)."""
    return ChatMessage(body=USAGE_TEXT, msgtype="m.notice")


def lookup(
    args: List[str],
    default_country: Optional[str],
    client: OpenWeatherClient,
    now: Optional[datetime] = None
) -> ChatMessage:
    """
    Выполняет поиск погоды.

    Args:
        args: Токены команды (город или индекс, опционально ", страна")
        default_country: Страна по умолчанию (если пусто, то "us")
        client: Клиент OpenWeatherMap
        now: Текущее время для относительной отметки (для тестов)

    Returns:
        ChatMessage: справка, если локация не указана, иначе строка погоды

    Raises:
        WeatherError: сетевая ошибка, статус != 200 или неверный JSON
    """
    query = LocationQuery.from_args(args or [], default_country)
    if not query.text:
        return usage_message()

    logger.info(f"🌍 Запрос погоды: '{query.to_query()}'")
    # Ошибки логирует клиент, здесь они только пробрасываются
    report = client.get_current_weather(query)

    return ChatMessage(body=format_weather_report(report, now), msgtype="m.text")
