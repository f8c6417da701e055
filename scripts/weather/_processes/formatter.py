# -*- coding: utf-8 -*-
"""
Форматирование отчёта о текущей погоде в одну строку.
"""

import os
import logging
from datetime import datetime, timezone
from typing import Optional

import humanize
from jinja2 import Template

from core.models.weather_response import WeatherReport

logger = logging.getLogger("formatter")

# Загружаем шаблон из файла
TEMPLATE_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "_io", "templates", "current_weather.txt.j2")
with open(TEMPLATE_PATH, "r", encoding="utf-8") as f:
    CURRENT_WEATHER_TEMPLATE = Template(f.read())


def humanize_updated(dt: datetime, now: Optional[datetime] = None) -> str:
    """Относительное время обновления: '5 minutes ago'."""
    now = now or datetime.now(timezone.utc)
    return humanize.naturaltime(now - dt)


def format_weather_report(report: WeatherReport, now: Optional[datetime] = None) -> str:
    """
    Формирует строку статуса: место, время обновления, условия,
    температура (°F и °C), макс/мин, влажность, ветер.

    Args:
        report (WeatherReport): Декодированный ответ API
        now (datetime): Текущее время (для тестов)

    Returns:
        str: Текст сообщения
    """
    text = CURRENT_WEATHER_TEMPLATE.render(
        report=report,
        updated=humanize_updated(report.dt, now),
        conditions=report.conditions(),
    ).strip()
    logger.debug(f"📝 Отчёт сформирован для '{report.name}'")
    return text
