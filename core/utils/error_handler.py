# -*- coding: utf-8 -*-
"""
Утилита для централизованной обработки ошибок.

Ошибки погоды (WeatherError) логирует клиент API в месте возникновения;
здесь только необработанные исключения бота и текст для чата.
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


def _format_context(context: Optional[dict]) -> str:
    return f" | Контекст: {context}" if context else ""


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст (update_id и т.п.)
    """
    logger.error(f"{message}{_format_context(context)} | Ошибка: {exception!r}", exc_info=exception)


def user_error_text(exception: Exception) -> str:
    """Короткий текст ошибки для отправки в чат."""
    return f"❌ {exception}"
