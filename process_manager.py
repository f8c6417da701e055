# process_manager.py
# -*- coding: utf-8 -*-
"""
Глобальный координатор зависимостей.
Инициализирует конфигурацию и общий HTTP-клиент погоды один раз и предоставляет к ним доступ.
"""

import logging
from typing import Optional
from config.bot_config import BotConfig
from config.logging_config import setup_logging
from core.utils.api_client import OpenWeatherClient

logger = logging.getLogger("process_manager")


class ProcessManager:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(self):
        self._initialized = False
        # Конфигурация
        self.config: Optional[BotConfig] = None
        # Общий клиент OpenWeatherMap (одна сессия на процесс)
        self.weather_client: Optional[OpenWeatherClient] = None

    def initialize_sync(self, config: Optional[BotConfig] = None):
        """Синхронная инициализация всех компонентов."""
        if self._initialized:
            return

        # 1. Загрузка конфигурации
        self.config = config or BotConfig.load()
        setup_logging(self.config.log_level, secrets=self.config.secrets())

        # 2. Клиент погоды
        if not self.config.weather_api_key:
            logger.warning("⚠️ OPENWEATHER_API_KEY не задан, запросы погоды будут отклонены API")
        self.weather_client = OpenWeatherClient(
            api_key=self.config.weather_api_key,
            timeout=self.config.api_timeout
        )

        self._initialized = True
        logger.info("✅ ProcessManager: initialized (weather client ready)")

    def shutdown_sync(self):
        """Синхронное завершение (закрытие ресурсов)."""
        if not self._initialized:
            return

        if self.weather_client:
            self.weather_client.close()
        self._initialized = False
        logger.info("🛑 ProcessManager: shut down")


# Глобальный экземпляр, точка доступа для всех модулей
process_manager = ProcessManager()
