# tests/integration/test_weather_full_chain.py
# -*- coding: utf-8 -*-
"""
Полная цепочка: ProcessManager → /weather → lookup → OpenWeatherClient → форматирование → send_message.
HTTP подменяется фейковой сессией.
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock

from config.bot_config import BotConfig
from process_manager import ProcessManager
from scripts.weather import weather_handler
from tests.fixtures.openweather import fake_response, fake_session, sample_payload


async def test_weather_full_chain(monkeypatch):
    print("🧪 ТЕСТ: Полная цепочка weather модуля")

    # === 1. ИНИЦИАЛИЗАЦИЯ ===
    monkeypatch.setattr("process_manager.setup_logging", lambda *args, **kwargs: None)
    manager = ProcessManager()
    manager.initialize_sync(BotConfig(telegram_token="t", weather_api_key="owm", default_country="us"))
    session = fake_session(fake_response(200, sample_payload(weather=[], name="Springfield")))
    manager.weather_client.session = session
    monkeypatch.setattr(weather_handler, "process_manager", manager)

    # === 2. КОМАНДА ===
    update = SimpleNamespace(
        effective_chat=SimpleNamespace(id=1),
        effective_user=SimpleNamespace(id=2),
        effective_message=SimpleNamespace(text="!weather Springfield"),
    )
    context = SimpleNamespace(args=None, bot=AsyncMock())
    await weather_handler.weather_bang_command(update, context)

    # === 3. ПРОВЕРКА ===
    params = session.get.call_args.kwargs["params"]
    assert params == {"q": "Springfield, us", "appid": "owm"}
    text = context.bot.send_message.call_args.kwargs["text"]
    assert text.startswith("Springfield || Updated: ")
    assert "Conditions:  ()" in text
    assert "Humidity: 81%" in text
    assert text.endswith("E at 9.2 MPH (14.8 km/h)")

    # === 4. ЗАВЕРШЕНИЕ ===
    manager.shutdown_sync()
    session.close.assert_called_once()
    print("✅ Цепочка замкнулась")
