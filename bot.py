# bot.py
# -*- coding: utf-8 -*-
"""
Основной скрипт бота: регистрирует команды погоды и запускает polling.
"""
import logging
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes
from process_manager import process_manager
from core.utils.error_handler import log_exception
from scripts.weather.weather_handler import build_handlers

logger = logging.getLogger("bot")


# === Обработчики команд ===
async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Приветствие."""
    await context.bot.send_message(
        chat_id=update.effective_chat.id,
        text=(
            "🌤️ Weather bot\n\n"
            "• /weather <city[,country]>: current conditions\n"
            "• !weather <postal code[,country]>: same, as plain text\n"
            "• /w: short alias"
        )
    )


async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE):
    context_info = {"update_id": update.update_id} if update and hasattr(update, "update_id") else None
    log_exception(context.error, "⚠️ Исключение при обработке", context=context_info)


def build_application(token: str) -> Application:
    """Создаёт Application и регистрирует обработчики."""
    app = Application.builder().token(token).build()

    app.add_handler(CommandHandler("start", start))
    for handler in build_handlers():
        app.add_handler(handler)

    app.add_error_handler(error_handler)
    return app


# === Основная функция запуска ===
def main():
    # Инициализация
    process_manager.initialize_sync()
    logger.info("🚀 Запуск бота")
    if not process_manager.config.telegram_token:
        logger.critical("❌ TELEGRAM_BOT_TOKEN не задан")
        raise ValueError("TELEGRAM_BOT_TOKEN не задан в .env!")

    app = build_application(process_manager.config.telegram_token)
    logger.info("🚀 Бот запущен. Используйте /weather. Нажмите Ctrl+C для остановки.")

    try:
        app.run_polling(drop_pending_updates=True)
    except KeyboardInterrupt:
        logger.info("🛑 Остановка по запросу пользователя.")
    finally:
        process_manager.shutdown_sync()
        logger.info("✅ Бот завершил работу.")


if __name__ == "__main__":
    main()
