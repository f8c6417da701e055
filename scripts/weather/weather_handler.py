# scripts/weather/weather_handler.py
import asyncio
import logging
from typing import List

from telegram import Update
from telegram.ext import CommandHandler, ContextTypes, MessageHandler, filters

from process_manager import process_manager
from core.models.weather_response import ChatMessage
from core.utils.api_client import WeatherError
from core.utils.error_handler import user_error_text
from core.utils.validator import is_help_request, sanitize_args
from scripts.weather._processes.data_fetcher import lookup, usage_message

logger = logging.getLogger("weather_handler")

COMMANDS = ["weather", "w"]
# !weather Berlin, de  /  !w 10001
BANG_PATTERN = r"^!(?:weather|w)(?:\s|$)"


async def weather_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """/weather <локация> и /w <локация>."""
    await _respond(update, context, list(context.args or []))


async def weather_bang_command(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """!weather <локация> и !w <локация> как обычный текст."""
    text = update.effective_message.text or ""
    await _respond(update, context, text.split()[1:])


async def _respond(update: Update, context: ContextTypes.DEFAULT_TYPE, raw_args: List[str]):
    user = update.effective_user
    logger.info(f"📨 Команда погоды от {user.id if user else 'unknown'}: {raw_args}")

    args = sanitize_args(raw_args)
    if is_help_request(args):
        message = usage_message()
    else:
        try:
            message = await asyncio.to_thread(
                lookup,
                args,
                process_manager.config.default_country,
                process_manager.weather_client,
            )
        except WeatherError as e:
            message = ChatMessage(body=user_error_text(e), msgtype="m.notice")

    await send_chat_message(update, context, message)


async def send_chat_message(update: Update, context: ContextTypes.DEFAULT_TYPE, message: ChatMessage):
    """Notice отправляется без звука, результат обычным сообщением."""
    await context.bot.send_message(
        chat_id=update.effective_chat.id,
        text=message.body,
        disable_notification=message.is_notice
    )


def build_handlers() -> list:
    """Обработчики для регистрации в Application."""
    return [
        CommandHandler(COMMANDS, weather_command),
        MessageHandler(filters.TEXT & filters.Regex(BANG_PATTERN), weather_bang_command),
    ]
