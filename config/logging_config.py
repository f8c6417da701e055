# config/logging_config.py
import logging
import logging.handlers
import re
from pathlib import Path

LOGS_DIR = Path(__file__).parent.parent / "logs"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-15s | %(funcName)-20s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# appid=<ключ> в URL OpenWeatherMap, /bot<токен>/ в URL Telegram Bot API
_URL_SECRETS = [
    (re.compile(r"(appid=)[^&\s'\"]+"), r"\1***"),
    (re.compile(r"(/bot)\d+:[\w-]+"), r"\1***"),
]


class SecretRedactingFormatter(logging.Formatter):
    """
    Форматтер, который вырезает ключи и токены из готовой строки лога,
    включая текст traceback.
    """

    def __init__(self, fmt=LOG_FORMAT, datefmt=LOG_DATEFMT, secrets=()):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.secrets = [s for s in secrets if s]

    def redact(self, text: str) -> str:
        for pattern, repl in _URL_SECRETS:
            text = pattern.sub(repl, text)
        for secret in self.secrets:
            text = text.replace(secret, "***")
        return text

    def format(self, record):
        return self.redact(super().format(record))


def build_handlers(log_dir: Path, secrets=()) -> list:
    """Файл app.log (DEBUG, ротация), errors.log (ERROR) и консоль (INFO)."""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = SecretRedactingFormatter(secrets=secrets)

    # Ротация 10 МБ, 5 файлов
    app_handler = logging.handlers.RotatingFileHandler(
        log_dir / "app.log",
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8"
    )
    app_handler.setLevel(logging.DEBUG)

    error_handler = logging.FileHandler(log_dir / "errors.log", encoding="utf-8")
    error_handler.setLevel(logging.ERROR)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    handlers = [app_handler, error_handler, console_handler]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(log_level: str = "INFO", log_dir: Path = None, secrets=()):
    """Настраивает глобальное логирование с ротацией и скрытием секретов."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    if not logger.handlers:
        for handler in build_handlers(log_dir or LOGS_DIR, secrets):
            logger.addHandler(handler)

    # httpx пишет URL Bot API (с токеном) на уровне INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    logging.info("🔧 Логирование инициализировано")
