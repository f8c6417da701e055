# core/utils/validator.py
import re

MAX_INPUT_LENGTH = 100

# Буквы любого алфавита, цифры, пробелы и , . - ( ) '
_UNSAFE_CHARS = re.compile(r"[^\w\s,\.\-\(\)']|_", re.UNICODE)


def sanitize_user_input(text: str) -> str:
    """Санитизация пользовательского ввода."""
    if not isinstance(text, str):
        raise ValueError("Input must be a string")
    text = _UNSAFE_CHARS.sub("", text.strip())
    text = " ".join(text.split())
    return text[:MAX_INPUT_LENGTH]


def sanitize_args(args) -> list:
    """
    Санитизирует список токенов команды, отбрасывая пустые.
    Длина склеенной через пробел строки не превышает MAX_INPUT_LENGTH.
    """
    if not args:
        return []

    result = []
    length = 0
    for arg in args:
        if not isinstance(arg, str):
            continue
        for token in sanitize_user_input(arg).split():
            room = MAX_INPUT_LENGTH - length - (1 if result else 0)
            if room <= 0:
                return result
            token = token[:room]
            length += len(token) + (1 if result else 0)
            result.append(token)
    return result


def is_help_request(args) -> bool:
    return len(args) == 1 and args[0].lower() == "help"
