import re
from datetime import date, datetime, time

from gestor_horarios import config
from gestor_horarios.exceptions import ValidationError

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def parse_date(text: str) -> date:
    """'YYYY-MM-DD' → date"""
    try:
        return datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except (ValueError, AttributeError):
        raise ValidationError(f"Fecha inválida: {text!r} (use AAAA-MM-DD)")


def parse_time(text: str) -> time:
    """'HH:MM' (24h) → time"""
    try:
        return datetime.strptime(text.strip(), "%H:%M").time()
    except (ValueError, AttributeError):
        raise ValidationError(f"Hora inválida: {text!r} (use HH:MM)")


def format_time(value) -> str:
    if value is None:
        return "Sin hora"
    return value.strftime(config.TIME_FORMAT)


def format_long_date(day: date) -> str:
    # ej.: "Lunes, 10 de marzo de 2025"
    weekday = config.WEEKDAY_NAMES[day.weekday()]
    month = config.MONTH_NAMES[day.month - 1]
    return f"{weekday}, {day.day} de {month} de {day.year}"


def month_title(day: date) -> str:
    return f"{config.MONTH_NAMES[day.month - 1].capitalize()} {day.year}"


def is_hex_color(text) -> bool:
    return isinstance(text, str) and bool(_HEX_COLOR.match(text))
