from datetime import date, datetime, time

import pytest

from gestor_horarios.exceptions import CancelAction, GoBackAction, ValidationError
from gestor_horarios.utils.date_helper import (
    format_long_date, format_time, is_hex_color, month_title, parse_date, parse_time,
)
from gestor_horarios.utils.input_handler import get_input
from gestor_horarios.utils.parse_utils import parse_date_list


def test_parse_date_and_time():
    assert parse_date(" 2025-03-10 ") == date(2025, 3, 10)
    assert parse_time("09:05") == time(9, 5)
    with pytest.raises(ValidationError):
        parse_date("10/03/2025")
    with pytest.raises(ValidationError):
        parse_time("25:00")


def test_parse_date_list_with_ranges_and_duplicates():
    days = parse_date_list("2025-03-10..2025-03-12, 2025-03-11, ,2025-03-20")
    assert days == [date(2025, 3, 10), date(2025, 3, 11), date(2025, 3, 12), date(2025, 3, 20)]
    assert parse_date_list("   ") == []
    with pytest.raises(ValidationError):
        parse_date_list("2025-03-10, mañana")


def test_formatting():
    assert format_time(datetime(2025, 3, 10, 7, 5)) == "07:05"
    assert format_time(None) == "Sin hora"
    assert format_long_date(date(2025, 3, 10)) == "Lunes, 10 de marzo de 2025"
    assert month_title(date(2025, 12, 1)) == "Diciembre 2025"


def test_is_hex_color():
    assert is_hex_color("#a1B2c3")
    assert not is_hex_color("a1b2c3")
    assert not is_hex_color("#abc")
    assert not is_hex_color(None)


def scripted(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


def test_get_input_retries_on_empty(monkeypatch, capsys):
    scripted(monkeypatch, "", "  Ana ")
    assert get_input("Nombre") == "Ana"
    assert "cancelar" in capsys.readouterr().out


def test_get_input_default_and_empty(monkeypatch):
    scripted(monkeypatch, "", "")
    assert get_input("Hora", default="09:00") == "09:00"
    assert get_input("Opcional", allow_empty=True) == ""


@pytest.mark.parametrize("word,exc", [("cancelar", CancelAction), ("CANCEL", CancelAction),
                                      ("volver", GoBackAction), ("back", GoBackAction)])
def test_get_input_control_words(monkeypatch, word, exc):
    scripted(monkeypatch, word)
    with pytest.raises(exc):
        get_input("Opción")
