import calendar
from datetime import date, datetime

import pytest

from gestor_horarios import config
from gestor_horarios.__main__ import parse_args
from gestor_horarios.cli.collaborator_menu import collaborator_menu
from gestor_horarios.cli.menu import main_menu
from gestor_horarios.cli.schedule_menu import format_month_grid, show_day, show_week_table
from gestor_horarios.data import data_manager as dm
from gestor_horarios.models.schedule import ScheduleRecord


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DATA_DIR", tmp_path)
    monkeypatch.setattr(config, "OWNER_ID", "u1")
    return tmp_path


def scripted(monkeypatch, *answers):
    it = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(it))


def test_format_month_grid_aligns_first_day():
    # febrero 2023 empieza en miércoles: dos celdas vacías
    lines = format_month_grid(date(2023, 2, 1), lambda d: "*" if d.day == 3 else "")
    assert lines.splitlines()[0].strip() == "Febrero 2023"
    first_week = lines.splitlines()[2]
    assert first_week.startswith(" " * 12 + "1")
    assert "3*" in first_week
    # 2 huecos + 28 días = 30 celdas: 5 filas, la última con 2 días
    assert len(lines.splitlines()) == 2 + 5
    assert lines.splitlines()[-1].split() == ["27", "28"]


def test_collaborator_menu_add_and_list(monkeypatch, capsys):
    scripted(monkeypatch, "2", "Ana", "2", "Ana", "1", "0")
    collaborator_menu()
    out = capsys.readouterr().out
    assert "Colaborador agregado." in out
    assert "Ese colaborador ya existe." in out
    assert "1. Ana" in out
    assert dm.collaborator_names("u1") == ["Ana"]


def test_add_schedule_from_date_list(monkeypatch, capsys):
    dm.add_collaborator("Ana", "u1")
    scripted(monkeypatch,
             "3", "1", "2025-03-10, 2025-03-11", "09:00", "14:00", "18:00",
             "0")
    main_menu()
    assert "2 horario(s) guardado(s) para Ana." in capsys.readouterr().out
    starts = sorted(r.start for r in dm.load_schedules("u1") if r.start)
    assert starts == [datetime(2025, 3, 10, 9), datetime(2025, 3, 11, 9)]


def test_invalid_time_returns_to_menu(monkeypatch, capsys):
    dm.add_collaborator("Ana", "u1")
    scripted(monkeypatch, "3", "1", "2025-03-10", "nueve", "0")
    main_menu()
    assert "Hora inválida" in capsys.readouterr().out
    assert all(r.start is None for r in dm.load_schedules("u1"))


def test_cancel_goes_back_to_main_menu(monkeypatch, capsys):
    scripted(monkeypatch, "7", "cancelar", "0")
    main_menu()
    out = capsys.readouterr().out
    assert "Volviendo al menú principal" in out
    assert "Hasta luego." in out


def test_parse_args():
    args = parse_args(["--cli", "--data-dir", "/tmp/x", "--owner", "abc"])
    assert args.cli and args.data_dir == "/tmp/x" and args.owner == "abc"
    assert not parse_args([]).cli


def test_show_day_lists_nameless_record(monkeypatch, capsys):
    nameless = ScheduleRecord(None, start=datetime(2025, 3, 10, 9), lunch=datetime(2025, 3, 10, 14),
                              end=datetime(2025, 3, 10, 18), owner_id="u1")
    dm.save_schedules([nameless])
    scripted(monkeypatch, "2025-03-10")
    assert [r.id for r in show_day()] == [nameless.id]
    assert "Sin nombre" in capsys.readouterr().out


def test_month_grid_sunday_first(monkeypatch):
    monkeypatch.setattr(config, "FIRST_WEEKDAY", calendar.SUNDAY)
    lines = format_month_grid(date(2024, 2, 1)).splitlines()
    assert lines[1].split() == ["D", "L", "M", "X", "J", "V", "S"]
    # 2024-02-01 es jueves: D L M X vacíos
    assert lines[2].startswith(" " * 22 + "1")


def test_week_table_sunday_first(monkeypatch, capsys):
    monkeypatch.setattr(config, "FIRST_WEEKDAY", calendar.SUNDAY)
    dm.add_schedules([ScheduleRecord("Ana", start=datetime(2025, 3, 9, 9),
                                     end=datetime(2025, 3, 9, 18), owner_id="u1")])
    scripted(monkeypatch, "2025-03-12")
    show_week_table()
    out = capsys.readouterr().out.splitlines()
    assert "[Horarios de la semana del 2025-03-09]" in out
    header = next(line for line in out if line.startswith("Nombre"))
    assert header.split()[1:3] == ["Dom", "Lun"]
    ana = next(line for line in out if line.startswith("Ana"))
    assert ana[14:25] == "09:00-18:00"
