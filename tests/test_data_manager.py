import json
from datetime import date, datetime

import pytest

from gestor_horarios import config
from gestor_horarios.data import data_manager as dm
from gestor_horarios.exceptions import DuplicateVacationError, ValidationError
from gestor_horarios.models.schedule import ScheduleRecord


@pytest.fixture(autouse=True)
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DATA_DIR", tmp_path / "data")
    return tmp_path / "data"


def make_schedule(name, owner="u1", day=date(2025, 3, 10)):
    return ScheduleRecord(name, start=datetime(day.year, day.month, day.day, 9),
                          lunch=datetime(day.year, day.month, day.day, 14),
                          end=datetime(day.year, day.month, day.day, 18), owner_id=owner)


def test_missing_files_load_empty():
    assert dm.load_schedules() == []
    assert dm.load_vacations() == []


def test_corrupt_file_loads_empty(data_dir):
    data_dir.mkdir(parents=True)
    (data_dir / "schedules.json").write_text("{not json", encoding="utf-8")
    (data_dir / "vacations.json").write_text('{"a": 1}', encoding="utf-8")
    assert dm.load_schedules() == []
    assert dm.load_vacations() == []


def test_save_and_load_keep_instants_and_placeholders(data_dir):
    rec = make_schedule("Ana")
    dm.save_schedules([rec, ScheduleRecord("Beto", owner_id="u1")])
    assert (data_dir / "schedules.json").exists()
    assert not (data_dir / "schedules.json.tmp").exists()

    loaded = dm.load_schedules()
    assert loaded[0].id == rec.id
    assert loaded[0].start == datetime(2025, 3, 10, 9)
    assert loaded[0].end == datetime(2025, 3, 10, 18)
    assert loaded[1].start is None and loaded[1].is_placeholder


def test_owner_filter_on_load():
    dm.save_schedules([make_schedule("Ana", "u1"), make_schedule("Beto", "u2")])
    assert [r.employee_name for r in dm.load_schedules("u2")] == ["Beto"]
    assert len(dm.load_schedules()) == 2


def test_update_and_delete_schedule():
    rec = make_schedule("Ana")
    dm.add_schedules([rec])
    rec.end = datetime(2025, 3, 10, 20)
    assert dm.update_schedule(rec)
    assert dm.load_schedules()[0].end == datetime(2025, 3, 10, 20)
    assert dm.delete_schedule(rec.id)
    assert not dm.delete_schedule(rec.id)
    assert dm.load_schedules() == []


def test_add_collaborator_once():
    assert dm.add_collaborator("Ana", "u1")
    assert not dm.add_collaborator("Ana", "u1")
    assert dm.add_collaborator("Ana", "u2")
    assert dm.collaborator_names("u1") == ["Ana"]
    with pytest.raises(ValidationError):
        dm.add_collaborator("   ", "u1")


def test_delete_collaborator_only_touches_owner_and_name():
    dm.add_collaborator("Ana", "u1")
    dm.add_schedules([make_schedule("Ana", "u1"), make_schedule("Ana", "u2"), make_schedule("Beto", "u1")])
    assert dm.delete_collaborator("Ana", "u1") == 2
    left = {(r.employee_name, r.owner_id) for r in dm.load_schedules()}
    assert left == {("Ana", "u2"), ("Beto", "u1")}


def test_delete_all_collaborators():
    dm.add_schedules([make_schedule("Ana", "u1"), make_schedule("Beto", "u1"), make_schedule("Carla", "u2")])
    assert dm.delete_all_collaborators("u1") == 2
    assert dm.collaborator_names("u1") == []
    assert dm.collaborator_names("u2") == ["Carla"]


def test_add_vacation_rejects_duplicate_for_same_owner():
    vac = dm.add_vacation("Ana", date(2025, 6, 1), date(2025, 6, 10), "#112233", "u1")
    with pytest.raises(DuplicateVacationError):
        dm.add_vacation("Ana", date(2025, 6, 1), date(2025, 6, 10), "#445566", "u1")
    # otro usuario puede tener el mismo rango
    dm.add_vacation("Ana", date(2025, 6, 1), date(2025, 6, 10), "#445566", "u2")

    loaded = dm.load_vacations("u1")
    assert len(loaded) == 1
    assert loaded[0].id == vac.id
    assert loaded[0].start_date == date(2025, 6, 1)
    assert loaded[0].color == "#112233"


def test_delete_vacation():
    vac = dm.add_vacation("Ana", date(2025, 6, 1), date(2025, 6, 2), "#000000", "u1")
    assert dm.delete_vacation(vac.id)
    assert not dm.delete_vacation(vac.id)


def test_clear_owner_data():
    dm.add_schedules([make_schedule("Ana", "u1"), make_schedule("Beto", "u2")])
    dm.add_vacation("Ana", date(2025, 6, 1), date(2025, 6, 2), "#000000", "u1")
    dm.add_vacation("Beto", date(2025, 6, 1), date(2025, 6, 2), "#000000", "u2")
    dm.clear_owner_data("u1")
    assert [r.owner_id for r in dm.load_schedules()] == ["u2"]
    assert [v.owner_id for v in dm.load_vacations()] == ["u2"]


def test_non_string_values_skip_only_that_item(data_dir):
    data_dir.mkdir(parents=True)
    good = make_schedule("Beto").to_dict()
    bad = dict(good, id="x", employee_name="Ana", start=5)
    (data_dir / "schedules.json").write_text(json.dumps([bad, good]), encoding="utf-8")
    assert [r.employee_name for r in dm.load_schedules()] == ["Beto"]

    vac = {"employee_name": "Ana", "start_date": "2025-06-01", "end_date": "2025-06-02"}
    broken = dict(vac, start_date=20250601)
    (data_dir / "vacations.json").write_text(json.dumps([broken, vac]), encoding="utf-8")
    loaded = dm.load_vacations()
    assert len(loaded) == 1 and loaded[0].start_date == date(2025, 6, 1)
