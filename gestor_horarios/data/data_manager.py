from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import List, Optional

from gestor_horarios import config
from gestor_horarios.exceptions import ValidationError
from gestor_horarios.logic.calendar_grid import unique_names
from gestor_horarios.logic.planner import build_vacation
from gestor_horarios.models.schedule import ScheduleRecord
from gestor_horarios.models.vacation import VacationRecord

LOG = logging.getLogger(__name__)


# config.DATA_DIR puede cambiar en tiempo de ejecución (--data-dir)
def _schedules_file() -> Path:
    return Path(config.DATA_DIR) / "schedules.json"

def _vacations_file() -> Path:
    return Path(config.DATA_DIR) / "vacations.json"

def _ensure_data_dir():
    Path(config.DATA_DIR).mkdir(parents=True, exist_ok=True)

def _safe_json_load(path: Path, default):
    if not path.exists():
        return default
    try:
        raw = path.read_text(encoding="utf-8").strip()
        if not raw:
            return default
        data = json.loads(raw)
    except (OSError, ValueError) as exc:
        LOG.warning("No se pudo leer %s: %s", path, exc)
        return default
    if not isinstance(data, type(default)):
        LOG.warning("Contenido inesperado en %s, se ignora", path)
        return default
    return data

def _safe_json_save(path: Path, data):
    _ensure_data_dir()
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)

def _owned(records, owner_id):
    if owner_id is None:
        return list(records)
    return [r for r in records if r.owner_id == owner_id]


# ---------- horarios ----------
def load_schedules(owner_id: Optional[str] = None) -> List[ScheduleRecord]:
    data = _safe_json_load(_schedules_file(), default=[])
    records = []
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            records.append(ScheduleRecord.from_dict(item))
        except (ValueError, TypeError) as exc:
            LOG.warning("Horario ignorado (%s): %r", exc, item)
    return _owned(records, owner_id)

def save_schedules(records: List[ScheduleRecord]):
    _safe_json_save(_schedules_file(), [r.to_dict() for r in records])
    LOG.debug("%d horarios guardados", len(records))

def add_schedules(new_records: List[ScheduleRecord]) -> None:
    records = load_schedules()
    records.extend(new_records)
    save_schedules(records)

def update_schedule(record: ScheduleRecord) -> bool:
    records = load_schedules()
    for i, r in enumerate(records):
        if r.id == record.id:
            records[i] = record
            save_schedules(records)
            return True
    return False

def delete_schedule(record_id: str) -> bool:
    records = load_schedules()
    kept = [r for r in records if r.id != record_id]
    if len(kept) == len(records):
        return False
    save_schedules(kept)
    return True


# ---------- colaboradores ----------
def collaborator_names(owner_id: str) -> List[str]:
    return unique_names(load_schedules(owner_id), "employee_name")

def add_collaborator(name: str, owner_id: str) -> bool:
    """Alta de colaborador: registro sin horas. Si ya existe, no hace nada."""
    name = (name or "").strip()
    if not name:
        raise ValidationError("El nombre del colaborador está vacío.")
    if name in collaborator_names(owner_id):
        return False
    add_schedules([ScheduleRecord(name, owner_id=owner_id)])
    LOG.info("Colaborador agregado: %s", name)
    return True

def delete_collaborator(name: str, owner_id: str) -> int:
    """Borra todos los horarios de ese colaborador (solo del mismo usuario)."""
    records = load_schedules()
    kept = [r for r in records if not (r.owner_id == owner_id and r.employee_name == name)]
    removed = len(records) - len(kept)
    if removed:
        save_schedules(kept)
        LOG.info("Colaborador %s eliminado (%d registros)", name, removed)
    return removed

def delete_all_collaborators(owner_id: str) -> int:
    records = load_schedules()
    kept = [r for r in records if r.owner_id != owner_id]
    removed = len(records) - len(kept)
    if removed:
        save_schedules(kept)
    return removed


# ---------- vacaciones ----------
def load_vacations(owner_id: Optional[str] = None) -> List[VacationRecord]:
    data = _safe_json_load(_vacations_file(), default=[])
    records = []
    for item in data:
        if not isinstance(item, dict):
            continue
        try:
            records.append(VacationRecord.from_dict(item))
        except (ValueError, TypeError) as exc:
            LOG.warning("Vacación ignorada (%s): %r", exc, item)
    return _owned(records, owner_id)

def save_vacations(records: List[VacationRecord]):
    _safe_json_save(_vacations_file(), [v.to_dict() for v in records])

def add_vacation(employee_name: str, start, end, color: str, owner_id: str) -> VacationRecord:
    """Valida (incluye duplicados del mismo usuario) y guarda."""
    records = load_vacations()
    vacation = build_vacation(employee_name, start, end, color, owner_id,
                              existing=_owned(records, owner_id))
    records.append(vacation)
    save_vacations(records)
    LOG.info("Vacación guardada: %s %s..%s", vacation.employee_name,
             vacation.start_date, vacation.end_date)
    return vacation

def delete_vacation(vacation_id: str) -> bool:
    records = load_vacations()
    kept = [v for v in records if v.id != vacation_id]
    if len(kept) == len(records):
        return False
    save_vacations(kept)
    return True


def clear_owner_data(owner_id: str) -> None:
    """Al cerrar sesión se borran los datos locales del usuario."""
    delete_all_collaborators(owner_id)
    vacations = load_vacations()
    save_vacations([v for v in vacations if v.owner_id != owner_id])
    LOG.info("Datos locales de %s eliminados", owner_id)
