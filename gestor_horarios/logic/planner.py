from __future__ import annotations
import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from gestor_horarios import config
from gestor_horarios.exceptions import DuplicateVacationError, ValidationError
from gestor_horarios.logic.calendar_grid import (
    DateSet, as_day, combine_date_and_time, filter_by_day, filter_by_range,
)
from gestor_horarios.models.schedule import ScheduleRecord
from gestor_horarios.models.vacation import VacationRecord
from gestor_horarios.utils.date_helper import is_hex_color

LOG = logging.getLogger(__name__)


# ---------- horarios ----------
def build_schedules(employee_name: str, dates: Iterable, entry, lunch, exit_,
                    owner_id: str) -> List[ScheduleRecord]:
    """
    Un registro por día seleccionado.
    - días repetidos (mismo día, distinta hora) cuentan una vez
    - orden ascendente
    """
    name = (employee_name or "").strip()
    if not name:
        raise ValidationError("Seleccione un colaborador.")
    days = list(DateSet(dates))
    if not days:
        raise ValidationError("Seleccione al menos un día.")

    records = [
        ScheduleRecord(
            name,
            start=combine_date_and_time(d, entry),
            lunch=combine_date_and_time(d, lunch),
            end=combine_date_and_time(d, exit_),
            owner_id=owner_id,
        )
        for d in days
    ]
    LOG.info("%d horarios creados para %s", len(records), name)
    return records


def retime_schedule(record: ScheduleRecord, entry, lunch, exit_) -> ScheduleRecord:
    """Cambia las tres horas conservando la fecha de cada una."""
    fallback = as_day(record.start) or date.today()
    record.start = combine_date_and_time(as_day(record.start) or fallback, entry)
    record.lunch = combine_date_and_time(as_day(record.lunch) or fallback, lunch)
    record.end = combine_date_and_time(as_day(record.end) or fallback, exit_)
    return record


def schedules_for_day(records: Iterable, day) -> list:
    found = filter_by_day(records, day, "start")
    found.sort(key=lambda r: r.start)
    return found


def weekly_table(records: Iterable, week_start) -> List[Tuple[str, List[Optional[ScheduleRecord]]]]:
    """
    Tabla semanal: una fila por colaborador con algún horario en los 7 días
    a partir de week_start. Celda None = descanso.
    """
    first = as_day(week_start)
    days = [first + timedelta(days=i) for i in range(7)]
    rows = {}
    for rec in records:
        day = as_day(rec.start)
        if day is None or not (days[0] <= day <= days[-1]):
            continue
        name = rec.employee_name or config.NO_NAME
        cells = rows.setdefault(name, [None] * 7)
        col = (day - first).days
        # si hay dos horarios el mismo día, manda el primero
        if cells[col] is None or rec.start < cells[col].start:
            cells[col] = rec
    return sorted(rows.items())


# ---------- vacaciones ----------
def vacations_on(vacations: Iterable, day) -> list:
    return filter_by_range(vacations, day, "start_date", "end_date")


def names_on_vacation(vacations: Iterable, day) -> List[str]:
    return [v.employee_name or config.NO_NAME for v in vacations_on(vacations, day)]


def vacation_color(vacations: Iterable, day) -> Optional[str]:
    found = vacations_on(vacations, day)
    return found[0].color if found else None


def upcoming_vacations(vacations: Iterable, today=None) -> list:
    today = as_day(today) or date.today()
    out = [v for v in vacations if v.end_date is not None and v.end_date >= today]
    out.sort(key=lambda v: v.start_date or v.end_date)
    return out


def build_vacation(employee_name: str, start, end, color: str, owner_id: str,
                   existing: Iterable = ()) -> VacationRecord:
    name = (employee_name or "").strip()
    if not name:
        raise ValidationError("Seleccione un colaborador.")
    start_day, end_day = as_day(start), as_day(end)
    if start_day is None or end_day is None:
        raise ValidationError("Indique fecha de inicio y de fin.")
    if end_day < start_day:
        raise ValidationError("La fecha de fin es anterior a la de inicio.")
    color = color or config.DEFAULT_VACATION_COLOR
    if not is_hex_color(color):
        raise ValidationError(f"Color inválido: {color!r} (use #RRGGBB)")

    for v in existing:
        if v.employee_name == name and v.start_date == start_day and v.end_date == end_day:
            raise DuplicateVacationError(
                "Ya existe una vacación para este colaborador en las mismas fechas.")

    return VacationRecord(name, start_date=start_day, end_date=end_day,
                          color=color.upper(), owner_id=owner_id)
