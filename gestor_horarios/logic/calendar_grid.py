from __future__ import annotations
import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Iterable, Iterator, List, Mapping, Optional

MONDAY = calendar.MONDAY
SUNDAY = calendar.SUNDAY


@dataclass(frozen=True)
class DaySlot:
    """Celda de la cuadrícula del mes. Sin fecha es un hueco de relleno."""
    date: Optional[date] = None

    @property
    def is_empty(self) -> bool:
        return self.date is None


EMPTY = DaySlot()


def as_day(value) -> Optional[date]:
    """date/datetime → date. Cualquier otro valor da None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def get_field(record: Any, name: str):
    # atributo o clave de dict; si falta, None
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class DateSet:
    """
    Días seleccionados durante una edición.
    La hora se descarta: se compara por día. Se recorre en orden ascendente.
    """
    def __init__(self, dates: Iterable = ()):
        self._days = set()
        for d in dates:
            self.add(d)

    def __contains__(self, value) -> bool:
        day = as_day(value)
        return day is not None and day in self._days

    def __iter__(self) -> Iterator[date]:
        return iter(sorted(self._days))

    def __len__(self) -> int:
        return len(self._days)

    def __bool__(self) -> bool:
        return bool(self._days)

    def __eq__(self, other) -> bool:
        if isinstance(other, DateSet):
            return self._days == other._days
        return NotImplemented

    def __repr__(self) -> str:
        return f"DateSet({[d.isoformat() for d in self]})"

    def add(self, value) -> None:
        day = as_day(value)
        if day is not None:
            self._days.add(day)

    def discard(self, value) -> None:
        self._days.discard(as_day(value))

    def clear(self) -> None:
        self._days.clear()


# ---------- cuadrícula del mes ----------
def days_in_month(reference_date) -> int:
    ref = as_day(reference_date)
    return calendar.monthrange(ref.year, ref.month)[1]


def month_shift(reference_date, months: int) -> date:
    """Mes anterior/siguiente. Siempre devuelve el día 1."""
    ref = as_day(reference_date)
    index = ref.year * 12 + (ref.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def generate_month_grid(reference_date, first_weekday: int = MONDAY) -> List[DaySlot]:
    """
    Celdas del mes al que pertenece reference_date.
    - offset huecos al inicio: (día de la semana del 1 - first_weekday + 7) % 7
    - después un Day por cada día, del 1 al último
    - la última fila no se rellena; quien dibuja resuelve filas incompletas
    Días de la semana al estilo Python (0=lunes .. 6=domingo).
    """
    ref = as_day(reference_date)
    first = ref.replace(day=1)
    offset = (first.weekday() - first_weekday + 7) % 7

    slots = [EMPTY] * offset
    for i in range(days_in_month(first)):
        slots.append(DaySlot(first + timedelta(days=i)))
    return slots


def grid_rows(slots: List[DaySlot], width: int = 7) -> List[List[DaySlot]]:
    return [slots[i:i + width] for i in range(0, len(slots), width)]


def week_start(day, first_weekday: int = MONDAY) -> date:
    ref = as_day(day)
    return ref - timedelta(days=(ref.weekday() - first_weekday + 7) % 7)


def weekday_order(first_weekday: int = MONDAY) -> List[int]:
    """Índices de weekday() en orden de columna, p. ej. [6, 0, 1, ...] con domingo primero."""
    return [(first_weekday + i) % 7 for i in range(7)]


def week_strip(today, days: int = 15, first_weekday: int = MONDAY) -> List[date]:
    """days días a partir del inicio de la semana de today."""
    start = week_start(today, first_weekday)
    return [start + timedelta(days=i) for i in range(days)]


# ---------- selección ----------
def toggle(date_set: DateSet, value) -> DateSet:
    if value in date_set:
        date_set.discard(value)
    else:
        date_set.add(value)
    return date_set


def contains(date_set: DateSet, value) -> bool:
    return value in date_set


# ---------- filtros de registros ----------
def filter_by_day(records: Iterable, target_date, date_field: str) -> list:
    target = as_day(target_date)
    out = []
    for rec in records:
        day = as_day(get_field(rec, date_field))
        if day is not None and day == target:
            out.append(rec)
    return out


def filter_by_range(records: Iterable, target_date, start_field: str, end_field: str) -> list:
    """start <= target <= end, ambos incluidos, por día. Sin límites, fuera."""
    target = as_day(target_date)
    out = []
    for rec in records:
        start = as_day(get_field(rec, start_field))
        end = as_day(get_field(rec, end_field))
        if start is None or end is None:
            continue
        if start <= target <= end:
            out.append(rec)
    return out


def unique_names(records: Iterable, name_field: str) -> list:
    names = set()
    for rec in records:
        name = get_field(rec, name_field)
        if name is None or (isinstance(name, str) and not name.strip()):
            continue
        names.add(name)
    return sorted(names, key=str)


def combine_date_and_time(base_date, time_of_day) -> datetime:
    """Fecha de base_date, hora y minuto de time_of_day."""
    day = as_day(base_date)
    if isinstance(time_of_day, datetime):
        time_of_day = time_of_day.time()
    return datetime.combine(day, time(time_of_day.hour, time_of_day.minute))
