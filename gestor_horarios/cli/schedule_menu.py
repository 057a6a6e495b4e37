from datetime import date

from gestor_horarios import config
from gestor_horarios.data.data_manager import (
    add_schedules, collaborator_names, delete_schedule, load_schedules, update_schedule,
)
from gestor_horarios.exceptions import CancelAction, GestorError, GoBackAction
from gestor_horarios.logic.calendar_grid import (
    DateSet, generate_month_grid, grid_rows, month_shift, toggle, week_start, week_strip,
    weekday_order,
)
from gestor_horarios.logic.planner import (
    build_schedules, retime_schedule, schedules_for_day, weekly_table,
)
from gestor_horarios.utils.date_helper import (
    format_long_date, format_time, month_title, parse_date, parse_time,
)
from gestor_horarios.utils.input_handler import get_input
from gestor_horarios.utils.parse_utils import parse_date_list


# ---------- cuadrícula en texto ----------
def format_month_grid(reference: date, marks=None) -> str:
    """
    Mes en texto; las columnas siguen config.FIRST_WEEKDAY.
    marks: callable(date) -> str de 1 carácter (p. ej. '*' si está seleccionado)
    """
    lines = [month_title(reference).center(7 * 5)]
    order = weekday_order(config.FIRST_WEEKDAY)
    lines.append("".join(f"{config.WEEKDAY_LABELS[i]:>4} " for i in order))
    slots = generate_month_grid(reference, config.FIRST_WEEKDAY)
    for row in grid_rows(slots):
        cells = []
        for slot in row:
            if slot.is_empty:
                cells.append("     ")
                continue
            mark = (marks(slot.date) if marks else "") or " "
            cells.append(f"{slot.date.day:>3}{mark} ")
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)


def select_days(initial=None) -> DateSet:
    """
    Selección interactiva de días sobre el calendario del mes.
    número = marcar/desmarcar, '<' / '>' = mes anterior/siguiente, vacío = terminar
    """
    selected = DateSet(initial or ())
    current = date.today().replace(day=1)
    while True:
        print()
        print(format_month_grid(current, lambda d: "*" if d in selected else ""))
        v = get_input("Día a marcar (<, >, vacío = listo)", allow_empty=True)
        if v == "":
            return selected
        if v == "<":
            current = month_shift(current, -1)
            continue
        if v == ">":
            current = month_shift(current, 1)
            continue
        if not v.isdigit() or not 1 <= int(v) <= 31:
            print("Número de día inválido.")
            continue
        try:
            toggle(selected, current.replace(day=int(v)))
        except ValueError:
            print("Ese día no existe en este mes.")


# ---------- listados ----------
def show_day():
    day = parse_date(get_input("Fecha (AAAA-MM-DD)", default=date.today().isoformat()))
    records = schedules_for_day(load_schedules(config.OWNER_ID), day)
    print(f"\n[{format_long_date(day)}]")
    if not records:
        print("No hay registros para este día.")
        return []
    _print_records(records)
    return records


def _print_records(records):
    print("\n#   Colaborador           Entrada  Comida   Salida")
    print("-" * 52)
    for i, r in enumerate(records, 1):
        print(f"{i:<3} {r.employee_name or config.NO_NAME:<20}  {format_time(r.start):<7}  "
              f"{format_time(r.lunch):<7}  {format_time(r.end)}")


def show_week_strip():
    today = date.today()
    days = week_strip(today, config.WEEK_STRIP_DAYS, config.FIRST_WEEKDAY)
    records = load_schedules(config.OWNER_ID)
    print()
    for d in days:
        count = len(schedules_for_day(records, d))
        marker = "<- hoy" if d == today else ""
        print(f"{config.WEEKDAY_LABELS[d.weekday()]} {d.isoformat()}  {count} horario(s) {marker}")


def show_week_table():
    base = parse_date(get_input("Cualquier día de la semana (AAAA-MM-DD)",
                                default=date.today().isoformat()))
    first = week_start(base, config.FIRST_WEEKDAY)
    rows = weekly_table(load_schedules(config.OWNER_ID), first)
    print(f"\n[Horarios de la semana del {first.isoformat()}]")
    if not rows:
        print("(sin horarios)")
        return
    names = [config.WEEKDAY_NAMES[i] for i in weekday_order(config.FIRST_WEEKDAY)]
    header = f"{'Nombre':<14}" + "".join(f"{n[:3]:<13}" for n in names)
    print(header)
    print("-" * len(header))
    for name, cells in rows:
        line = f"{name[:13]:<14}"
        for rec in cells:
            if rec is None:
                line += f"{config.REST_LABEL:<13}"
            else:
                line += f"{format_time(rec.start)}-{format_time(rec.end):<7}"
        print(line)


# ---------- altas / cambios ----------
def _pick_collaborator():
    names = collaborator_names(config.OWNER_ID)
    if not names:
        print("No hay colaboradores. Agregue uno primero.")
        return None
    for i, n in enumerate(names, 1):
        print(f"{i}. {n}")
    v = get_input("Colaborador (número)")
    if not v.isdigit() or not 1 <= int(v) <= len(names):
        print("Selección inválida.")
        return None
    return names[int(v) - 1]


def add_schedule():
    try:
        name = _pick_collaborator()
        if not name:
            return
        text = get_input("Días (AAAA-MM-DD separados por coma, vacío = calendario)", allow_empty=True)
        days = DateSet(parse_date_list(text)) if text else select_days()
        entry = parse_time(get_input("Hora de entrada (HH:MM)"))
        lunch = parse_time(get_input("Hora de comida (HH:MM)"))
        exit_ = parse_time(get_input("Hora de salida (HH:MM)"))
        records = build_schedules(name, days, entry, lunch, exit_, config.OWNER_ID)
        add_schedules(records)
        print(f"{len(records)} horario(s) guardado(s) para {name}.")
    except GestorError as exc:
        print(exc)
    except GoBackAction:
        print("Volviendo al menú anterior")


def _pick_record():
    records = show_day()
    if not records:
        return None
    v = get_input("Registro (número)")
    if not v.isdigit() or not 1 <= int(v) <= len(records):
        print("Selección inválida.")
        return None
    return records[int(v) - 1]


def edit_schedule():
    try:
        rec = _pick_record()
        if rec is None:
            return
        entry = parse_time(get_input("Hora de entrada", default=format_time(rec.start)))
        lunch = parse_time(get_input("Hora de comida", default=format_time(rec.lunch)))
        exit_ = parse_time(get_input("Hora de salida", default=format_time(rec.end)))
        retime_schedule(rec, entry, lunch, exit_)
        update_schedule(rec)
        print("Horario actualizado.")
    except GestorError as exc:
        print(exc)
    except GoBackAction:
        print("Volviendo al menú anterior")


def remove_schedule():
    try:
        rec = _pick_record()
        if rec is None:
            return
        ok = get_input(f"¿Eliminar el horario de {rec.employee_name}? (s/n)", default="n")
        if ok.lower().startswith("s") and delete_schedule(rec.id):
            print("Horario eliminado.")
    except GestorError as exc:
        print(exc)
    except GoBackAction:
        print("Volviendo al menú anterior")


def show_selection_grid():
    """Solo muestra el calendario con los días que marque el usuario."""
    try:
        days = select_days()
        print("Días seleccionados: " + (", ".join(d.isoformat() for d in days) or "(ninguno)"))
    except (GoBackAction, CancelAction):
        print("Selección descartada")
