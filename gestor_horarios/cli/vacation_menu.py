from datetime import date

from gestor_horarios import config
from gestor_horarios.data.data_manager import (
    add_vacation, collaborator_names, delete_vacation, load_vacations,
)
from gestor_horarios.exceptions import GestorError, GoBackAction
from gestor_horarios.logic.planner import names_on_vacation, upcoming_vacations, vacations_on
from gestor_horarios.cli.schedule_menu import format_month_grid
from gestor_horarios.utils.date_helper import format_long_date, parse_date
from gestor_horarios.utils.input_handler import get_input


def vacation_menu():
    while True:
        print("\n[Vacaciones]")
        print("1. Vacaciones programadas")
        print("2. Agendar vacaciones")
        print("3. Eliminar vacaciones")
        print("4. ¿Quién descansa un día?")
        print("5. Calendario del mes")
        print("0. Volver")

        try:
            choice = get_input("Opción")
            if choice == "1":
                show_upcoming()
            elif choice == "2":
                schedule_vacation()
            elif choice == "3":
                remove_vacation()
            elif choice == "4":
                show_who_rests()
            elif choice == "5":
                show_vacation_month()
            elif choice == "0":
                break
            else:
                print("Opción inválida.")
        except GestorError as exc:
            print(exc)
        except GoBackAction:
            break


def show_upcoming():
    vacations = upcoming_vacations(load_vacations(config.OWNER_ID), date.today())
    if not vacations:
        print("No hay vacaciones programadas.")
        return []
    for i, v in enumerate(vacations, 1):
        print(f"{i}. {v.employee_name or config.NO_NAME} | del {v.start_date} al {v.end_date} | {v.color}")
    return vacations


def schedule_vacation():
    names = collaborator_names(config.OWNER_ID)
    if not names:
        print("No hay colaboradores. Agregue uno primero.")
        return
    for i, n in enumerate(names, 1):
        print(f"{i}. {n}")
    v = get_input("Colaborador (número)")
    if not v.isdigit() or not 1 <= int(v) <= len(names):
        print("Selección inválida.")
        return
    start = parse_date(get_input("Fecha de inicio (AAAA-MM-DD)"))
    end = parse_date(get_input("Fecha de fin (AAAA-MM-DD)", default=start.isoformat()))
    color = get_input("Color (#RRGGBB)", default=config.DEFAULT_VACATION_COLOR)
    vacation = add_vacation(names[int(v) - 1], start, end, color, config.OWNER_ID)
    print(f"Vacaciones de {vacation.employee_name} guardadas.")


def remove_vacation():
    vacations = show_upcoming()
    if not vacations:
        return
    v = get_input("Vacación a eliminar (número)")
    if not v.isdigit() or not 1 <= int(v) <= len(vacations):
        print("Selección inválida.")
        return
    if delete_vacation(vacations[int(v) - 1].id):
        print("Vacación eliminada.")


def show_who_rests():
    day = parse_date(get_input("Fecha (AAAA-MM-DD)", default=date.today().isoformat()))
    names = names_on_vacation(load_vacations(config.OWNER_ID), day)
    print(f"\nColaboradores que descansan el {format_long_date(day)}")
    if not names:
        print("No hay colaboradores de vacaciones este día.")
    for n in names:
        print(f"- {n}")


def show_vacation_month():
    ref = parse_date(get_input("Cualquier día del mes (AAAA-MM-DD)", default=date.today().isoformat()))
    vacations = load_vacations(config.OWNER_ID)
    print()
    print(format_month_grid(ref, lambda d: "v" if vacations_on(vacations, d) else ""))
    print("v = alguien de vacaciones")
