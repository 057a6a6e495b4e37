from gestor_horarios.cli.collaborator_menu import collaborator_menu
from gestor_horarios.cli.schedule_menu import (
    add_schedule, edit_schedule, remove_schedule, show_day,
    show_selection_grid, show_week_strip, show_week_table,
)
from gestor_horarios.cli.vacation_menu import vacation_menu
from gestor_horarios.exceptions import CancelAction, GestorError, GoBackAction
from gestor_horarios.utils.input_handler import get_input


def main_menu():
    while True:
        print("\n[Gestor de horarios]")
        print("1. Próximos días")
        print("2. Horarios de un día")
        print("3. Agregar horario")
        print("4. Editar horario")
        print("5. Eliminar horario")
        print("6. Horarios de la semana")
        print("7. Vacaciones")
        print("8. Administración de colaboradores")
        print("9. Calendario (selección de días)")
        print("0. Salir")

        try:
            choice = get_input("Opción")
            if choice == "1":
                show_week_strip()
            elif choice == "2":
                show_day()
            elif choice == "3":
                add_schedule()
            elif choice == "4":
                edit_schedule()
            elif choice == "5":
                remove_schedule()
            elif choice == "6":
                show_week_table()
            elif choice == "7":
                vacation_menu()
            elif choice == "8":
                collaborator_menu()
            elif choice == "9":
                show_selection_grid()
            elif choice == "0":
                print("Hasta luego.")
                break
            else:
                print("Opción inválida.")
        except GestorError as exc:
            print(exc)
        except GoBackAction:
            print("Volviendo al menú anterior")
        except CancelAction:
            print("Volviendo al menú principal")
