from gestor_horarios import config
from gestor_horarios.data.data_manager import (
    add_collaborator, collaborator_names, delete_all_collaborators, delete_collaborator,
)
from gestor_horarios.exceptions import GestorError, GoBackAction
from gestor_horarios.utils.input_handler import get_input


def collaborator_menu():
    while True:
        print("\n[Administración de colaboradores]")
        print("1. Lista de colaboradores")
        print("2. Agregar colaborador")
        print("3. Eliminar colaborador")
        print("4. Eliminar todos")
        print("0. Volver")

        try:
            choice = get_input("Opción")
            if choice == "1":
                show_collaborators()
            elif choice == "2":
                name = get_input("Nombre del colaborador")
                if add_collaborator(name, config.OWNER_ID):
                    print("Colaborador agregado.")
                else:
                    print("Ese colaborador ya existe.")
            elif choice == "3":
                remove_collaborator()
            elif choice == "4":
                ok = get_input("¿Eliminar TODOS los colaboradores y sus horarios? (s/n)", default="n")
                if ok.lower().startswith("s"):
                    n = delete_all_collaborators(config.OWNER_ID)
                    print(f"{n} registro(s) eliminados.")
            elif choice == "0":
                break
            else:
                print("Opción inválida.")
        except GestorError as exc:
            print(exc)
        except GoBackAction:
            break


def show_collaborators():
    names = collaborator_names(config.OWNER_ID)
    print("\n[Colaboradores]")
    if not names:
        print("(ninguno)")
    for i, n in enumerate(names, 1):
        print(f"{i}. {n}")
    return names


def remove_collaborator():
    names = show_collaborators()
    if not names:
        return
    v = get_input("Colaborador a eliminar (número)")
    if not v.isdigit() or not 1 <= int(v) <= len(names):
        print("Selección inválida.")
        return
    name = names[int(v) - 1]
    ok = get_input(f"Se borrarán todos los horarios de {name}. ¿Continuar? (s/n)", default="n")
    if ok.lower().startswith("s"):
        n = delete_collaborator(name, config.OWNER_ID)
        print(f"{name} eliminado ({n} registro(s)).")
