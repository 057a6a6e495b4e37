from gestor_horarios.exceptions import CancelAction, GoBackAction


def get_input(prompt: str, allow_empty: bool = False, default: str | None = None) -> str:
    label = prompt
    if default is not None:
        label += f" [{default}]"
    label += ": "

    while True:
        v = input(label).strip()

        low = v.lower()
        if low in ("cancelar", "cancel"):
            raise CancelAction()
        if low in ("volver", "back"):
            raise GoBackAction()

        if not v and default is not None:
            return default
        if not v and allow_empty:
            return ""
        if not v:
            print("Escriba un valor o 'cancelar'/'volver'.")
            continue
        return v
