class CancelAction(Exception):
    """El usuario escribió 'cancelar': vuelve al menú principal."""


class GoBackAction(Exception):
    """El usuario escribió 'volver': vuelve al menú anterior."""


class GestorError(Exception):
    pass


class ValidationError(GestorError):
    pass


class DuplicateVacationError(ValidationError):
    pass
