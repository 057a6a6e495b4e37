import calendar
import os
from pathlib import Path

# raíz del paquete = .../gestor_horarios
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = Path(os.environ.get("GESTOR_HORARIOS_DATA_DIR") or BASE_DIR / "data")

# uid del usuario actual; sustituye al proveedor de identidad
OWNER_ID = os.environ.get("GESTOR_HORARIOS_OWNER") or "local"

FIRST_WEEKDAY = calendar.MONDAY
WEEK_STRIP_DAYS = 15

DEFAULT_VACATION_COLOR = "#000000"
WEEKDAY_LABELS = ("L", "M", "X", "J", "V", "S", "D")   # lunes primero
WEEKDAY_NAMES = ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo")
MONTH_NAMES = ("enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
               "agosto", "septiembre", "octubre", "noviembre", "diciembre")
TIME_FORMAT = "%H:%M"
NO_NAME = "Sin nombre"
REST_LABEL = "Descanso"


def configure(data_dir=None, owner_id=None):
    """Aplica los valores de la línea de comandos."""
    global DATA_DIR, OWNER_ID
    if data_dir:
        DATA_DIR = Path(data_dir)
    if owner_id:
        OWNER_ID = owner_id
