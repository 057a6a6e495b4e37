import uuid
from datetime import datetime


def _iso(value):
    return value.isoformat() if value is not None else None


def _parse(value):
    return datetime.fromisoformat(value) if value else None


class ScheduleRecord:
    """
    Horario de un colaborador para un día: entrada / comida / salida.
    Un colaborador recién dado de alta es un registro sin horas.
    """
    def __init__(self, employee_name, start=None, lunch=None, end=None,
                 owner_id="", id=None):
        self.id = id or str(uuid.uuid4())
        self.employee_name = employee_name
        self.start = start            # entrada (datetime)
        self.lunch = lunch            # comida
        self.end = end                # salida
        self.owner_id = owner_id

    @property
    def is_placeholder(self) -> bool:
        return self.start is None and self.lunch is None and self.end is None

    def to_dict(self):
        return {
            'id': self.id,
            'employee_name': self.employee_name,
            'start': _iso(self.start),
            'lunch': _iso(self.lunch),
            'end': _iso(self.end),
            'owner_id': self.owner_id,
        }

    @staticmethod
    def from_dict(data):
        return ScheduleRecord(
            data.get('employee_name'),
            start=_parse(data.get('start')),
            lunch=_parse(data.get('lunch')),
            end=_parse(data.get('end')),
            owner_id=data.get('owner_id', ''),
            id=data.get('id'),
        )

    def __repr__(self):
        return f"ScheduleRecord({self.employee_name!r}, start={self.start!r})"
