import uuid
from datetime import date


def _parse(value):
    return date.fromisoformat(value[:10]) if value else None


class VacationRecord:
    """Rango de fechas (ambos extremos incluidos) en que un colaborador descansa."""
    def __init__(self, employee_name, start_date=None, end_date=None,
                 color="#000000", owner_id="", id=None):
        self.id = id or str(uuid.uuid4())
        self.employee_name = employee_name
        self.start_date = start_date
        self.end_date = end_date
        self.color = color            # "#RRGGBB"
        self.owner_id = owner_id

    def to_dict(self):
        return {
            'id': self.id,
            'employee_name': self.employee_name,
            'start_date': self.start_date.isoformat() if self.start_date else None,
            'end_date': self.end_date.isoformat() if self.end_date else None,
            'color': self.color,
            'owner_id': self.owner_id,
        }

    @staticmethod
    def from_dict(data):
        return VacationRecord(
            data.get('employee_name'),
            start_date=_parse(data.get('start_date')),
            end_date=_parse(data.get('end_date')),
            color=data.get('color') or "#000000",
            owner_id=data.get('owner_id', ''),
            id=data.get('id'),
        )

    def __repr__(self):
        return f"VacationRecord({self.employee_name!r}, {self.start_date}..{self.end_date})"
