from datetime import date
from typing import Callable, Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton
from PySide6.QtCore import Qt

from gestor_horarios import config
from gestor_horarios.logic.calendar_grid import (
    DateSet, generate_month_grid, month_shift, toggle, weekday_order,
)
from gestor_horarios.utils.date_helper import month_title

SELECTED_STYLE = "background:#000; color:#fff; border-radius:17px;"
NORMAL_STYLE = "background:transparent; border-radius:17px;"


class CalendarWidget(QWidget):
    """
    Calendario mensual (primer día de la semana según config.FIRST_WEEKDAY).
    - selectable=True: clic = marcar/desmarcar en self.selected (DateSet del llamador)
    - day_color: callable(date) -> "#RRGGBB" | None, para pintar vacaciones
    - on_day_open: callable(date), clic cuando no es seleccionable
    """
    def __init__(self, selected: Optional[DateSet] = None, selectable: bool = True,
                 day_color: Optional[Callable[[date], Optional[str]]] = None,
                 on_day_open: Optional[Callable[[date], None]] = None,
                 on_change: Optional[Callable[[], None]] = None):
        super().__init__()
        self.selected = selected if selected is not None else DateSet()
        self.selectable = selectable
        self.day_color = day_color
        self.on_day_open = on_day_open
        self.on_change = on_change
        self.current = date.today().replace(day=1)

        self.vbox = QVBoxLayout(self)

        # encabezado: mes y navegación
        nav = QHBoxLayout()
        btn_prev = QPushButton("◀")
        btn_prev.clicked.connect(lambda: self.shift_month(-1))
        self.title = QLabel("")
        self.title.setAlignment(Qt.AlignCenter)
        self.title.setStyleSheet("font-weight:600;")
        btn_next = QPushButton("▶")
        btn_next.clicked.connect(lambda: self.shift_month(1))
        nav.addWidget(btn_prev)
        nav.addWidget(self.title, 1)
        nav.addWidget(btn_next)
        self.vbox.addLayout(nav)

        header = QGridLayout()
        self.vbox.addLayout(header)
        for c, i in enumerate(weekday_order(config.FIRST_WEEKDAY)):
            lbl = QLabel(config.WEEKDAY_LABELS[i]); lbl.setAlignment(Qt.AlignCenter)
            lbl.setStyleSheet("color:gray;")
            header.addWidget(lbl, 0, c)

        self.grid = QGridLayout()
        self.vbox.addLayout(self.grid)
        self.render_month()

    def shift_month(self, months: int):
        self.current = month_shift(self.current, months)
        self.render_month()

    def clear_grid(self):
        while self.grid.count():
            item = self.grid.takeAt(0)
            w = item.widget()
            if w is not None:
                w.setParent(None)

    def render_month(self):
        self.clear_grid()
        self.title.setText(month_title(self.current))
        slots = generate_month_grid(self.current, config.FIRST_WEEKDAY)

        for i, slot in enumerate(slots):
            r, c = divmod(i, 7)
            if slot.is_empty:
                self.grid.addWidget(QLabel(" "), r, c)
                continue

            btn = QPushButton(str(slot.date.day))
            btn.setFixedSize(35, 35)
            btn.setFlat(True)
            btn.setStyleSheet(self._style_for(slot.date))
            btn.clicked.connect(lambda _=False, d=slot.date: self._on_click(d))
            self.grid.addWidget(btn, r, c)

    def _style_for(self, day: date) -> str:
        if self.selectable and day in self.selected:
            return SELECTED_STYLE
        color = self.day_color(day) if self.day_color else None
        if color:
            return f"background:{color}; color:#fff; border-radius:8px;"
        return NORMAL_STYLE

    def _on_click(self, day: date):
        if self.selectable:
            toggle(self.selected, day)
            self.render_month()
            if self.on_change:
                self.on_change()
        elif self.on_day_open:
            self.on_day_open(day)
