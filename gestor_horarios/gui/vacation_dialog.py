from datetime import date

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout, QLabel, QComboBox, QDateEdit,
    QPushButton, QListWidget, QListWidgetItem, QMessageBox, QColorDialog,
)
from PySide6.QtCore import Qt, QDate
from PySide6.QtGui import QColor

from gestor_horarios import config
from gestor_horarios.data.data_manager import (
    add_vacation, collaborator_names, delete_vacation, load_vacations,
)
from gestor_horarios.exceptions import GestorError
from gestor_horarios.gui.calendar_widget import CalendarWidget
from gestor_horarios.logic.planner import names_on_vacation, upcoming_vacations, vacation_color
from gestor_horarios.utils.date_helper import format_long_date


def _qd_to_py(qd: QDate) -> date:
    return date(qd.year(), qd.month(), qd.day())


class VacationDialog(QDialog):
    """Agendar vacaciones: formulario, lista de próximas y calendario coloreado."""
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Agendar vacaciones")
        self.color = config.DEFAULT_VACATION_COLOR
        self.vacations = load_vacations(config.OWNER_ID)

        v = QVBoxLayout(self)

        form = QFormLayout()
        self.cmb_name = QComboBox()
        self.cmb_name.addItem("Seleccione un colaborador", userData="")
        for name in collaborator_names(config.OWNER_ID):
            self.cmb_name.addItem(name, userData=name)
        form.addRow("Colaborador", self.cmb_name)

        self.btn_color = QPushButton(self.color)
        self.btn_color.clicked.connect(self._pick_color)
        form.addRow("Color", self.btn_color)

        today = QDate.currentDate()
        self.start_edit = QDateEdit(today); self.start_edit.setCalendarPopup(True)
        self.end_edit = QDateEdit(today); self.end_edit.setCalendarPopup(True)
        self.start_edit.dateChanged.connect(lambda d: self.end_edit.setMinimumDate(d))
        form.addRow("Fecha de inicio", self.start_edit)
        form.addRow("Fecha de fin", self.end_edit)
        v.addLayout(form)

        btn_save = QPushButton("Guardar vacaciones")
        btn_save.clicked.connect(self.on_save)
        v.addWidget(btn_save)

        v.addWidget(QLabel("Vacaciones programadas"))
        self.list = QListWidget()
        v.addWidget(self.list)
        btn_del = QPushButton("Eliminar seleccionada")
        btn_del.clicked.connect(self.on_delete)
        v.addWidget(btn_del)

        self.calendar = CalendarWidget(selectable=False, day_color=self._color_for,
                                       on_day_open=self._show_who_rests)
        v.addWidget(self.calendar)
        v.addWidget(QLabel("Clic en un día: colaboradores que descansan"))

        self._refresh()

    def _color_for(self, day: date):
        return vacation_color(self.vacations, day)

    def _refresh(self):
        self.vacations = load_vacations(config.OWNER_ID)
        self.list.clear()
        for vac in upcoming_vacations(self.vacations, date.today()):
            item = QListWidgetItem(f"{vac.employee_name or config.NO_NAME}  "
                                   f"del {vac.start_date} al {vac.end_date}")
            item.setData(Qt.UserRole, vac.id)
            item.setForeground(QColor(vac.color))
            self.list.addItem(item)
        self.calendar.render_month()

    def _pick_color(self):
        picked = QColorDialog.getColor(QColor(self.color), self)
        if picked.isValid():
            self.color = picked.name().upper()
            self.btn_color.setText(self.color)

    def _show_who_rests(self, day: date):
        names = names_on_vacation(self.vacations, day)
        body = "\n".join(names) if names else "No hay colaboradores de vacaciones este día."
        QMessageBox.information(self, "Vacaciones",
                                f"Colaboradores que descansan el {format_long_date(day)}\n\n{body}")

    def on_save(self):
        try:
            add_vacation(self.cmb_name.currentData(), _qd_to_py(self.start_edit.date()),
                         _qd_to_py(self.end_edit.date()), self.color, config.OWNER_ID)
        except GestorError as exc:
            QMessageBox.warning(self, "Aviso", str(exc))
            return
        self.cmb_name.setCurrentIndex(0)
        self._refresh()

    def on_delete(self):
        item = self.list.currentItem()
        if item is None:
            return
        if QMessageBox.question(self, "Confirmar", "¿Eliminar estas vacaciones?") != QMessageBox.Yes:
            return
        delete_vacation(item.data(Qt.UserRole))
        self._refresh()
