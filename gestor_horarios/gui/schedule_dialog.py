from datetime import time

from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QComboBox, QTimeEdit,
    QPushButton, QMessageBox, QGridLayout,
)
from PySide6.QtCore import QTime

from gestor_horarios import config
from gestor_horarios.data.data_manager import add_schedules, collaborator_names, update_schedule
from gestor_horarios.exceptions import GestorError
from gestor_horarios.gui.calendar_widget import CalendarWidget
from gestor_horarios.logic.calendar_grid import DateSet
from gestor_horarios.logic.planner import build_schedules, retime_schedule


def _qt_to_py(qt: QTime) -> time:
    return time(qt.hour(), qt.minute())

def _py_to_qt(value, fallback: QTime) -> QTime:
    if value is None:
        return fallback
    return QTime(value.hour, value.minute)


class ScheduleDialog(QDialog):
    """
    Alta de horario (record=None) o cambio de horas de uno existente.
    Alta: colaborador + días marcados en el calendario + entrada/comida/salida.
    """
    def __init__(self, parent, record=None):
        super().__init__(parent)
        self.record = record
        self.changed = False
        self.selected = DateSet()
        self.setWindowTitle("Editar horario" if record else "Agendar horario")

        v = QVBoxLayout(self)

        self.cmb_name = QComboBox()
        if record is None:
            self.cmb_name.addItem("Seleccionar colaborador", userData="")
            for name in collaborator_names(config.OWNER_ID):
                self.cmb_name.addItem(name, userData=name)
            self.cmb_name.currentIndexChanged.connect(self._update_save_state)
        else:
            self.cmb_name.addItem(record.employee_name, userData=record.employee_name)
            self.cmb_name.setEnabled(False)
        row = QHBoxLayout()
        row.addWidget(QLabel("Colaborador"))
        row.addWidget(self.cmb_name, 1)
        v.addLayout(row)

        if record is None:
            v.addWidget(QLabel("Selecciona los días"))
            self.calendar = CalendarWidget(selected=self.selected, on_change=self._update_save_state)
            v.addWidget(self.calendar)

        grid = QGridLayout()
        self.ed_entry = QTimeEdit(_py_to_qt(record and record.start, QTime(9, 0)))
        self.ed_lunch = QTimeEdit(_py_to_qt(record and record.lunch, QTime(14, 0)))
        self.ed_exit = QTimeEdit(_py_to_qt(record and record.end, QTime(18, 0)))
        for r, (label, editor) in enumerate((("Hora de entrada", self.ed_entry),
                                             ("Hora de comida", self.ed_lunch),
                                             ("Hora de salida", self.ed_exit))):
            editor.setDisplayFormat("HH:mm")
            grid.addWidget(QLabel(label), r, 0)
            grid.addWidget(editor, r, 1)
        v.addLayout(grid)

        btns = QHBoxLayout()
        btns.addStretch(1)
        btn_cancel = QPushButton("Cancelar")
        self.btn_save = QPushButton("Guardar horario")
        btns.addWidget(btn_cancel)
        btns.addWidget(self.btn_save)
        v.addLayout(btns)

        btn_cancel.clicked.connect(self.reject)
        self.btn_save.clicked.connect(self.on_save)
        self._update_save_state()

    def _update_save_state(self):
        if self.record is not None:
            self.btn_save.setEnabled(True)
            return
        # sin colaborador o sin días no se puede guardar
        self.btn_save.setEnabled(bool(self.cmb_name.currentData()) and bool(self.selected))

    def on_save(self):
        entry = _qt_to_py(self.ed_entry.time())
        lunch = _qt_to_py(self.ed_lunch.time())
        exit_ = _qt_to_py(self.ed_exit.time())
        try:
            if self.record is None:
                records = build_schedules(self.cmb_name.currentData(), self.selected,
                                          entry, lunch, exit_, config.OWNER_ID)
                add_schedules(records)
            else:
                update_schedule(retime_schedule(self.record, entry, lunch, exit_))
        except GestorError as exc:
            QMessageBox.warning(self, "Aviso", str(exc))
            return
        self.changed = True
        self.accept()
