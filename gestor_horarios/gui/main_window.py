from datetime import date

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QToolBar, QPushButton,
    QLabel, QTableWidget, QTableWidgetItem, QMessageBox, QHeaderView,
    QAbstractItemView, QDialog, QScrollArea,
)
from PySide6.QtCore import Qt

from gestor_horarios import config
from gestor_horarios.data.data_manager import clear_owner_data, delete_schedule, load_schedules
from gestor_horarios.gui.collaborator_dialog import CollaboratorDialog
from gestor_horarios.gui.schedule_dialog import ScheduleDialog
from gestor_horarios.gui.vacation_dialog import VacationDialog
from gestor_horarios.logic.calendar_grid import week_start, week_strip, weekday_order
from gestor_horarios.logic.planner import schedules_for_day, weekly_table
from gestor_horarios.utils.date_helper import format_long_date, format_time

DAY_STYLE = "border-radius:10px; padding:6px;"
DAY_SELECTED_STYLE = "background:#000; color:#fff; border-radius:10px; padding:6px;"


class WeekTableDialog(QDialog):
    """Horarios de la semana: una fila por colaborador, siete columnas de días."""
    def __init__(self, parent, records, any_day: date):
        super().__init__(parent)
        first = week_start(any_day, config.FIRST_WEEKDAY)
        self.setWindowTitle(f"Horarios de la semana del {first.isoformat()}")
        self.resize(900, 400)

        rows = weekly_table(records, first)
        table = QTableWidget(len(rows), 8)
        names = [config.WEEKDAY_NAMES[i] for i in weekday_order(config.FIRST_WEEKDAY)]
        table.setHorizontalHeaderLabels(["Nombre", *names])
        table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        for r, (name, cells) in enumerate(rows):
            table.setItem(r, 0, QTableWidgetItem(name))
            for c, rec in enumerate(cells, start=1):
                if rec is None:
                    text = config.REST_LABEL
                else:
                    text = (f"Entrada: {format_time(rec.start)}\n"
                            f"Comida: {format_time(rec.lunch)}\n"
                            f"Salida: {format_time(rec.end)}")
                table.setItem(r, c, QTableWidgetItem(text))
        table.resizeRowsToContents()

        v = QVBoxLayout(self)
        v.addWidget(table)


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Gestor de horarios")
        self.resize(980, 720)

        self.selected_date = date.today()
        self.records = []

        self._build_ui()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        tb = QToolBar()
        self.addToolBar(tb)

        for text, slot in (("Agregar horario", self.open_add_schedule),
                           ("Horarios de la semana", self.open_week_table),
                           ("Vacaciones", self.open_vacations),
                           ("Colaboradores", self.open_collaborators)):
            btn = QPushButton(text)
            btn.clicked.connect(slot)
            tb.addWidget(btn)

        tb.addSeparator()
        btn_clear = QPushButton("Salir y borrar datos locales")
        btn_clear.clicked.connect(self.clear_local_data)
        tb.addWidget(btn_clear)

        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)

        title = QLabel("Gestor de horarios")
        title.setStyleSheet("font-size:22px; font-weight:700;")
        root.addWidget(title)
        today_lbl = QLabel(format_long_date(date.today()))
        today_lbl.setStyleSheet("color:gray;")
        root.addWidget(today_lbl)

        # tira horizontal de días
        strip_host = QWidget()
        self.strip = QHBoxLayout(strip_host)
        scroll = QScrollArea()
        scroll.setWidget(strip_host)
        scroll.setWidgetResizable(True)
        scroll.setFixedHeight(80)
        scroll.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        root.addWidget(scroll)
        self.day_buttons = {}
        for d in week_strip(date.today(), config.WEEK_STRIP_DAYS, config.FIRST_WEEKDAY):
            btn = QPushButton(f"{config.WEEKDAY_LABELS[d.weekday()]}\n{d.day}")
            btn.setFlat(True)
            btn.clicked.connect(lambda _=False, day=d: self.select_date(day))
            self.strip.addWidget(btn)
            self.day_buttons[d] = btn

        self.day_label = QLabel("")
        self.day_label.setStyleSheet("font-weight:600; padding-top:8px;")
        root.addWidget(self.day_label)

        self.table = QTableWidget(0, 4)
        self.table.setHorizontalHeaderLabels(["Colaborador", "Entrada", "Comida", "Salida"])
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.cellDoubleClicked.connect(lambda row, _col: self.open_edit_schedule())
        root.addWidget(self.table, 1)

        self.empty_label = QLabel("No hay registros para este día.")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.setStyleSheet("color:gray;")
        root.addWidget(self.empty_label)

        row = QHBoxLayout()
        row.addStretch(1)
        btn_edit = QPushButton("Editar")
        btn_del = QPushButton("Eliminar")
        btn_edit.clicked.connect(self.open_edit_schedule)
        btn_del.clicked.connect(self.delete_selected)
        row.addWidget(btn_edit)
        row.addWidget(btn_del)
        root.addLayout(row)

        self.status = self.statusBar()

    # ---------------- datos ----------------
    def refresh(self):
        self.records = load_schedules(config.OWNER_ID)
        for d, btn in self.day_buttons.items():
            btn.setStyleSheet(DAY_SELECTED_STYLE if d == self.selected_date else DAY_STYLE)
        self.day_label.setText(format_long_date(self.selected_date))

        self.day_records = schedules_for_day(self.records, self.selected_date)
        self.table.setRowCount(0)
        for rec in self.day_records:
            r = self.table.rowCount()
            self.table.insertRow(r)
            self.table.setItem(r, 0, QTableWidgetItem(rec.employee_name or config.NO_NAME))
            self.table.setItem(r, 1, QTableWidgetItem(format_time(rec.start)))
            self.table.setItem(r, 2, QTableWidgetItem(format_time(rec.lunch)))
            self.table.setItem(r, 3, QTableWidgetItem(format_time(rec.end)))
        self.empty_label.setVisible(not self.day_records)

    def select_date(self, day: date):
        self.selected_date = day
        self.refresh()

    def _current_record(self):
        row = self.table.currentRow()
        if row < 0 or row >= len(self.day_records):
            return None
        return self.day_records[row]

    # ---------------- acciones ----------------
    def open_add_schedule(self):
        dlg = ScheduleDialog(self)
        if dlg.exec() and dlg.changed:
            self.status.showMessage("Horario registrado con éxito.", 3000)
            self.refresh()

    def open_edit_schedule(self):
        rec = self._current_record()
        if rec is None:
            QMessageBox.information(self, "Aviso", "Seleccione un horario.")
            return
        dlg = ScheduleDialog(self, record=rec)
        if dlg.exec() and dlg.changed:
            self.refresh()

    def delete_selected(self):
        rec = self._current_record()
        if rec is None:
            return
        if QMessageBox.question(self, "Confirmar",
                                "¿Estás seguro de que quieres eliminar este horario?") != QMessageBox.Yes:
            return
        delete_schedule(rec.id)
        self.refresh()

    def open_week_table(self):
        WeekTableDialog(self, self.records, self.selected_date).exec()

    def open_vacations(self):
        VacationDialog(self).exec()

    def open_collaborators(self):
        dlg = CollaboratorDialog(self)
        dlg.exec()
        if dlg.changed:
            self.refresh()

    def clear_local_data(self):
        if QMessageBox.question(self, "Confirmar",
                                "¿Estás seguro de que quieres salir? Se borrarán los datos locales.") != QMessageBox.Yes:
            return
        clear_owner_data(config.OWNER_ID)
        self.close()
