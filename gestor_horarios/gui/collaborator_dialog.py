from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QListWidget,
    QPushButton, QMessageBox,
)

from gestor_horarios import config
from gestor_horarios.data.data_manager import (
    add_collaborator, collaborator_names, delete_all_collaborators, delete_collaborator,
)
from gestor_horarios.exceptions import GestorError


class CollaboratorDialog(QDialog):
    """
    Administración de colaboradores.
    Borrar un colaborador borra también todos sus horarios.
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Administración de colaboradores")
        self.resize(420, 480)
        self.changed = False

        v = QVBoxLayout(self)

        row = QHBoxLayout()
        self.ed_name = QLineEdit()
        self.ed_name.setPlaceholderText("Nombre del colaborador")
        btn_add = QPushButton("+ Agregar")
        row.addWidget(self.ed_name, 1)
        row.addWidget(btn_add)
        v.addLayout(row)

        v.addWidget(QLabel("Colaboradores"))
        self.list = QListWidget()
        v.addWidget(self.list)

        btns = QHBoxLayout()
        btn_del = QPushButton("Eliminar")
        btn_del_all = QPushButton("Eliminar todos")
        btn_close = QPushButton("Cerrar")
        btns.addWidget(btn_del)
        btns.addWidget(btn_del_all)
        btns.addStretch(1)
        btns.addWidget(btn_close)
        v.addLayout(btns)

        btn_add.clicked.connect(self._on_add)
        self.ed_name.returnPressed.connect(self._on_add)
        btn_del.clicked.connect(self._on_delete)
        btn_del_all.clicked.connect(self._on_delete_all)
        btn_close.clicked.connect(self.accept)

        self._load_list()

    def _load_list(self):
        self.list.clear()
        self.list.addItems(collaborator_names(config.OWNER_ID))

    def _on_add(self):
        try:
            added = add_collaborator(self.ed_name.text(), config.OWNER_ID)
        except GestorError as exc:
            QMessageBox.warning(self, "Aviso", str(exc))
            self.ed_name.setFocus()
            return
        if not added:
            QMessageBox.information(self, "Aviso", "Ese colaborador ya existe.")
            return
        self.ed_name.clear()
        self.changed = True
        self._load_list()

    def _on_delete(self):
        item = self.list.currentItem()
        if item is None:
            return
        name = item.text()
        if QMessageBox.question(self, "Confirmar",
                                f"¿Eliminar a {name} y todos sus horarios?") != QMessageBox.Yes:
            return
        delete_collaborator(name, config.OWNER_ID)
        self.changed = True
        self._load_list()

    def _on_delete_all(self):
        if QMessageBox.question(self, "Confirmar",
                                "¿Eliminar todos los colaboradores?") != QMessageBox.Yes:
            return
        delete_all_collaborators(config.OWNER_ID)
        self.changed = True
        self._load_list()
