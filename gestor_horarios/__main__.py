import argparse
import logging
import sys

from gestor_horarios import config


def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="gestor_horarios", description="Gestor de horarios y vacaciones")
    p.add_argument("--cli", action="store_true", help="menú de texto en lugar de la ventana")
    p.add_argument("--data-dir", help="carpeta de los archivos JSON")
    p.add_argument("--owner", help="identificador del usuario (por defecto: local)")
    p.add_argument("-v", "--verbose", action="store_true", help="registro detallado")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config.configure(data_dir=args.data_dir, owner_id=args.owner)

    if args.cli:
        from gestor_horarios.cli.menu import main_menu
        main_menu()
        return 0

    from PySide6.QtWidgets import QApplication
    from gestor_horarios.gui.main_window import MainWindow

    app = QApplication(sys.argv[:1])
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
