import argparse
import logging

from logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="CSV Finder: carga y busca datos CSV/TSV localmente.")
    parser.add_argument("file", nargs="?", help="archivo CSV/TSV a abrir al iniciar")
    parser.add_argument("--debug", action="store_true", help="logging en nivel DEBUG")
    parser.add_argument("--log-file", help="guardar el log en este archivo")
    parser.add_argument("--settings", help="ruta del JSON de configuración")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file)

    from ui.main_window import MainWindow
    app = MainWindow(settings_path=args.settings)
    if args.file:
        app.controller.load_file(args.file)
        app.refresh()
    app.run()


if __name__ == "__main__":
    main()
