# main.py
from __future__ import annotations
import sys
import logging

from PySide6.QtWidgets import QApplication, QMessageBox

from app.config import SETTINGS_FILE, Settings, load_settings
from app.errors import LoadError
from services.result_store import ResultStore
from services.typing_engine import TypingEngine
from services.word_corpus import WordCorpus
from ui.main_window import MainWindow


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(log_file: str) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))
        try:
            QMessageBox.critical(
                None, "Application Error", f"{exctype.__name__}: {value}"
            )
        except Exception:
            logging.exception("Could not show the error dialog")
        sys.exit(1)

    sys.excepthook = excepthook


def add_log_file(log_file: str) -> None:
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(handler)


def load_config(path=SETTINGS_FILE) -> Settings:
    """Logging first, so problems in settings.json end up in the log file."""
    default_log = Settings().log_file
    setup_logging(default_log)
    settings = load_settings(path)
    if settings.log_file != default_log:
        add_log_file(settings.log_file)
    return settings


def build_engine(settings: Settings) -> TypingEngine:
    corpus = WordCorpus.from_file(settings.corpus_path, settings.make_rng())
    store = ResultStore(settings.best_result_path)
    return TypingEngine(corpus, store, settings)


def main() -> int:
    settings = load_config()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Typesprint")

    # No words, no sessions
    try:
        engine = build_engine(settings)
    except LoadError as e:
        logging.error("Cannot load word corpus: %s", e)
        QMessageBox.critical(None, "Word corpus", str(e))
        return 1

    win = MainWindow(engine)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
