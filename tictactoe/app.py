import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from .config import ConfigError, load_config
from .ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white
DISABLED_TEXT_COLOR = QColor(127, 127, 127)

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    dark palette for the whole app
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    for role in (QPalette.Text, QPalette.ButtonText, QPalette.WindowText):
        palette.setColor(QPalette.Disabled, role, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

def configure_logging(level, log_file=None):
    """
    stderr handler, plus a rotating file when log_file is set
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(RotatingFileHandler(log_file, maxBytes=256_000,
                                            backupCount=3, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Tic-tac-toe against Newell and Simon's strategy")
    parser.add_argument("--config", help="JSON settings file (default: $TICTACTOE_CONFIG)")
    parser.add_argument("--mark", choices=("X", "O"), dest="human_mark",
                        help="mark you play against the computer")
    parser.add_argument("--two-player", action="store_const", const=False, dest="vs_computer",
                        help="two people on one board")
    parser.add_argument("--computer-starts", action="store_const", const=True,
                        help="computer makes the first move")
    parser.add_argument("--delay", type=int, dest="computer_delay_ms",
                        help="milliseconds before the computer answers")
    parser.add_argument("--log-level", help="DEBUG shows which tactic picked each move")
    return parser.parse_args(argv)


def config_from_args(argv=None):
    """
    settings file (--config, else $TICTACTOE_CONFIG) with command line flags on top
    """
    overrides = vars(parse_args(argv))
    path = overrides.pop("config")
    return load_config(path, **overrides)


def main(argv=None):
    try:
        config = config_from_args(argv)
        configure_logging(config.log_level, config.log_file)
    except (ConfigError, OSError) as exc:
        print(f"config error: {exc}", file=sys.stderr)
        return 2

    app = QApplication.instance() or QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(config)
    window.show()
    return app.exec()
