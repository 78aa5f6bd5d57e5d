import argparse
import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from tictactoe.config import ConfigError, GameConfig
from tictactoe.ui.main_window import TicTacToeWindow

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
DISABLED_BUTTON_TEXT_COLOR = QColor(127, 127, 127)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette to the whole application.
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
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_BUTTON_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# COMMAND LINE
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    defaults = GameConfig()
    p = argparse.ArgumentParser(prog="tictactoe", description="Two-player tic-tac-toe")
    p.add_argument("--player1", default=defaults.player1_name, help="Name of the first player")
    p.add_argument("--player2", default=defaults.player2_name, help="Name of the second player")
    p.add_argument("--marker1", default=defaults.player1_marker, help="Marker of the first player")
    p.add_argument("--marker2", default=defaults.player2_marker, help="Marker of the second player")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return p


def parse_config(argv=None):
    """
    Parse the command line into (config, args); bad player setup exits via the parser.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = GameConfig.from_args(args).validate()
    except ConfigError as e:
        parser.error(str(e))
    return config, args

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    config, args = parse_config(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)

    # Qt consumes its own options; ours are already parsed
    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    window = TicTacToeWindow(config)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
