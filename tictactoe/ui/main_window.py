import logging

from ..config import (
    GameConfig, STATUS_DEFAULT_STYLE, STATUS_ERROR_STYLE,
    STATUS_SUCCESS_STYLE, STATUS_TURN_STYLE,
)
from ..game_logic import Game, STATUS_WIN, STATUS_TIE
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

# shown when a click is ignored
REJECTION_MESSAGES = {
    "occupied": "Cell taken",
    "game_over": "Game over, press Reset",
}


def turn_message(player):
    return f"{player.name}'s turn ({player.marker})"


class TicTacToeWindow(QMainWindow):
    """
    main window: renders game state, forwards clicks into the game
    """
    def __init__(self, config=None):
        """
        init game, ui widgets, signals
        """
        super().__init__()
        self.config = (config or GameConfig()).validate()
        self.game = Game(*self.config.players())
        self.board_widget = BoardWidget(self.game, parent=self)

        self._setup_ui()
        self._update_message(turn_message(self.game.get_current_player()), is_turn=True)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(True)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        self.new_game_action = QAction("New Game", self)
        self.new_game_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(self.new_game_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.message_label.setWordWrap(True)
        self.reset_button = QPushButton("Reset"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)
        self.bottom_layout = hl

    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = STATUS_DEFAULT_STYLE
        if is_error:     style = STATUS_ERROR_STYLE
        elif is_success: style = STATUS_SUCCESS_STYLE
        elif is_turn:    style = STATUS_TURN_STYLE
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _handle_game_over(self, msg):
        # end game UI updates; later clicks still reach _on_cell_clicked
        self._update_message(msg, is_success=True)

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.game.play_round(index)
        if res is None:
            # ignored move: board unchanged, explain why
            reason = self.game.rejection_reason(index)
            self._update_message(REJECTION_MESSAGES.get(reason, "Move ignored"), is_error=True)
            return
        self.board_widget.update()
        if res.status == STATUS_WIN:
            self._handle_game_over(f"{res.winner.name} wins!")
        elif res.status == STATUS_TIE:
            self._handle_game_over("It's a tie!")
        else:
            self._update_message(turn_message(res.current_player), is_turn=True)

    @Slot()
    def reset_game(self):
        # fresh board, first player to move
        self.game.reset_game()
        self._update_message(turn_message(self.game.get_current_player()), is_turn=True)
        self.board_widget.set_accept_clicks(True); self.board_widget.update()
        logger.debug("window reset")
