"""Display tests, run on the offscreen Qt platform."""

import pytest
from PySide6.QtCore import QPoint, Qt
from PySide6.QtTest import QTest

from tictactoe.config import GameConfig
from tictactoe.ui.board_widget import BoardWidget
from tictactoe.ui.main_window import TicTacToeWindow
from tictactoe.game_logic import Game


@pytest.fixture
def window(qapp):
    w = TicTacToeWindow()
    yield w
    w.close()


def click(window, *cells):
    for index in cells:
        window.board_widget.cell_clicked.emit(index)


def test_starts_with_first_player_turn(window):
    assert window.message_label.text() == "Player 1's turn (X)"


def test_click_plays_and_updates_status(window):
    click(window, 4)
    assert window.game.board.get_cell(4) == "X"
    assert window.message_label.text() == "Player 2's turn (O)"


def test_taken_cell_shows_message_and_keeps_board(window):
    click(window, 4)
    before = window.game.board.get_board()
    click(window, 4)
    assert window.game.board.get_board() == before
    assert window.message_label.text() == "Cell taken"
    assert window.game.get_current_player() is window.game.player2


def test_win_message(window):
    click(window, 0, 3, 1, 4, 2)
    assert window.message_label.text() == "Player 1 wins!"
    click(window, 8)
    assert window.game.board.get_cell(8) is None
    assert window.message_label.text() == "Game over, press Reset"


def test_tie_message(window):
    click(window, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert window.message_label.text() == "It's a tie!"


def test_reset_button_restarts(window):
    click(window, 0, 3, 1, 4, 2)
    window.reset_button.click()
    assert window.game.board.get_board() == (None,) * 9
    assert window.game.get_winner() is None
    assert window.message_label.text() == "Player 1's turn (X)"


def test_new_game_menu_action_restarts(window):
    click(window, 0)
    window.new_game_action.trigger()
    assert window.game.move_count == 0


def test_custom_names_in_status(qapp):
    w = TicTacToeWindow(GameConfig(player1_name="Ann", player2_name="Ben"))
    w.board_widget.cell_clicked.emit(0)
    assert w.message_label.text() == "Ben's turn (O)"
    w.close()


def test_cell_at_maps_square_grid(qapp):
    widget = BoardWidget(Game())
    widget.resize(300, 300)
    assert widget.cell_at(10, 10) == 0
    assert widget.cell_at(150, 50) == 1
    assert widget.cell_at(50, 150) == 3
    assert widget.cell_at(299, 299) == 8
    assert widget.cell_at(300, 10) is None


def test_cell_at_ignores_margin(qapp):
    widget = BoardWidget(Game())
    widget.resize(300, 200)  # 200px grid centred, 50px margins left and right
    assert widget.cell_at(10, 10) is None
    assert widget.cell_at(60, 10) == 0
    assert widget.cell_at(249, 199) == 8


def cell_center(widget, index):
    side = min(widget.width(), widget.height())
    ox, oy = (widget.width()-side)/2, (widget.height()-side)/2
    r, c = divmod(index, 3)
    return QPoint(int(ox + (c+0.5)*side/3), int(oy + (r+0.5)*side/3))


def mouse_click(widget, index):
    QTest.mouseClick(widget, Qt.LeftButton, Qt.NoModifier, cell_center(widget, index))


@pytest.fixture
def shown_window(qapp):
    w = TicTacToeWindow()
    w.resize(400, 400)
    w.show()
    qapp.processEvents()
    yield w
    w.close()


@pytest.fixture
def shown_board(qapp):
    widget = BoardWidget(Game())
    widget.resize(300, 200)
    widget.show()
    qapp.processEvents()
    yield widget
    widget.close()


def test_mouse_click_plays_move(shown_window):
    mouse_click(shown_window.board_widget, 4)
    assert shown_window.game.board.get_cell(4) == "X"
    assert shown_window.message_label.text() == "Player 2's turn (O)"


def test_mouse_click_after_win_explains_game_over(shown_window):
    for index in (0, 3, 1, 4, 2):
        mouse_click(shown_window.board_widget, index)
    assert shown_window.message_label.text() == "Player 1 wins!"
    mouse_click(shown_window.board_widget, 8)
    assert shown_window.game.board.get_cell(8) is None
    assert shown_window.message_label.text() == "Game over, press Reset"


def test_mouse_click_after_tie_explains_game_over(shown_window):
    for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
        mouse_click(shown_window.board_widget, index)
    assert shown_window.message_label.text() == "It's a tie!"
    mouse_click(shown_window.board_widget, 4)
    assert shown_window.message_label.text() == "Game over, press Reset"


def test_mouse_click_in_margin_emits_nothing(shown_board):
    clicked = []
    shown_board.cell_clicked.connect(clicked.append)
    QTest.mouseClick(shown_board, Qt.LeftButton, Qt.NoModifier, QPoint(10, 100))
    assert clicked == []
    QTest.mouseClick(shown_board, Qt.LeftButton, Qt.NoModifier, QPoint(60, 10))
    assert clicked == [0]


def test_mouse_click_ignored_when_clicks_disabled(shown_board):
    clicked = []
    shown_board.cell_clicked.connect(clicked.append)
    shown_board.set_accept_clicks(False)
    mouse_click(shown_board, 4)
    assert clicked == []
    shown_board.set_accept_clicks(True)
    mouse_click(shown_board, 4)
    assert clicked == [4]
