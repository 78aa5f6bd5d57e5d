import logging
from dataclasses import dataclass
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

BOARD_CELLS = 9  # fixed 3x3 grid, flat indices 0..8

STATUS_WIN = "win"
STATUS_TIE = "tie"
STATUS_CONTINUE = "continue"

# rows, cols, diags; scanned in this order
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


def is_cell_index(index):
    # bool is an int subclass but never a cell
    return (isinstance(index, int) and not isinstance(index, bool)
            and 0 <= index < BOARD_CELLS)


class Board:
    """
    nine cells, each None or a marker
    """
    def __init__(self):
        self._cells = [None] * BOARD_CELLS

    def _check_index(self, index):
        # no negative indexing from the end
        if not is_cell_index(index):
            raise IndexError(f"cell index out of range: {index!r}")

    def get_board(self) -> Tuple[Optional[str], ...]:
        """
        snapshot of all cells
        """
        return tuple(self._cells)

    def get_cell(self, index: int) -> Optional[str]:
        self._check_index(index)
        return self._cells[index]

    def set_cell(self, index: int, value: Optional[str]):
        """
        store value, no emptiness check (callers use is_move_valid)
        """
        self._check_index(index)
        self._cells[index] = value

    def is_move_valid(self, index) -> bool:
        """
        true if index in range and cell empty
        """
        return is_cell_index(index) and self._cells[index] is None

    def is_board_full(self) -> bool:
        return all(cell is not None for cell in self._cells)

    def empty_cells(self):
        return [i for i, cell in enumerate(self._cells) if cell is None]

    def reset_board(self):
        for i in range(BOARD_CELLS):
            self._cells[i] = None


@dataclass(frozen=True)
class Player:
    """
    display name + single-char marker
    """
    name: str
    marker: str

    def get_name(self) -> str:
        return self.name

    def get_marker(self) -> str:
        return self.marker


@dataclass(frozen=True)
class MoveResult:
    """
    outcome of an accepted move
    """
    status: str                                # STATUS_WIN / STATUS_TIE / STATUS_CONTINUE
    winner: Optional[Player] = None            # set on win
    current_player: Optional[Player] = None    # set on continue


class Game:
    """
    tic-tac-toe rules and state for one game: turn order, winner, board
    """
    def __init__(self, player1: Optional[Player] = None,
                 player2: Optional[Player] = None):
        """
        init board and players, player1 moves first
        """
        self.player1 = player1 or Player("Player 1", "X")
        self.player2 = player2 or Player("Player 2", "O")
        self.board = Board()
        self.current_player = self.player1
        self.winner = None                # Player once someone completes a line
        self.move_count = 0               # accepted moves since last reset

    def get_current_player(self) -> Player:
        return self.current_player

    def get_winner(self) -> Optional[Player]:
        return self.winner

    def get_players(self) -> Tuple[Player, Player]:
        return self.player1, self.player2

    def _switch_player(self):
        self.current_player = (self.player2 if self.current_player is self.player1
                               else self.player1)

    def get_winning_line(self) -> Optional[Tuple[int, int, int]]:
        """
        first completed triple in WINNING_LINES order, or None
        """
        cells = self.board.get_board()
        for a, b, c in WINNING_LINES:
            if cells[a] is not None and cells[a] == cells[b] == cells[c]:
                return (a, b, c)
        return None

    def _check_winner(self):
        # only the mover can complete a line
        if self.get_winning_line() is not None:
            self.winner = self.current_player
            return True
        return False

    def is_tie(self) -> bool:
        return self.board.is_board_full() and self.winner is None

    def is_game_over(self) -> bool:
        return self.winner is not None or self.is_tie()

    def rejection_reason(self, index) -> Optional[str]:
        """
        why play_round(index) would be ignored right now
        returns: 'game_over', 'out_of_range', 'occupied', or None if allowed
        """
        if self.is_game_over():
            return "game_over"
        if not is_cell_index(index):
            return "out_of_range"
        if not self.board.is_move_valid(index):
            return "occupied"
        return None

    def play_round(self, index) -> Optional[MoveResult]:
        """
        place current player's marker at index, check result
        returns MoveResult, or None when the move is ignored
        """
        reason = self.rejection_reason(index)
        if reason is not None:
            logger.debug("ignoring move at %r: %s", index, reason)
            return None

        mover = self.current_player
        self.board.set_cell(index, mover.marker)
        self.move_count += 1
        logger.info("%s (%s) plays cell %d", mover.name, mover.marker, index)

        if self._check_winner():
            logger.info("%s wins after %d moves", mover.name, self.move_count)
            return MoveResult(STATUS_WIN, winner=mover)
        if self.is_tie():
            logger.info("game tied")
            return MoveResult(STATUS_TIE)

        self._switch_player()
        return MoveResult(STATUS_CONTINUE, current_player=self.current_player)

    def reset_game(self):
        """
        clear board and reset turn + winner
        """
        # back to fresh state
        self.board.reset_board()
        self.current_player = self.player1; self.winner = None; self.move_count = 0
        logger.info("game reset")
