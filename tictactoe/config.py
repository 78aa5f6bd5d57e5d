from dataclasses import dataclass

from .game_logic import Player

# -----------------------------------------------------------------------------
# BOARD THEME
# -----------------------------------------------------------------------------

BOARD_BACKGROUND_COLOR = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_LINE_COLOR = "lime"

STATUS_DEFAULT_STYLE = "color: #eee;"
STATUS_ERROR_STYLE = "color: #ff8a8a; font-weight: bold;"
STATUS_SUCCESS_STYLE = "color: lime; font-weight: bold;"
STATUS_TURN_STYLE = "color: #8acaff; font-weight: bold;"


class ConfigError(ValueError):
    """bad player names or markers"""


@dataclass
class GameConfig:
    """
    player setup for a game
    """
    player1_name: str = "Player 1"
    player1_marker: str = "X"
    player2_name: str = "Player 2"
    player2_marker: str = "O"

    def validate(self):
        """
        raise ConfigError on blank names, bad or duplicate markers
        """
        for label, name in (("player 1", self.player1_name),
                            ("player 2", self.player2_name)):
            if not name or not name.strip():
                raise ConfigError(f"{label} name must not be blank")
        for label, marker in (("player 1", self.player1_marker),
                              ("player 2", self.player2_marker)):
            if len(marker) != 1 or marker.isspace():
                raise ConfigError(f"{label} marker must be a single character, got {marker!r}")
        if self.player1_marker == self.player2_marker:
            raise ConfigError(f"players need different markers, both are {self.player1_marker!r}")
        return self

    def players(self):
        return (Player(self.player1_name, self.player1_marker),
                Player(self.player2_name, self.player2_marker))

    @classmethod
    def from_args(cls, args):
        """
        build from parsed command line (see main.build_parser)
        """
        return cls(player1_name=args.player1, player1_marker=args.marker1,
                   player2_name=args.player2, player2_marker=args.marker2)
