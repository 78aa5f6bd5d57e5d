from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import Qt, QSize, Signal, QPointF
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import BOARD_BACKGROUND_COLOR, GRID_COLOR, X_COLOR, O_COLOR, WIN_LINE_COLOR

GRID_SIZE = 3  # cells per side


class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits flat cell index 0..8 on click

    def __init__(self, game, parent=None):
        super().__init__(parent)
        self.game = game  # reference to game state
        self.setSizePolicy(QSizePolicy.Ignored, QSizePolicy.Ignored)
        self.setMinimumSize(QSize(150, 150))
        self._accept_clicks = True      # toggle click handling

    def set_accept_clicks(self, accept):
        # enable/disable user input
        self._accept_clicks = accept

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square side and offsets that center it in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return side, (w-side)/2, (h-side)/2

    def _cell_center(self, index, side, offset_x, offset_y):
        cell_size = side / GRID_SIZE
        r, c = divmod(index, GRID_SIZE)
        return QPointF(offset_x + c*cell_size + cell_size/2,
                       offset_y + r*cell_size + cell_size/2)

    def cell_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        side, ox, oy = self._geometry()
        if side <= 0 or not (ox <= x < ox+side and oy <= y < oy+side):
            return None
        cell = side / GRID_SIZE
        col = int((x-ox)//cell); row = int((y-oy)//cell)
        # clamp to valid range
        row = max(0, min(row, GRID_SIZE-1)); col = max(0, min(col, GRID_SIZE-1))
        return row*GRID_SIZE + col

    def paintEvent(self, event):
        """
        draw grid, markers, and the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            side, offset_x, offset_y = self._geometry()
            # background
            painter.fillRect(self.rect(), QColor(BOARD_BACKGROUND_COLOR))
            cell_size = side / GRID_SIZE
            # grid lines
            painter.setPen(QPen(QColor(GRID_COLOR), 2))
            for i in range(1, GRID_SIZE):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # first player's marks are crosses, second player's are circles
            first_marker = self.game.player1.marker
            rad = cell_size/2 * 0.7
            for index, sym in enumerate(self.game.board.get_board()):
                if sym is None: continue
                center = self._cell_center(index, side, offset_x, offset_y)
                cx, cy = center.x(), center.y()
                if sym == first_marker:
                    painter.setPen(QPen(QColor(X_COLOR), 4))
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(O_COLOR), 4))
                    painter.drawEllipse(center, rad, rad)
            # strike through the completed triple
            line = self.game.get_winning_line()
            if line is not None:
                pen = QPen(QColor(WIN_LINE_COLOR), 8, Qt.SolidLine, Qt.RoundCap, Qt.RoundJoin)
                painter.setPen(pen)
                painter.drawLine(self._cell_center(line[0], side, offset_x, offset_y),
                                 self._cell_center(line[-1], side, offset_x, offset_y))
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        index = self.cell_at(event.position().x(), event.position().y())
        if index is None:
            return
        self.cell_clicked.emit(index)  # notify main window
