from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import QSize, Signal, QPointF, QRectF
from PySide6.QtGui import QPainter, QColor, QPen

from .. import config
from ..game_logic import PLAYER_X

class BoardWidget(QWidget):
    """
    custom widget to draw and click on tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0..8 on click

    def __init__(self, game_logic, parent=None):
        super().__init__(parent)
        self.game_logic = game_logic  # reference to game state
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
        # square grid centred in the widget: (offset_x, offset_y, side)
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        size = self.game_logic.board_size
        cell = side / size
        col = int((x - ox) // cell); row = int((y - oy) // cell)
        # clamp against float rounding on the far edge
        row = max(0, min(row, size - 1)); col = max(0, min(col, size - 1))
        return row * size + col

    def paintEvent(self, event):
        """
        draw grid, X/O marks, and highlight the winning line
        """
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            offset_x, offset_y, side = self._geometry()
            painter.fillRect(self.rect(), QColor(config.BOARD_BACKGROUND))
            size = self.game_logic.board_size
            cell_size = side / size
            squares = self.game_logic.current_squares
            winning = self.game_logic.winner_info.winning_squares or ()
            # winning cells first so the grid draws over them
            for index in winning:
                r, c = divmod(index, size)
                painter.fillRect(QRectF(offset_x + c*cell_size, offset_y + r*cell_size,
                                        cell_size, cell_size),
                                 QColor(config.HIGHLIGHT_COLOR))
            # grid lines
            painter.setPen(QPen(QColor(config.GRID_COLOR), 2))
            for i in range(1, size):
                x = offset_x + i*cell_size
                painter.drawLine(int(x), int(offset_y), int(x), int(offset_y+side))
                y = offset_y + i*cell_size
                painter.drawLine(int(offset_x), int(y), int(offset_x+side), int(y))
            # marks
            for index, sym in enumerate(squares):
                if not sym: continue
                r, c = divmod(index, size)
                cx = offset_x + c*cell_size + cell_size/2
                cy = offset_y + r*cell_size + cell_size/2
                rad = cell_size/2 * 0.7
                if sym == PLAYER_X:
                    painter.setPen(QPen(QColor(config.X_COLOR), 4))
                    # two crossing lines
                    painter.drawLine(QPointF(cx-rad, cy-rad), QPointF(cx+rad, cy+rad))
                    painter.drawLine(QPointF(cx+rad, cy-rad), QPointF(cx-rad, cy+rad))
                else:
                    painter.setPen(QPen(QColor(config.O_COLOR), 4))
                    painter.drawEllipse(QPointF(cx, cy), rad, rad)
        finally:
            painter.end()

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        if not self._accept_clicks:
            return
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # notify main window
