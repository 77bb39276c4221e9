from typing import List, Optional

from PyQt5 import QtCore, QtWidgets

from navalbattle.domain.grid import CELL_SYMBOLS, Grid
from navalbattle.domain.types import CellType
from navalbattle.ui.theme import Theme


def cell_style(cell: CellType) -> str:
    if cell == CellType.OCCUPIED:
        parts = [
            f"background-color: {Theme.SHIP_BG};",
            f"color: {Theme.SHIP_TEXT};",
            f"border: 1px solid {Theme.SHIP_BORDER};",
        ]
    elif cell == CellType.BLOCKED:
        parts = [
            f"background-color: {Theme.BLOCKED_BG};",
            f"color: {Theme.BLOCKED_TEXT};",
            f"border: 1px solid {Theme.BLOCKED_BORDER};",
        ]
    else:
        parts = [
            f"background-color: {Theme.BG_DARK};",
            f"color: {Theme.TEXT_MAIN};",
            f"border: 1px solid {Theme.BORDER_EMPTY};",
        ]
    return " ".join(parts)


class BoardView(QtWidgets.QWidget):
    """Read-only grid of labelled cells showing one generated board."""

    CELL_PX = 36

    def __init__(self, board_size: int, parent=None):
        super().__init__(parent)
        self.board_size = board_size
        self.grid: Optional[Grid] = None
        self.cell_labels: List[List[QtWidgets.QLabel]] = []
        self._build_ui()

    def _build_ui(self):
        layout = QtWidgets.QGridLayout(self)
        layout.setSpacing(2)
        layout.setContentsMargins(12, 12, 12, 12)

        for x in range(self.board_size):
            lbl = QtWidgets.QLabel(chr(ord("A") + x))
            lbl.setAlignment(QtCore.Qt.AlignCenter)
            lbl.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
            layout.addWidget(lbl, 0, x + 1)
        for y in range(self.board_size):
            lbl = QtWidgets.QLabel(str(y + 1))
            lbl.setAlignment(QtCore.Qt.AlignCenter)
            lbl.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
            layout.addWidget(lbl, y + 1, 0)

        for y in range(self.board_size):
            row = []
            for x in range(self.board_size):
                cell = QtWidgets.QLabel("")
                cell.setFixedSize(self.CELL_PX, self.CELL_PX)
                cell.setAlignment(QtCore.Qt.AlignCenter)
                row.append(cell)
                layout.addWidget(cell, y + 1, x + 1)
            self.cell_labels.append(row)
        self.clear()

    def clear(self):
        self.grid = None
        for row in self.cell_labels:
            for cell in row:
                cell.setText("")
                cell.setStyleSheet(cell_style(CellType.EMPTY))

    def set_grid(self, grid: Grid):
        if grid.size != self.board_size:
            raise ValueError(f"board view is {self.board_size}x{self.board_size}, grid is {grid.size}x{grid.size}")
        self.grid = grid
        for y, row in enumerate(grid.rows()):
            for x, state in enumerate(row):
                label = self.cell_labels[y][x]
                label.setText("" if state == CellType.EMPTY else CELL_SYMBOLS[state])
                label.setStyleSheet(cell_style(state))
