import os
import sys

from PyQt5 import QtGui, QtWidgets

from navalbattle.domain.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_STRATEGY
from navalbattle.domain.errors import GenerationFailed
from navalbattle.generation import SELECTORS, generate_with_retries, get_selector, new_rng
from navalbattle.layouts import FleetDefinition, builtin_fleets
from navalbattle.persistence.boards_store import append_board
from navalbattle.persistence.stats import GenerationStats
from navalbattle.ui.board_view import BoardView
from navalbattle.ui.theme import Theme
from navalbattle.utils import debug


def apply_dark_palette(app: QtWidgets.QApplication):
    """Apply a consistent dark theme using the Theme color palette."""
    QtWidgets.QApplication.setStyle("Fusion")
    palette = QtGui.QPalette()

    palette.setColor(QtGui.QPalette.Window, QtGui.QColor(Theme.BG_DARK))
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(Theme.BG_DARK))
    palette.setColor(QtGui.QPalette.AlternateBase, QtGui.QColor(Theme.BG_PANEL))

    palette.setColor(QtGui.QPalette.WindowText, QtGui.QColor(Theme.TEXT_MAIN))
    palette.setColor(QtGui.QPalette.Text, QtGui.QColor(Theme.TEXT_MAIN))
    palette.setColor(QtGui.QPalette.ButtonText, QtGui.QColor(Theme.TEXT_MAIN))

    palette.setColor(QtGui.QPalette.Button, QtGui.QColor(Theme.BG_BUTTON))

    palette.setColor(QtGui.QPalette.Link, QtGui.QColor(Theme.LINK))
    palette.setColor(QtGui.QPalette.Highlight, QtGui.QColor(Theme.HIGHLIGHT))

    app.setPalette(palette)


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Naval Battle: Fleet Generator")

        self.stats = GenerationStats()
        self.fleets = list(builtin_fleets())
        self.fleet = self.fleets[0]
        self.last_seed = None
        self.last_strategy = DEFAULT_STRATEGY
        self.last_grid = None

        central = QtWidgets.QWidget()
        root_layout = QtWidgets.QVBoxLayout(central)
        root_layout.setContentsMargins(12, 12, 12, 12)
        root_layout.setSpacing(8)

        controls = QtWidgets.QHBoxLayout()
        controls.setContentsMargins(0, 0, 0, 0)

        controls.addWidget(QtWidgets.QLabel("Fleet:"))
        self.fleet_combo = QtWidgets.QComboBox()
        for fleet in self.fleets:
            self.fleet_combo.addItem(fleet.name, userData=fleet)
        self.fleet_combo.currentIndexChanged.connect(self._on_fleet_changed)
        controls.addWidget(self.fleet_combo)

        controls.addWidget(QtWidgets.QLabel("Strategy:"))
        self.strategy_combo = QtWidgets.QComboBox()
        for key in sorted(SELECTORS):
            self.strategy_combo.addItem(key)
        self.strategy_combo.setCurrentText(DEFAULT_STRATEGY)
        controls.addWidget(self.strategy_combo)

        controls.addWidget(QtWidgets.QLabel("Seed:"))
        self.seed_edit = QtWidgets.QLineEdit()
        self.seed_edit.setPlaceholderText("random")
        self.seed_edit.setValidator(QtGui.QIntValidator(0, 2 ** 31 - 1, self))
        self.seed_edit.setFixedWidth(110)
        controls.addWidget(self.seed_edit)

        self.generate_btn = QtWidgets.QPushButton("Generate")
        self.generate_btn.clicked.connect(self.generate)
        controls.addWidget(self.generate_btn)

        self.save_btn = QtWidgets.QPushButton("Save board")
        self.save_btn.setEnabled(False)
        self.save_btn.clicked.connect(self.save_board)
        controls.addWidget(self.save_btn)
        controls.addStretch(1)
        root_layout.addLayout(controls)

        self.board_holder = QtWidgets.QVBoxLayout()
        root_layout.addLayout(self.board_holder, stretch=1)
        self.board_view = None
        self._build_board_view()

        self.status_label = QtWidgets.QLabel("")
        self.status_label.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
        root_layout.addWidget(self.status_label)
        self.stats_label = QtWidgets.QLabel(self.stats.summary_text())
        self.stats_label.setStyleSheet(f"color: {Theme.TEXT_LABEL};")
        root_layout.addWidget(self.stats_label)

        self.setCentralWidget(central)

    def _build_board_view(self):
        if self.board_view is not None:
            self.board_holder.removeWidget(self.board_view)
            self.board_view.deleteLater()
        self.board_view = BoardView(self.fleet.board_size)
        self.board_holder.addWidget(self.board_view)

    def _on_fleet_changed(self, index: int):
        fleet = self.fleet_combo.itemData(index)
        if isinstance(fleet, FleetDefinition) and fleet != self.fleet:
            self.fleet = fleet
            self.last_grid = None
            self.save_btn.setEnabled(False)
            self._build_board_view()

    def _read_seed(self):
        text = self.seed_edit.text().strip()
        return int(text) if text else None

    def generate(self):
        strategy = self.strategy_combo.currentText()
        seed = self._read_seed()
        rng = new_rng(seed)
        try:
            outcome = generate_with_retries(self.fleet, rng, get_selector(strategy), DEFAULT_MAX_ATTEMPTS)
        except GenerationFailed as exc:
            self.stats.record(strategy, DEFAULT_MAX_ATTEMPTS, False)
            self.stats.save()
            self.board_view.clear()
            self.last_grid = None
            self.save_btn.setEnabled(False)
            self.status_label.setText(f"Generation failed after {DEFAULT_MAX_ATTEMPTS} attempts.")
            debug.debug_event(self, "Generation failed", str(exc), level="warning")
        else:
            self.stats.record(strategy, outcome.attempts, True)
            self.stats.save()
            self.last_seed = seed
            self.last_strategy = strategy
            self.last_grid = outcome.grid
            self.board_view.set_grid(outcome.grid)
            self.save_btn.setEnabled(True)
            seed_text = "random" if seed is None else str(seed)
            self.status_label.setText(f"Seed {seed_text}, {strategy}: placed in {outcome.attempts} attempt(s).")
        self.stats_label.setText(self.stats.summary_text())

    def save_board(self):
        if self.last_grid is None:
            return
        append_board(self.last_grid, self.fleet, self.last_seed, self.last_strategy)
        self.status_label.setText("Board saved.")

    def closeEvent(self, event: QtGui.QCloseEvent):
        self.stats.save()
        event.accept()


def main():
    # Enable debug via flag or env var (NAVALBATTLE_DEBUG=1)
    argv = list(sys.argv)
    if "--debug" in argv:
        debug.DEBUG_ENABLED = True
        argv.remove("--debug")
    if debug.env_debug_enabled(os.environ):
        debug.DEBUG_ENABLED = True

    app = QtWidgets.QApplication(argv)
    apply_dark_palette(app)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
