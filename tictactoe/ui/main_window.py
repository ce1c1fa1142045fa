import logging

from .. import config
from ..game_logic import GameLogic
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QScrollArea, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)

class TicTacToeWindow(QMainWindow):
    """
    main window: board, status, replay/sort controls and move list

    every handler runs one engine operation and then refresh() redraws
    everything from the engine's state
    """
    def __init__(self, game_logic=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = game_logic or GameLogic()
        self.board_widget = BoardWidget(self.game_logic, parent=self)
        self.move_widgets = []            # one per move list row, display order

        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(config.WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel { color: #eee; }
            QLabel#current_move { color: #8acaff; font-weight: bold; }
            QPushButton { padding: 4px 10px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_board_panel()         # status + board + replay
        self._create_info_panel()          # sort button + move list
        self.main_layout.addWidget(self.board_panel, 2)
        self.main_layout.addWidget(self.info_panel, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_board_panel(self):
        # status label, board, replay button
        self.board_panel = QWidget()
        vl = QVBoxLayout(self.board_panel)
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.status_label.setFont(f)
        self.status_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.replay_button = QPushButton("Replay"); self.replay_button.clicked.connect(self.reset_game)
        vl.addWidget(self.status_label)
        vl.addWidget(self.board_widget, 1)
        vl.addWidget(self.replay_button, alignment=Qt.AlignCenter)

    def _create_info_panel(self):
        # sort toggle above a scrollable move list
        self.info_panel = QWidget()
        vl = QVBoxLayout(self.info_panel)
        self.sort_button = QPushButton(); self.sort_button.clicked.connect(self.toggle_sort_order)
        self.move_list = QWidget()
        self.move_list_layout = QVBoxLayout(self.move_list)
        self.move_list_layout.setAlignment(Qt.AlignTop)
        scroll = QScrollArea(); scroll.setWidgetResizable(True)
        scroll.setWidget(self.move_list)
        scroll.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Expanding)
        vl.addWidget(self.sort_button)
        vl.addWidget(scroll, 1)

    def _rebuild_move_list(self):
        # drop old rows, then one button per jumpable move + label for current
        while self.move_list_layout.count():
            item = self.move_list_layout.takeAt(0)
            w = item.widget()
            if w: w.deleteLater()
        self.move_widgets = []
        for entry in self.game_logic.move_entries():
            if entry.is_current:
                w = QLabel(entry.text); w.setObjectName("current_move")
            else:
                w = QPushButton(entry.text)
                # bind move now; clicked also sends a checked flag
                w.clicked.connect(lambda checked=False, move=entry.move: self.jump_to(move))
            self.move_list_layout.addWidget(w)
            self.move_widgets.append(w)

    def refresh(self):
        '''re-read engine state into every widget'''
        gl = self.game_logic
        self.status_label.setText(gl.status)
        self.sort_button.setText("Sort Descending" if gl.is_ascending else "Sort Ascending")
        self.board_widget.set_accept_clicks(not gl.game_over)
        self._rebuild_move_list()
        self.board_widget.update()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # engine ignores taken cells and finished games on its own
        self.game_logic.play(index)
        self.refresh()

    @Slot(int)
    def jump_to(self, move):
        self.game_logic.jump_to(move)
        self.refresh()

    @Slot()
    def toggle_sort_order(self):
        self.game_logic.toggle_sort_order()
        self.refresh()

    @Slot()
    def reset_game(self):
        # full reset to empty board
        self.game_logic.reset()
        logger.info("new game started")
        self.refresh()
