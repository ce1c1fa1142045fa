"""
Window tests: the widgets follow the engine after every user action.
"""
from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QColor
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QLabel, QPushButton

from tictactoe import config
from tictactoe.game_logic import GameLogic
from tictactoe.ui.board_widget import BoardWidget


def texts(window):
    return [w.text() for w in window.move_widgets]


def test_initial_window(window):
    assert window.windowTitle() == "Tic-Tac-Toe"
    assert window.status_label.text() == "Next player: X"
    assert window.sort_button.text() == "Sort Descending"
    assert window.replay_button.text() == "Replay"
    assert texts(window) == ["You are at move #0"]
    assert isinstance(window.move_widgets[0], QLabel)


def test_cell_click_plays_and_lists_move(window):
    window.board_widget.cell_clicked.emit(4)
    assert window.status_label.text() == "Next player: O"
    assert texts(window) == ["Go to game start", "You are at move #1 (2, 2)"]
    assert isinstance(window.move_widgets[0], QPushButton)
    assert isinstance(window.move_widgets[1], QLabel)


def test_jump_button(window):
    for index in (0, 4, 8):
        window._on_cell_clicked(index)
    window.move_widgets[1].click()
    assert window.game_logic.current_move == 1
    assert window.status_label.text() == "Next player: O"
    assert len(window.game_logic.history) == 4
    assert texts(window)[1] == "You are at move #1 (1, 1)"


def test_win_stops_board_clicks(window):
    for index in (0, 1, 3, 4, 6):
        window._on_cell_clicked(index)
    assert window.status_label.text() == "Winner: X"
    assert window.board_widget._accept_clicks is False
    window._on_cell_clicked(8)
    assert len(window.game_logic.history) == 6


def test_sort_toggle(window):
    window._on_cell_clicked(0)
    window._on_cell_clicked(1)
    window.sort_button.click()
    assert window.sort_button.text() == "Sort Ascending"
    assert texts(window) == [
        "You are at move #2 (1, 2)",
        "Go to move #1 (1, 1)",
        "Go to game start",
    ]
    window.sort_button.click()
    assert window.sort_button.text() == "Sort Descending"
    assert texts(window)[0] == "Go to game start"


def test_replay_resets(window):
    for index in (0, 1, 3, 4, 6):
        window._on_cell_clicked(index)
    window.replay_button.click()
    assert window.status_label.text() == "Next player: X"
    assert texts(window) == ["You are at move #0"]
    assert window.board_widget._accept_clicks is True


def test_board_index_at(qapp):
    board = BoardWidget(GameLogic())
    board.resize(300, 300)
    assert board.index_at(10, 10) == 0
    assert board.index_at(150, 150) == 4
    assert board.index_at(290, 110) == 5
    assert board.index_at(299.9, 299.9) == 8
    assert board.index_at(300, 150) is None
    assert board.index_at(-1, 10) is None


def test_board_index_at_centres_grid(qapp):
    board = BoardWidget(GameLogic())
    board.resize(400, 300)
    # grid is 300 wide starting at x=50
    assert board.index_at(40, 10) is None
    assert board.index_at(60, 10) == 0
    assert board.index_at(340, 290) == 8


def cell_colors(board):
    # sample each cell near its left edge, clear of the marks
    image = board.grab().toImage()
    return [image.pixelColor(c * 100 + 5, r * 100 + 50)
            for r in range(3) for c in range(3)]


def test_board_highlights_winning_line(qapp, won_game):
    board = BoardWidget(won_game)
    board.resize(300, 300)
    colors = cell_colors(board)
    highlight = QColor(config.HIGHLIGHT_COLOR)
    background = QColor(config.BOARD_BACKGROUND)
    # X took the left column
    assert [i for i, color in enumerate(colors) if color == highlight] == [0, 3, 6]
    assert colors[2] == background


def test_board_without_winner_has_no_highlight(qapp, game):
    for index in (0, 1, 3, 4):
        game.play(index)
    board = BoardWidget(game)
    board.resize(300, 300)
    background = QColor(config.BOARD_BACKGROUND)
    assert all(color == background for color in cell_colors(board))


def test_highlight_follows_jump(qapp, won_game):
    board = BoardWidget(won_game)
    board.resize(300, 300)
    won_game.jump_to(4)
    highlight = QColor(config.HIGHLIGHT_COLOR)
    assert highlight not in cell_colors(board)


def test_mouse_click_plays_cell(qapp, game):
    board = BoardWidget(game)
    board.resize(300, 300)
    board.cell_clicked.connect(game.play)
    QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(150, 150))
    assert len(game.history) == 2
    assert game.current_squares[4] == "X"


def test_mouse_click_after_win_changes_nothing(qapp, won_game):
    board = BoardWidget(won_game)
    board.resize(300, 300)
    board.cell_clicked.connect(won_game.play)
    history = list(won_game.history)
    QTest.mouseClick(board, Qt.LeftButton, Qt.NoModifier, QPoint(250, 250))
    assert won_game.history == history
    assert won_game.current_move == 5

