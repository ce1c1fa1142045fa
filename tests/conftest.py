"""
Shared pytest fixtures.

Qt runs on the offscreen platform so the window tests need no display.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from tictactoe.game_logic import GameLogic


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def game():
    return GameLogic(ascending=True)


@pytest.fixture
def won_game(game):
    # X takes the left column: X 0, O 1, X 3, O 4, X 6
    for index in (0, 1, 3, 4, 6):
        game.play(index)
    return game


@pytest.fixture
def window(qapp):
    from tictactoe.ui.main_window import TicTacToeWindow
    w = TicTacToeWindow(GameLogic(ascending=True))
    yield w
    w.close()
    w.deleteLater()
