import logging
import sys

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

from tictactoe import config
from tictactoe.ui.main_window import TicTacToeWindow

# -----------------------------------------------------------------------------
# DARK PALETTE
# -----------------------------------------------------------------------------

DARK = QColor(53, 53, 53)
DARKER = QColor(35, 35, 35)
ACCENT = QColor(42, 130, 218)
MUTED = QColor(127, 127, 127)

ACTIVE_ROLES = {
    QPalette.Window: DARK,
    QPalette.WindowText: Qt.white,
    QPalette.Base: DARKER,
    QPalette.AlternateBase: DARK,
    QPalette.Text: Qt.white,
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: Qt.white,
    QPalette.Highlight: ACCENT,
    QPalette.HighlightedText: Qt.white,
}

DISABLED_ROLES = (QPalette.Text, QPalette.ButtonText, QPalette.WindowText)


def apply_default_palette(app: QApplication):
    """
    Dark Fusion palette; disabled text is greyed out.
    """
    palette = QPalette()
    for role, color in ACTIVE_ROLES.items():
        palette.setColor(role, color)
    for role in DISABLED_ROLES:
        palette.setColor(QPalette.Disabled, role, MUTED)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def run():
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = TicTacToeWindow()
    window.resize(720, 480)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
