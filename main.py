import sys
import argparse
import logging

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QPalette

from xo_duel import config
from xo_duel.game_logic import Game
from xo_duel.ui.main_window import TicTacToeWindow

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the default dark theme palette using the configured colors.
    """
    palette = QPalette()
    # Standard roles
    palette.setColor(QPalette.ColorRole.Window, config.WINDOW_COLOR)
    palette.setColor(QPalette.ColorRole.WindowText, config.WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.ColorRole.Base, config.BASE_COLOR)
    palette.setColor(QPalette.ColorRole.AlternateBase, config.ALT_BASE_COLOR)
    palette.setColor(QPalette.ColorRole.ToolTipBase, config.TOOLTIP_BASE_COLOR)
    palette.setColor(QPalette.ColorRole.ToolTipText, config.TOOLTIP_TEXT_COLOR)
    palette.setColor(QPalette.ColorRole.Text, config.TEXT_COLOR)
    palette.setColor(QPalette.ColorRole.Button, config.BUTTON_COLOR)
    palette.setColor(QPalette.ColorRole.ButtonText, config.BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.ColorRole.BrightText, config.BRIGHT_TEXT_COLOR)
    palette.setColor(QPalette.ColorRole.Link, config.LINK_COLOR)
    palette.setColor(QPalette.ColorRole.Highlight, config.HIGHLIGHT_COLOR)
    palette.setColor(QPalette.ColorRole.HighlightedText, config.HIGHLIGHTED_TEXT_COLOR)
    palette.setColor(QPalette.ColorRole.PlaceholderText, config.PLACEHOLDER_TEXT_COLOR)
    # Disabled roles
    for role in (QPalette.ColorRole.Text, QPalette.ColorRole.ButtonText,
                 QPalette.ColorRole.WindowText):
        palette.setColor(QPalette.ColorGroup.Disabled, role, config.DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xo-duel", description="Two-player tic-tac-toe")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--default-names", action="store_true",
                   help="Skip the names dialog and play as Player X / Player O")
    return p


def run(argv=None) -> int:
    ns, qt_args = build_parser().parse_known_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication([sys.argv[0], *qt_args])
    app.setStyle('Fusion')

    # Apply default dark theme
    apply_default_palette(app)

    game = Game()
    window = TicTacToeWindow(game)
    window.show()
    if ns.default_names:
        window.reset_game()
    else:
        window.ask_player_names()  # round starts once names are answered
    logger.debug("entering event loop")
    return app.exec()


if __name__ == '__main__':
    sys.exit(run())
