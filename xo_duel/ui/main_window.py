import logging

from ..game_logic import MoveStatus
from ..config import WINDOW_TITLE, WIN_FLASH_MS
from ..ui.board_widget import BoardWidget
from ..ui.player_dialog import PlayerNamesDialog

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, QTimer, Slot

logger = logging.getLogger(__name__)

INSTRUCTIONS = """How to Play Tic-Tac-Toe:

- Click any empty cell to place your mark
- Player X always goes first
- Get 3 in a row (horizontal, vertical, or diagonal) to win!
- Use "Change Names" to set custom player names
- Click "New Game" to start over"""


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line and game controls
    """
    def __init__(self, game):
        """
        init ui widgets around an existing game
        """
        super().__init__()
        self.game = game
        self.board_widget = BoardWidget(self.game, parent=self)
        self.names_dialog = None
        self.is_flashing = False  # win highlight active
        self.flash_timer = QTimer(self)
        self.flash_timer.setSingleShot(True)
        self.flash_timer.setInterval(WIN_FLASH_MS)
        self.flash_timer.timeout.connect(self._end_flash)

        self._setup_ui()
        self.update_status()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QMenuBar { background-color: #333; color: #eee; }
            QMenuBar::item:selected { background-color: #555; }
            QMenu { background-color: #333; color: #eee; border: 1px solid #555; }
            QMenu::item { padding: 8px 20px; }
            QMenu::item:selected { background-color: #555; }
            QPushButton {
                background-color: #444;
                color: #eee;
                border: 1px solid #555;
                padding: 5px 10px;
                border-radius: 4px;
                min-height: 22px;
            }
            QPushButton:hover { background-color: #555; }
            QLabel { color: #eee; }
            QLineEdit { background-color: #555; color: #eee; border: 1px solid #777; border-radius: 3px; padding: 5px; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + buttons
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        names_action = QAction("Change Names", self)
        names_action.triggered.connect(self.ask_player_names)
        help_action = QAction("How to Play", self)
        help_action.triggered.connect(self.show_instructions)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (new_action, names_action, help_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.message_label.setWordWrap(True)
        self.instructions_button = QPushButton("How to Play"); self.instructions_button.clicked.connect(self.show_instructions)
        self.names_button = QPushButton("Change Names"); self.names_button.clicked.connect(self.ask_player_names)
        self.reset_button = QPushButton("New Game"); self.reset_button.clicked.connect(self.reset_game)
        for w in (self.message_label, None, self.instructions_button,
                  self.names_button, self.reset_button):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _update_message(self, text, is_error=False,
                        is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_error:     style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:    style = "color: #8acaff; font-weight: bold;"
        if self.is_flashing:
            style += " font-size: 18pt;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def update_status(self):
        """
        show whose turn it is, or how the round ended
        """
        if self.game.is_over:
            if self.game.winner is not None:
                self._update_message(f"{self.game.winner.get_name()} wins!", is_success=True)
            else:
                self._update_message("It's a draw!", is_success=True)
        else:
            name = self.game.get_current_player().get_name()
            self._update_message(f"{name}'s turn", is_turn=True)

    def _flash_winner(self):
        # brief highlight of the status line
        self.is_flashing = True
        self.update_status()
        self.flash_timer.start()  # restarts if already running

    @Slot()
    def _end_flash(self):
        self.is_flashing = False
        self.update_status()

    @Slot(int)
    def _on_cell_clicked(self, position):
        outcome = self.game.attempt_move(position)
        if not outcome:
            return  # taken cell or finished round, nothing changes
        self.board_widget.update()
        if outcome.status is MoveStatus.WIN:
            logger.info("%s wins", outcome.winner.get_name())
            self._flash_winner()
        else:
            if outcome.status is MoveStatus.DRAW:
                logger.info("round drawn")
            self.update_status()

    @Slot()
    def ask_player_names(self):
        """
        open the names dialog, a new round starts once it is answered
        """
        if self.names_dialog is None:
            self.names_dialog = PlayerNamesDialog(self.game.players, parent=self)
            self.names_dialog.names_chosen.connect(self._on_names_chosen)
            self.names_dialog.defaults_chosen.connect(self._on_defaults_chosen)
        self.names_dialog.open()

    @Slot(str, str)
    def _on_names_chosen(self, first, second):
        for player, name in zip(self.game.players, (first, second)):
            player.set_name(name)
        logger.debug("names set by players")
        self.reset_game()

    @Slot()
    def _on_defaults_chosen(self):
        for player in self.game.players:
            player.set_name(player.default_name)
        logger.debug("names reset to defaults")
        self.reset_game()

    @Slot()
    def reset_game(self):
        # new round, names kept
        self.game.reset()
        self.flash_timer.stop()
        self.is_flashing = False
        self.board_widget.update()
        self.update_status()
        logger.info("round started: %s vs %s", *(p.get_name() for p in self.game.players))

    @Slot()
    def show_instructions(self):
        QMessageBox.information(self, "How to Play", INSTRUCTIONS)
