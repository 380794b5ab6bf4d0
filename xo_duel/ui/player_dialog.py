from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QFormLayout,
    QPushButton, QLabel, QLineEdit
)
from PySide6.QtCore import Signal, Slot


def validate_player_names(first, second):
    """
    returns an error message, or None when both names are usable
    """
    first, second = first.strip(), second.strip()
    if not first or not second:
        return "Please enter names for both players!"
    if first.casefold() == second.casefold():
        return "Players must have different names!"
    return None


class PlayerNamesDialog(QDialog):
    """
    asks both players for a name before a session starts
    """
    names_chosen = Signal(str, str)
    defaults_chosen = Signal()

    def __init__(self, players, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Enter Player Names")
        self.setModal(True)
        layout = QVBoxLayout(self)
        form = QFormLayout()
        self.player1_input = QLineEdit()
        self.player2_input = QLineEdit()
        for edit, player in ((self.player1_input, players[0]),
                             (self.player2_input, players[1])):
            edit.setPlaceholderText(player.default_name)
            edit.returnPressed.connect(self._on_start)  # enter submits
            form.addRow(f"Player {player.symbol}:", edit)
        layout.addLayout(form)
        self.error_label = QLabel("")
        self.error_label.setStyleSheet("color: #ff8a8a; font-weight: bold;")
        self.error_label.setWordWrap(True)
        layout.addWidget(self.error_label)
        buttons = QHBoxLayout()
        self.start_button = QPushButton("Start Game")
        self.start_button.setDefault(True)
        self.start_button.clicked.connect(self._on_start)
        self.default_button = QPushButton("Use Defaults")
        self.default_button.clicked.connect(self._on_use_defaults)
        buttons.addStretch(1)
        buttons.addWidget(self.default_button)
        buttons.addWidget(self.start_button)
        layout.addLayout(buttons)

    def showEvent(self, event):
        super().showEvent(event)
        self.player1_input.setFocus()

    @Slot()
    def _on_start(self):
        first = self.player1_input.text().strip()
        second = self.player2_input.text().strip()
        error = validate_player_names(first, second)
        if error:
            self.error_label.setText(error)
            return
        self.error_label.setText("")
        self.names_chosen.emit(first, second)
        self.accept()

    @Slot()
    def _on_use_defaults(self):
        # no duplicate check here, defaults come from distinct symbols
        self.error_label.setText("")
        self.defaults_chosen.emit()
        self.accept()
