from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QFrame,
)

from games.keypad import Keypad, KEY_NEW_GAME
from ui.theme import feedback_tone, tone_color
from ui.widgets import InputDisplay, KeypadPanel, key_code


class MainWindow(QMainWindow):
    keyActivated = Signal(str)

    def __init__(self, keypad: Keypad | None = None):
        super().__init__()
        self.setWindowTitle("Number Guessing")
        self.resize(960, 720)

        central = QWidget()
        self.setCentralWidget(central)
        outer = QHBoxLayout(central)
        outer.addStretch()

        card = QFrame()
        card.setObjectName("card")
        card.setMinimumWidth(520)
        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(10)

        title = QLabel("Number Guessing — TV")
        title.setObjectName("title")
        title.setAlignment(Qt.AlignCenter)
        layout.addWidget(title)

        self.input_display = InputDisplay()
        layout.addWidget(self.input_display)

        self.feedback_label = QLabel("")
        self.feedback_label.setObjectName("feedback")
        self.feedback_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.feedback_label)

        self.attempts_label = QLabel("Attempts: 0")
        self.attempts_label.setObjectName("attempts")
        self.attempts_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.attempts_label)

        self.keypad_panel = KeypadPanel(keypad or Keypad())
        self.keypad_panel.keyActivated.connect(self.keyActivated.emit)
        layout.addWidget(self.keypad_panel)

        outer.addWidget(card, 0, Qt.AlignVCenter)
        outer.addStretch()

    @property
    def keypad(self) -> Keypad:
        return self.keypad_panel.keypad

    def set_input(self, text: str):
        self.input_display.set_value(text)

    def set_feedback(self, message: str):
        self.feedback_label.setText(message)
        color = tone_color(feedback_tone(message))
        self.feedback_label.setStyleSheet(f"color: {color};")

    def set_attempts(self, attempts: int):
        self.attempts_label.setText(f"Attempts: {attempts}")

    def set_game_over(self, over: bool):
        if over:
            self.keypad_panel.focus_key(KEY_NEW_GAME)

    def on_state_changed(self, field: str, value):
        if field == "input":
            self.set_input(value)
        elif field == "feedback":
            self.set_feedback(value)
        elif field == "attempts":
            self.set_attempts(value)
        elif field == "game_over":
            self.set_game_over(value)

    def focus_first_key(self):
        self.keypad_panel.focus_key(self.keypad.rows[0][0])

    def set_kiosk_mode(self, enabled: bool):
        if enabled:
            self.showFullScreen()
        else:
            self.showNormal()

    def keyPressEvent(self, event):
        if key_code(event.key()) in (key_code(Qt.Key_Escape), key_code(Qt.Key_Back)):
            self.close()
            return
        if self.keypad_panel.handle_key(event.key(), event.text()):
            return
        super().keyPressEvent(event)
