import math

from PySide6.QtCore import Qt, QEvent, Signal
from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QGridLayout

from games.keypad import Keypad, KEY_DELETE, KEY_SUBMIT

EMPTY_INPUT = "—"


def key_code(key) -> int:
    return int(getattr(key, "value", key))


MOVE_KEYS = {
    key_code(Qt.Key_Left): "left",
    key_code(Qt.Key_Right): "right",
    key_code(Qt.Key_Up): "up",
    key_code(Qt.Key_Down): "down",
    key_code(Qt.Key_Tab): "right",
    key_code(Qt.Key_Backtab): "left",
}
ACTIVATE_KEYS = {key_code(k) for k in (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Select, Qt.Key_Space)}
DELETE_KEYS = {key_code(k) for k in (Qt.Key_Backspace, Qt.Key_Delete)}


class InputDisplay(QLabel):
    def __init__(self, parent=None):
        super().__init__(EMPTY_INPUT, parent)
        self.setObjectName("inputDisplay")
        self.setAlignment(Qt.AlignCenter)
        self.setFocusPolicy(Qt.NoFocus)

    def set_value(self, text: str):
        self.setText(text if text else EMPTY_INPUT)


class KeypadPanel(QFrame):
    """Buttons laid out after a Keypad model.

    Key presses on the buttons are filtered here so arrow and Tab keys move
    through the model instead of Qt's focus chain, and any focus change that
    still reaches a button is written back to the model.
    """

    keyActivated = Signal(str)

    def __init__(self, keypad: Keypad, parent=None):
        super().__init__(parent)
        self.keypad = keypad
        self.buttons = {}
        layout = QGridLayout(self)
        layout.setHorizontalSpacing(16)
        layout.setVerticalSpacing(12)

        units = math.lcm(*(len(row) for row in keypad.rows))
        for r, row in enumerate(keypad.rows):
            span = units // len(row)
            for c, label in enumerate(row):
                btn = QPushButton(label)
                if label == KEY_SUBMIT:
                    btn.setObjectName("accent")
                btn.setFocusPolicy(Qt.StrongFocus)
                btn.setAutoDefault(False)
                btn.clicked.connect(lambda checked=False, key=label: self._on_clicked(key))
                btn.installEventFilter(self)
                layout.addWidget(btn, r, c * span, 1, span)
                self.buttons[label] = btn

    def _on_clicked(self, label: str):
        self.keypad.focus(label)
        self.keyActivated.emit(label)

    def eventFilter(self, watched, event):
        if event.type() == QEvent.KeyPress and self.handle_key(event.key(), event.text()):
            return True
        if event.type() == QEvent.FocusIn and isinstance(watched, QPushButton):
            # clicks and setFocus() bypass handle_key
            self.keypad.focus(watched.text())
        return super().eventFilter(watched, event)

    def handle_key(self, key, text: str = "") -> bool:
        key = key_code(key)
        if key in MOVE_KEYS:
            self.move_focus(MOVE_KEYS[key])
            return True
        if key in ACTIVATE_KEYS:
            self.keyActivated.emit(self.keypad.focused)
            return True
        if key in DELETE_KEYS:
            self.keyActivated.emit(KEY_DELETE)
            return True
        if len(text) == 1 and text in "0123456789":
            self.keyActivated.emit(text)
            return True
        return False

    def button(self, label: str):
        return self.buttons.get(label)

    def sync_focus(self):
        btn = self.buttons.get(self.keypad.focused)
        if btn is not None:
            btn.setFocus(Qt.OtherFocusReason)

    def move_focus(self, direction: str) -> str:
        label = self.keypad.move(direction)
        self.sync_focus()
        return label

    def focus_key(self, label: str) -> str:
        label = self.keypad.focus(label)
        self.sync_focus()
        return label
