KEY_CLEAR = "Clear"
KEY_DELETE = "Delete"
KEY_SUBMIT = "Submit"
KEY_NEW_GAME = "New Game"

DIGIT_ROWS = [
    ["1", "2", "3"],
    ["4", "5", "6"],
    ["7", "8", "9"],
    [KEY_CLEAR, "0", KEY_DELETE],
]
ACTION_ROW = [KEY_SUBMIT, KEY_NEW_GAME]

DIRECTIONS = ("left", "right", "up", "down")


class Keypad:
    """D-pad focus model for the on-screen keypad.

    Left/right stay inside a row. Up/down keep the column, clamped to the
    width of the row being entered, so the two-key action row is reachable
    from every column of the digit grid.
    """

    def __init__(self, rows=None):
        self.rows = [list(r) for r in (rows or DIGIT_ROWS + [ACTION_ROW])]
        self.row = 0
        self.col = 0

    @property
    def focused(self) -> str:
        return self.rows[self.row][self.col]

    def position(self, label: str):
        for r, keys in enumerate(self.rows):
            if label in keys:
                return r, keys.index(label)
        return None

    def focus(self, label: str) -> str:
        pos = self.position(label)
        if pos is not None:
            self.row, self.col = pos
        return self.focused

    def move(self, direction: str) -> str:
        if direction == "left":
            self.col = max(0, self.col - 1)
        elif direction == "right":
            self.col = min(len(self.rows[self.row]) - 1, self.col + 1)
        elif direction in ("up", "down"):
            step = -1 if direction == "up" else 1
            target = self.row + step
            if 0 <= target < len(self.rows):
                self.row = target
                self.col = min(self.col, len(self.rows[target]) - 1)
        return self.focused

    def activate(self, state, label=None) -> str:
        label = self.focused if label is None else label
        if label.isdigit() and len(label) == 1:
            state.append_digit(int(label))
        elif label == KEY_CLEAR:
            state.clear_input()
        elif label == KEY_DELETE:
            state.delete_digit()
        elif label == KEY_SUBMIT:
            state.submit_guess()
        elif label == KEY_NEW_GAME:
            state.reset()
        return label
