import random
from functools import wraps

from games.base import GameBase, GameSnapshot

MIN_NUMBER = 1
MAX_NUMBER = 100
MAX_DIGITS = 3

MSG_EMPTY = "Enter a number between 1 and 100"
MSG_INVALID = "Invalid number (1-100)"
MSG_LOW = "Too low"
MSG_HIGH = "Too high"
MSG_CORRECT = "Correct!"
MSG_NEW_GAME = "New game started"


def _publishes(method):
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        before = self._values()
        result = method(self, *args, **kwargs)
        self._publish_changes(before)
        return result

    return wrapper


class GameState(GameBase):
    """Rules for one round of "guess the number between 1 and 100".

    Every operation is safe to call with arbitrary user input: invalid calls
    are either ignored or answered through ``feedback``, never raised.
    """

    observed_fields = ("input", "attempts", "feedback", "game_over")

    def __init__(self, rng=None, seed=None):
        super().__init__()
        if rng is None:
            rng = random.Random(seed)
        self.rng = rng
        self.target = self._draw_target()
        self.input = ""
        self.attempts = 0
        self.feedback = ""
        self.game_over = False

    def _draw_target(self) -> int:
        return self.rng.randint(MIN_NUMBER, MAX_NUMBER)

    @_publishes
    def append_digit(self, d):
        if self.game_over:
            return
        # bool is an int subclass; True must not count as the digit 1
        if not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9:
            return
        if len(self.input) >= MAX_DIGITS:
            return
        if not self.input and d == 0:
            return
        self.input += str(d)

    @_publishes
    def delete_digit(self):
        if self.game_over:
            return
        self.input = self.input[:-1]

    @_publishes
    def clear_input(self):
        if self.game_over:
            return
        self.input = ""

    @_publishes
    def submit_guess(self):
        if self.game_over:
            return
        if not self.input.strip():
            self.feedback = MSG_EMPTY
            return
        try:
            guess = int(self.input)
        except ValueError:
            guess = None
        if guess is None or not MIN_NUMBER <= guess <= MAX_NUMBER:
            self.feedback = MSG_INVALID
            return

        self.attempts += 1
        if guess < self.target:
            self.feedback = MSG_LOW
        elif guess > self.target:
            self.feedback = MSG_HIGH
        else:
            self.feedback = MSG_CORRECT
            self.game_over = True
        # input stays so the last guess remains visible

    @_publishes
    def reset(self):
        self.target = self._draw_target()
        self.input = ""
        self.attempts = 0
        self.feedback = MSG_NEW_GAME
        self.game_over = False

    new_game = reset

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(self.input, self.attempts, self.feedback, self.game_over)
