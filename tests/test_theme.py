import pytest

from ui.theme import PALETTE, TONE_ERROR, TONE_NEUTRAL, TONE_SUCCESS, feedback_tone, tone_color


@pytest.mark.parametrize(
    "message, tone",
    [
        ("Correct!", TONE_SUCCESS),
        ("Too low", TONE_ERROR),
        ("Too high", TONE_ERROR),
        ("Invalid number (1-100)", TONE_ERROR),
        ("Enter a number between 1 and 100", TONE_ERROR),
        ("New game started", TONE_NEUTRAL),
        ("", TONE_NEUTRAL),
    ],
)
def test_feedback_tone(message, tone):
    assert feedback_tone(message) == tone


def test_tone_color():
    assert tone_color(TONE_ERROR) == PALETTE["error"]
    assert tone_color("unknown") == PALETTE["text"]
