PALETTE = {
    "primary": "#2563EB",
    "primary_dark": "#1F54C8",
    "secondary": "#F59E0B",
    "success": "#F59E0B",
    "error": "#EF4444",
    "background": "#F9FAFB",
    "background_top": "#E6EAF7",
    "surface": "#FFFFFF",
    "surface_alt": "#F3F4F6",
    "border": "#E5E7EB",
    "border_pressed": "#D1D5DB",
    "text": "#111827",
}

TONE_SUCCESS = "success"
TONE_ERROR = "error"
TONE_NEUTRAL = "text"


def feedback_tone(message: str) -> str:
    if message == "Correct!":
        return TONE_SUCCESS
    if message in ("Too low", "Too high") or message.startswith("Invalid") or message.startswith("Enter"):
        return TONE_ERROR
    return TONE_NEUTRAL


def tone_color(tone: str) -> str:
    return PALETTE.get(tone, PALETTE["text"])


STYLE_SHEET = f"""
QWidget {{
    font-family: 'Inter','Noto Sans','DejaVu Sans','Segoe UI';
    color: {PALETTE['text']};
    font-size: 18px;
}}
QMainWindow {{
    background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
        stop:0 {PALETTE['background_top']}, stop:1 {PALETTE['background']});
}}
QFrame#card {{
    background: {PALETTE['surface']};
    border: 1px solid {PALETTE['border']};
    border-radius: 16px;
}}
QLabel#title {{
    font-size: 28px;
    font-weight: 700;
}}
QLabel#inputDisplay {{
    background: {PALETTE['surface_alt']};
    border: 2px solid {PALETTE['border']};
    border-radius: 12px;
    color: {PALETTE['primary']};
    font-size: 40px;
    font-weight: 700;
    padding: 12px 24px;
}}
QLabel#feedback {{
    font-size: 22px;
}}
QLabel#attempts {{
    font-size: 20px;
}}
QPushButton {{
    background: {PALETTE['surface']};
    color: {PALETTE['text']};
    border: 2px solid {PALETTE['border']};
    border-radius: 12px;
    min-height: 56px;
    font-size: 22px;
}}
QPushButton:focus {{
    border: 4px solid {PALETTE['secondary']};
}}
QPushButton:pressed {{
    background: {PALETTE['surface_alt']};
    border: 2px solid {PALETTE['border_pressed']};
}}
QPushButton#accent {{
    background: {PALETTE['primary']};
    color: white;
    border: 2px solid {PALETTE['primary']};
}}
QPushButton#accent:focus {{
    border: 4px solid {PALETTE['secondary']};
}}
QPushButton#accent:pressed {{
    background: {PALETTE['primary_dark']};
    border: 2px solid {PALETTE['primary_dark']};
}}
"""


def apply_theme(app):
    app.setStyleSheet(STYLE_SHEET)
