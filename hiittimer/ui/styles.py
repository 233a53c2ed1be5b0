"""QSS stylesheet and phase colors for HIIT Timer."""

from __future__ import annotations

from ..timer.sequencer import Phase

# ── phase accent colors ──────────────────────────────────────────────────

PHASE_COLORS: dict[Phase, str] = {
    Phase.GET_READY:  "#F9E2AF",   # amber
    Phase.EXERCISING: "#FF6B6B",   # warm coral
    Phase.RESTING:    "#4ECDC4",   # cool teal
    Phase.FINISHED:   "#A6E3A1",   # green
    Phase.IDLE:       "#7A7A9A",   # neutral dim
}

PAUSED_COLOR = "#6C7086"

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "accent2":      "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def phase_color(phase: Phase, paused: bool = False) -> str:
    if paused:
        return PAUSED_COLOR
    return PHASE_COLORS.get(phase, PHASE_COLORS[Phase.IDLE])


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or DEFAULT_PALETTE
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#primaryButton:hover {{
        background-color: {p['accent2']};
    }}

    QPushButton#secondaryButton {{
        background-color: transparent;
        color: {p['text_muted']};
        border: 1px solid {p['border']};
        font-size: 13px;
        padding: 8px 16px;
        border-radius: 8px;
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
        border: 1px solid {p['border']};
        font-size: 13px;
        padding: 8px 16px;
        border-radius: 8px;
    }}

    QPushButton#dangerButton:hover {{
        background-color: {p['danger']};
        color: {p['bg']};
    }}

    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}

    QLabel#clockLabel {{
        font-size: 48px;
        font-weight: 700;
    }}

    QLabel#phaseLabel {{
        font-size: 20px;
    }}

    QLabel#progressLabel {{
        font-size: 12px;
        color: {p['text_muted']};
    }}

    QListWidget, QSpinBox, QComboBox {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 4px 8px;
    }}
    """
