"""QSS stylesheet and palette for PomoQuest."""

from __future__ import annotations

# ── palette (soft blossom pinks on plum) ─────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#FFF5F8",
    "bg_secondary": "#FFE4EE",
    "surface":      "#FFD6E5",
    "accent":       "#E75A8C",
    "accent2":      "#B36BD4",
    "text":         "#4A2F54",
    "text_muted":   "#6A4F72",
    "success":      "#5FB48C",
    "warning":      "#E8A33D",
    "danger":       "#D9534F",
    "border":       "#F3C1D3",
}


# ── font resolution ───────────────────────────────────────────────────

_resolved_font: str | None = None


def resolve_font_family() -> str:
    """Detect the best available system font.  Must be called after
    QApplication is created (font database needs the app context)."""
    global _resolved_font
    if _resolved_font is None:
        try:
            from PyQt6.QtGui import QFontDatabase
            families = set(QFontDatabase.families())
            for candidate in ("SF Pro", ".AppleSystemUIFont"):
                if candidate in families:
                    _resolved_font = candidate
                    break
            else:
                _resolved_font = "Helvetica Neue"
        except Exception:
            _resolved_font = "Helvetica Neue"
    return _resolved_font


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] = PALETTE) -> str:
    p = palette
    font = resolve_font_family()
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "{font}", "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── buttons ─────────────────────────────────── */
    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-size: 14px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        background-color: {p['surface']};
        border-color: {p['accent']};
    }}

    QPushButton:disabled {{
        color: {p['border']};
        border-color: {p['border']};
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

    QPushButton#primaryButton:disabled {{
        background-color: {p['surface']};
        color: {p['text_muted']};
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
        border-color: {p['danger']};
    }}

    QPushButton#modeButton {{
        background-color: transparent;
        color: {p['text_muted']};
        border: 1px solid transparent;
        font-size: 13px;
        padding: 6px 14px;
        border-radius: 14px;
    }}

    QPushButton#modeButton:checked {{
        background-color: {p['accent']};
        color: {p['bg']};
    }}

    /* ── tab widget ──────────────────────────────── */
    QTabWidget::pane {{
        border: none;
        background-color: transparent;
    }}

    QTabBar::tab {{
        background-color: transparent;
        color: {p['text_muted']};
        padding: 10px 24px;
        border: none;
        border-bottom: 2px solid transparent;
        font-size: 14px;
        font-weight: 600;
    }}

    QTabBar::tab:selected {{
        color: {p['accent']};
        border-bottom: 2px solid {p['accent']};
    }}

    /* ── frame / card ────────────────────────────── */
    QFrame#card {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 16px;
    }}

    QFrame#badgeCard {{
        background-color: {p['bg']};
        border: 1px solid {p['border']};
        border-radius: 12px;
    }}

    QFrame#badgeCard[locked="true"] {{
        background-color: {p['surface']};
        border-style: dashed;
    }}

    QFrame#badgeCard[locked="true"] QLabel {{
        color: {p['text_muted']};
    }}

    /* ── progress bar (XP bar) ───────────────────── */
    QProgressBar {{
        background-color: {p['bg']};
        border: none;
        border-radius: 4px;
    }}

    QProgressBar::chunk {{
        background-color: {p['accent']};
        border-radius: 4px;
    }}

    /* ── labels ──────────────────────────────────── */
    QLabel {{
        background: transparent;
    }}

    QLabel#timeLabel {{
        font-size: 72px;
        font-weight: 700;
        color: {p['text']};
    }}

    QLabel#headingLabel {{
        font-size: 20px;
        font-weight: 700;
        color: {p['accent']};
    }}

    QLabel#levelLabel {{
        font-size: 14px;
        color: {p['accent']};
        font-weight: 700;
    }}

    QLabel#xpLabel {{
        font-size: 13px;
        color: {p['text_muted']};
    }}

    QLabel#teaserLabel {{
        font-size: 13px;
        color: {p['accent2']};
        font-style: italic;
    }}

    QLabel#badgeIcon {{
        font-size: 30px;
    }}

    QLabel#badgeName {{
        font-size: 12px;
        font-weight: 700;
    }}

    QLabel#badgeCaption {{
        font-size: 11px;
        color: {p['text_muted']};
    }}

    /* ── status bar ──────────────────────────────── */
    QStatusBar {{
        background-color: {p['bg']};
        color: {p['text_muted']};
        font-size: 12px;
        border-top: 1px solid {p['border']};
    }}
    """
