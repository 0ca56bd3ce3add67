"""Floating notice shown when a countdown finishes.

Usage::

    toast = NoticeToast(parent_widget)
    toast.show_notice("Pomodoro complete! +50 XP", "Badge unlocked: Sweet Streak")

Non-blocking: it fades in, holds, then fades out by itself.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QTimer, QPropertyAnimation, QEasingCurve
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QLabel, QGraphicsOpacityEffect,
)

from .styles import PALETTE


def _hex_to_rgba(hex_color: str, alpha: int) -> str:
    """Convert '#RRGGBB' + 0-255 alpha to 'rgba(R, G, B, A)'."""
    h = hex_color.lstrip("#")
    r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


class NoticeToast(QWidget):
    """A floating notification that fades in, holds, then fades out."""

    DISPLAY_MS = 3200
    FADE_IN_MS = 300
    FADE_OUT_MS = 900

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground)
        self.setFixedWidth(340)
        self.hide()

        self._build_ui()

        self._opacity = QGraphicsOpacityEffect(self)
        self.setGraphicsEffect(self._opacity)
        self._opacity.setOpacity(0.0)

        self._fade_anim = QPropertyAnimation(self._opacity, b"opacity", self)

        self._dismiss_timer = QTimer(self)
        self._dismiss_timer.setSingleShot(True)
        self._dismiss_timer.timeout.connect(self._fade_out)

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 12, 20, 12)
        layout.setSpacing(4)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._text_label = QLabel("", self)
        self._text_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._text_label.setWordWrap(True)
        layout.addWidget(self._text_label)

        self._detail_label = QLabel("", self)
        self._detail_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._detail_label.setWordWrap(True)
        layout.addWidget(self._detail_label)

        p = PALETTE
        self.setStyleSheet(
            "NoticeToast {"
            f"  background-color: {_hex_to_rgba(p['bg_secondary'], 235)};"
            f"  border: 1px solid {_hex_to_rgba(p['accent'], 120)};"
            "  border-radius: 12px;"
            "}"
        )
        self._text_label.setStyleSheet(
            f"font-size: 18px; font-weight: 700; color: {p['accent']};"
            "background: transparent; border: none;"
        )
        self._detail_label.setStyleSheet(
            f"font-size: 12px; color: {p['text_muted']};"
            "background: transparent; border: none;"
        )

    # ── public API ───────────────────────────────────────────────────────

    @property
    def text(self) -> str:
        return self._text_label.text()

    @property
    def detail(self) -> str:
        return self._detail_label.text()

    def show_notice(self, text: str, detail: str = "") -> None:
        self._text_label.setText(text)
        self._detail_label.setText(detail)
        self._detail_label.setVisible(bool(detail))

        self.adjustSize()
        self.reposition()
        self.show()
        self.raise_()

        self._fade_anim.stop()
        try:
            self._fade_anim.finished.disconnect()
        except TypeError:
            pass
        self._fade_anim.setDuration(self.FADE_IN_MS)
        self._fade_anim.setStartValue(0.0)
        self._fade_anim.setEndValue(1.0)
        self._fade_anim.setEasingCurve(QEasingCurve.Type.OutCubic)
        self._fade_anim.start()

        self._dismiss_timer.start(self.DISPLAY_MS + (1000 if detail else 0))

    # ── internal ─────────────────────────────────────────────────────────

    def _fade_out(self) -> None:
        self._fade_anim.stop()
        try:
            self._fade_anim.finished.disconnect()
        except TypeError:
            pass
        self._fade_anim.setDuration(self.FADE_OUT_MS)
        self._fade_anim.setStartValue(1.0)
        self._fade_anim.setEndValue(0.0)
        self._fade_anim.setEasingCurve(QEasingCurve.Type.InCubic)
        self._fade_anim.finished.connect(self.hide)
        self._fade_anim.start()

    def reposition(self) -> None:
        """Centre horizontally near the top of the parent widget."""
        if self.parent():
            pw = self.parent().width()
            x = (pw - self.width()) // 2
            self.move(x, 60)
