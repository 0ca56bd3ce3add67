"""Badge grid: one card per catalog badge.

Card states:
    unlocked  → full-colour icon, "Unlocked"
    locked    → dimmed card, caption shows what's needed

``set_badges`` is idempotent: the same views twice is a no-op, and a
change in lock state only touches the affected cards.
"""

from __future__ import annotations

from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget, QGridLayout, QVBoxLayout, QLabel, QFrame

from .view import BadgeView


class _BadgeCard(QFrame):
    """A single badge tile."""

    def __init__(self, view: BadgeView, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("badgeCard")
        self.setFixedSize(132, 112)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 10, 8, 10)
        layout.setSpacing(2)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._icon = QLabel(self)
        self._icon.setObjectName("badgeIcon")
        self._icon.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._name = QLabel(self)
        self._name.setObjectName("badgeName")
        self._name.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._name.setWordWrap(True)
        self._caption = QLabel(self)
        self._caption.setObjectName("badgeCaption")
        self._caption.setAlignment(Qt.AlignmentFlag.AlignCenter)

        layout.addWidget(self._icon)
        layout.addWidget(self._name)
        layout.addWidget(self._caption)

        self._view: BadgeView | None = None
        self.set_view(view)

    @property
    def view(self) -> BadgeView:
        return self._view

    @property
    def caption(self) -> str:
        return self._caption.text()

    @property
    def is_locked(self) -> bool:
        return not self._view.unlocked

    def set_view(self, view: BadgeView) -> None:
        if view == self._view:
            return
        self._view = view
        self._icon.setText(view.icon)
        self._name.setText(view.name)
        self._caption.setText(view.caption)
        self.setToolTip(f"{view.name} — {view.caption}")

        # Re-polish so the [locked="true"] stylesheet rule applies.
        self.setProperty("locked", not view.unlocked)
        self.style().unpolish(self)
        self.style().polish(self)


class BadgeGrid(QWidget):
    """Grid of badge cards, ``COLUMNS`` per row."""

    COLUMNS = 3

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._grid = QGridLayout(self)
        self._grid.setContentsMargins(0, 0, 0, 0)
        self._grid.setSpacing(10)
        self._cards: list[_BadgeCard] = []
        self._views: tuple[BadgeView, ...] = ()

    @property
    def cards(self) -> list[_BadgeCard]:
        return list(self._cards)

    def set_badges(self, views: Sequence[BadgeView]) -> None:
        views = tuple(views)
        if views == self._views:
            return

        if [v.key for v in views] != [v.key for v in self._views]:
            self._rebuild(views)
        else:
            for card, view in zip(self._cards, views):
                card.set_view(view)
        self._views = views

    def _rebuild(self, views: tuple[BadgeView, ...]) -> None:
        for card in self._cards:
            self._grid.removeWidget(card)
            card.setParent(None)
            card.deleteLater()
        self._cards = []

        for i, view in enumerate(views):
            card = _BadgeCard(view, self)
            row, col = divmod(i, self.COLUMNS)
            self._grid.addWidget(card, row, col)
            self._cards.append(card)
