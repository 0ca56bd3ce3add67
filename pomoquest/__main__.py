"""Allow running PomoQuest as a module: python -m pomoquest."""

import sys

from PyQt6.QtWidgets import QApplication

from .config import APP_TITLE, STORAGE_KEY
from .database.db import init_db, DatabaseSlot
from .gamification.progress import ProgressStore
from .logging_setup import setup_logger
from .app import PomoQuestApp


def main() -> None:
    logger = setup_logger()
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName(APP_TITLE)
    app.setOrganizationName(APP_TITLE)

    # Dock icon (generated placeholder — blossom pink circle)
    from PyQt6.QtGui import QIcon, QPixmap, QPainter, QColor
    icon = QPixmap(256, 256)
    icon.fill(QColor(0, 0, 0, 0))
    p = QPainter(icon)
    p.setRenderHint(QPainter.RenderHint.Antialiasing)
    p.setBrush(QColor("#E75A8C"))
    p.setPen(QColor("#E75A8C").darker(120))
    p.drawEllipse(16, 16, 224, 224)
    p.end()
    app.setWindowIcon(QIcon(icon))

    store = ProgressStore(DatabaseSlot(STORAGE_KEY))
    window = PomoQuestApp(store)
    window.show()
    logger.info(
        "PomoQuest ready (xp=%d, sessions=%d)",
        store.state.xp, store.state.completed_sessions,
    )

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
