"""Point d'entrée de l'éditeur texifill."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QApplication, QMainWindow

from texifill.app.fill_editor import FillEditor
from texifill.core.config import build_hooks, load_fill_config
from texifill.core.models import FillConfig
from texifill.core.modes import TEXINFO_MODE, open_context
from texifill.core.utils.logging import setup_logging

logger = logging.getLogger(__name__)


class FillWindow(QMainWindow):
    """Fenêtre principale : un FillEditor sur un document Texinfo."""

    def __init__(self, config: FillConfig, path: Path | None = None) -> None:
        super().__init__()
        self.path = path
        hooks = build_hooks(config)
        context = open_context(hooks, TEXINFO_MODE, slot_shape=config.slot_shape)
        self.editor = FillEditor(context, fill_column=config.fill_column, parent=self)
        self.setCentralWidget(self.editor)
        self.setWindowTitle(f"texifill - {path.name}" if path else "texifill")
        if path is not None and path.exists():
            self.editor.setPlainText(path.read_text(encoding="utf-8"))

        edit_menu = self.menuBar().addMenu("Édition")
        self.fill_action = QAction("Remplir le paragraphe", self)
        self.fill_action.setShortcut(QKeySequence("Ctrl+Alt+Q"))
        self.fill_action.triggered.connect(self.editor.fill_paragraph)
        edit_menu.addAction(self.fill_action)
        self.auto_fill_action = QAction("Remplissage automatique", self)
        self.auto_fill_action.setCheckable(True)
        self.auto_fill_action.setChecked(self.editor.auto_fill_enabled)
        self.auto_fill_action.toggled.connect(self._set_auto_fill)
        edit_menu.addAction(self.auto_fill_action)

    def _set_auto_fill(self, enabled: bool) -> None:
        self.editor.auto_fill_enabled = enabled


def main() -> int:
    config = load_fill_config()
    setup_logging(config)
    logging.getLogger("texifill").info("Starting texifill")
    app = QApplication(sys.argv)
    app.setApplicationName("texifill")
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    win = FillWindow(config, path)
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
