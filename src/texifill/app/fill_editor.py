"""Éditeur Texinfo : remplissage de paragraphe (Alt+Q) et auto-remplissage à la frappe."""

from __future__ import annotations

import logging

from PySide6.QtGui import QKeyEvent, QKeySequence, QShortcut, QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from texifill.app.qt_buffer import QtDocumentBuffer
from texifill.core.fill.filler import (
    candidate_breaks,
    choose_break,
    fill_text,
    is_paragraph_separator,
)
from texifill.core.models import FillStats
from texifill.core.modes import DocumentContext
from texifill.core.nobreak.guard import HORIZONTAL_WHITESPACE

logger = logging.getLogger(__name__)


class FillEditor(QPlainTextEdit):
    """QPlainTextEdit dont les coupures consultent la politique du contexte de document."""

    def __init__(
        self,
        context: DocumentContext,
        fill_column: int = 70,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.context = context
        self.fill_column = fill_column
        self.auto_fill_enabled = True
        self.fill_shortcut = QShortcut(QKeySequence("Alt+Q"), self)
        self.fill_shortcut.activated.connect(self.fill_paragraph)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        super().keyPressEvent(event)
        if self.auto_fill_enabled and event.text() == " ":
            self.auto_fill()

    def auto_fill(self) -> bool:
        """
        Coupe la ligne courante si le curseur dépasse fill_column.

        La coupure est choisie sur le document lui-même (QtDocumentBuffer) ;
        les espaces remplacés par le saut de ligne sont ceux qui la précèdent.
        Retourne True si une coupure a été insérée.
        """
        cursor = self.textCursor()
        block = cursor.block()
        line_start = block.position()
        point = cursor.position()
        if point - line_start <= self.fill_column:
            return False
        if is_paragraph_separator(block.text()):
            return False
        buffer = QtDocumentBuffer(self.document(), point)
        pos, vetoed = choose_break(
            buffer,
            line_start,
            candidate_breaks(buffer, line_start, point),
            self.fill_column,
            self.context.vetoes,
        )
        if pos is None:
            logger.debug("Auto-remplissage : aucune coupure possible (%d refusée(s))", vetoed)
            return False
        ws_start = pos
        while ws_start > line_start and buffer.char_at(ws_start - 1) in HORIZONTAL_WHITESPACE:
            ws_start -= 1
        edit = QTextCursor(self.document())
        edit.setPosition(ws_start)
        edit.setPosition(pos, QTextCursor.MoveMode.KeepAnchor)
        edit.insertText("\n")
        return True

    def _paragraph_bounds(self) -> tuple[int, int] | None:
        block = self.textCursor().block()
        if is_paragraph_separator(block.text()):
            return None
        first = block
        while first.previous().isValid() and not is_paragraph_separator(first.previous().text()):
            first = first.previous()
        last = block
        while last.next().isValid() and not is_paragraph_separator(last.next().text()):
            last = last.next()
        return first.position(), last.position() + last.length() - 1

    def fill_paragraph(self) -> FillStats:
        """Remplit le paragraphe autour du curseur (sans effet sur une ligne séparatrice)."""
        bounds = self._paragraph_bounds()
        if bounds is None:
            return FillStats()
        start, end = bounds
        edit = QTextCursor(self.document())
        edit.setPosition(start)
        edit.setPosition(end, QTextCursor.MoveMode.KeepAnchor)
        original = edit.selectedText().replace("\u2029", "\n")
        filled, stats = fill_text(original, self.fill_column, self.context.vetoes)
        if filled != original:
            edit.beginEditBlock()
            edit.insertText(filled)
            edit.endEditBlock()
        logger.debug(
            "Paragraphe rempli : %d -> %d ligne(s), %d coupure(s) refusée(s)",
            stats.lines_in,
            stats.lines_out,
            stats.vetoed_breaks,
        )
        return stats
