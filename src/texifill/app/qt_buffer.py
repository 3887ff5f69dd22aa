"""Tampon texifill adossé à un QTextDocument."""

from __future__ import annotations

from PySide6.QtGui import QTextDocument

from texifill.core.buffer import BufferBase

# Séparateur de paragraphes renvoyé par QTextDocument.characterAt.
_QT_PARAGRAPH_SEPARATOR = "\u2029"


class QtDocumentBuffer(BufferBase):
    """Lecture seule d'un QTextDocument avec point mobile (positions absolues du document)."""

    def __init__(self, document: QTextDocument, point: int = 0) -> None:
        self.document = document
        super().__init__(point)

    def __len__(self) -> int:
        # characterCount inclut le séparateur final du dernier bloc.
        return max(0, self.document.characterCount() - 1)

    def char_at(self, index: int) -> str:
        ch = self.document.characterAt(index)
        return "\n" if ch == _QT_PARAGRAPH_SEPARATOR else ch
