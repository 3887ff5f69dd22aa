"""Tampon de texte avec point mobile (lecture seule) pour les prédicats de coupure."""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator


class BeginningOfBufferError(IndexError):
    """Déplacement demandé avant le début du document."""


class BufferBase(ABC):
    """
    Séquence de caractères adressable avec une position courante (point).

    Les sous-classes fournissent `char_at(index)` et `__len__`. Le point est
    toujours dans [0, len(buffer)].
    """

    def __init__(self, point: int = 0) -> None:
        self._point = 0
        self.goto(point)

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def char_at(self, index: int) -> str:
        ...

    @property
    def point(self) -> int:
        return self._point

    def goto(self, pos: int) -> int:
        """Place le point sur pos, borné au début et à la fin du tampon."""
        self._point = max(0, min(int(pos), len(self)))
        return self._point

    def skip_chars_backward(self, chars: str) -> int:
        """Recule tant que le caractère précédent est dans chars. Retourne la distance parcourue."""
        start = self._point
        while self._point > 0 and self.char_at(self._point - 1) in chars:
            self._point -= 1
        return start - self._point

    def backward_char(self, n: int = 1) -> int:
        """Recule de n caractères ; BeginningOfBufferError (point inchangé) s'il en manque."""
        if n > self._point:
            raise BeginningOfBufferError(
                f"Impossible de reculer de {n} caractère(s) depuis la position {self._point}"
            )
        self._point -= n
        return self._point

    def looking_at(self, literal: str) -> bool:
        """True si le texte à partir du point commence par literal."""
        end = self._point + len(literal)
        if end > len(self):
            return False
        return all(self.char_at(self._point + i) == ch for i, ch in enumerate(literal))

    def substring(self, start: int, end: int) -> str:
        start = max(0, start)
        end = min(end, len(self))
        return "".join(self.char_at(i) for i in range(start, end))

    @contextmanager
    def excursion(self) -> Iterator["BufferBase"]:
        """Restaure le point à la sortie du bloc (même en cas d'exception)."""
        saved = self._point
        try:
            yield self
        finally:
            self._point = saved


class TextBuffer(BufferBase):
    """Tampon adossé à une chaîne Python."""

    def __init__(self, text: str, point: int = 0) -> None:
        self.text = text
        super().__init__(point)

    def __len__(self) -> int:
        return len(self.text)

    def char_at(self, index: int) -> str:
        return self.text[index]

    def looking_at(self, literal: str) -> bool:
        return self.text.startswith(literal, self._point)

    def substring(self, start: int, end: int) -> str:
        return self.text[max(0, start):end]

    def __repr__(self) -> str:
        return f"TextBuffer({self.text!r}, point={self._point})"
