"""Garde anti-coupure Texinfo : pas de saut de ligne juste après @: ou })."""

from __future__ import annotations

from texifill.core.buffer import BeginningOfBufferError, BufferBase

# @: change de sens en fin de ligne ; }) suivi d'un saut donne un double espace au rendu.
NOBREAK_SEQUENCES: tuple[str, ...] = ("@:", "})")

# Espaces horizontaux sautés avant le test (l'auto-fill coupe parfois après les espaces).
HORIZONTAL_WHITESPACE = " \t"


def should_veto_break(doc: BufferBase, pos: int) -> bool:
    """
    True si une coupure de ligne juste avant pos doit être refusée.

    Saute les espaces/tabulations qui précèdent pos, recule de 2 caractères et
    teste @: ou }). Moins de 2 caractères disponibles : pas de veto.
    Le point du document est restauré. Les formes échappées (@@:) ne sont pas
    distinguées des vraies directives.
    """
    with doc.excursion():
        doc.goto(pos)
        doc.skip_chars_backward(HORIZONTAL_WHITESPACE)
        try:
            doc.backward_char(2)
        except BeginningOfBufferError:
            return False
        return any(doc.looking_at(seq) for seq in NOBREAK_SEQUENCES)
