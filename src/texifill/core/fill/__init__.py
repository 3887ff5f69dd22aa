"""Remplissage de paragraphes (consommateur de la politique anti-coupure)."""

from texifill.core.fill.filler import (
    candidate_breaks,
    choose_break,
    fill_paragraph,
    fill_text,
    is_paragraph_separator,
)

__all__ = [
    "candidate_breaks",
    "choose_break",
    "fill_paragraph",
    "fill_text",
    "is_paragraph_separator",
]
