"""Remplissage de paragraphes Texinfo consultant une politique de veto à chaque coupure candidate."""

from __future__ import annotations

import re
import time
from typing import Callable

from texifill.core.buffer import BufferBase, TextBuffer
from texifill.core.models import FillStats
from texifill.core.nobreak.guard import HORIZONTAL_WHITESPACE

VetoPredicate = Callable[[BufferBase, int], bool]

# Ligne de commande Texinfo (@node Top, @end example, @c ...) : séparateur de paragraphes.
# "@ " (espace explicite) n'est pas une commande de ligne.
COMMAND_LINE_PATTERN = re.compile(r"^@[a-zA-Z]+(\s|$)")

# Environnements dont le contenu n'est jamais rempli.
NOFILL_ENVIRONMENTS = frozenset(
    {"example", "smallexample", "lisp", "smalllisp", "verbatim", "display", "format", "smallformat"}
)
_ENV_START = re.compile(r"^@([a-zA-Z]+)\s*$")
_ENV_END = re.compile(r"^@end\s+([a-zA-Z]+)\s*$")


def is_paragraph_separator(line: str) -> bool:
    """True si la ligne est vide ou est une ligne de commande Texinfo (jamais remplie)."""
    return not line.strip() or bool(COMMAND_LINE_PATTERN.match(line))


def candidate_breaks(buffer: BufferBase, start: int, end: int) -> list[int]:
    """Débuts de mots précédés d'une suite d'espaces horizontaux, dans [start, end)."""
    out: list[int] = []
    seen_word = False
    for i in range(start, end):
        ch = buffer.char_at(i)
        if ch in HORIZONTAL_WHITESPACE:
            continue
        if seen_word and i > start and buffer.char_at(i - 1) in HORIZONTAL_WHITESPACE:
            out.append(i)
        seen_word = True
    return out


def choose_break(
    buffer: BufferBase,
    line_start: int,
    candidates: list[int],
    fill_column: int,
    veto: VetoPredicate | None = None,
) -> tuple[int | None, int]:
    """
    Choisit la coupure d'une ligne commençant à line_start.

    Retient la dernière candidate non refusée dont le texte qui la précède tient
    dans fill_column ; à défaut la première candidate non refusée au-delà
    (ligne trop longue). Returns:
        (position de coupure ou None si toutes sont refusées, nombre de refus)
    """
    best: int | None = None
    vetoed = 0
    for pos in candidates:
        text_end = pos
        while text_end > line_start and buffer.char_at(text_end - 1) in HORIZONTAL_WHITESPACE:
            text_end -= 1
        fits = text_end - line_start <= fill_column
        if not fits and best is not None:
            break
        if veto is not None and veto(buffer, pos):
            vetoed += 1
            continue
        best = pos
        if not fits:
            break
    return best, vetoed


def _fill_words(text: str, fill_column: int, veto: VetoPredicate | None) -> tuple[list[str], int]:
    joined = " ".join(text.split())
    if not joined:
        return [], 0
    buffer = TextBuffer(joined)
    lines: list[str] = []
    start = 0
    vetoed = 0
    while len(joined) - start > fill_column:
        pos, count = choose_break(
            buffer, start, candidate_breaks(buffer, start, len(joined)), fill_column, veto
        )
        vetoed += count
        if pos is None:
            break
        lines.append(joined[start:pos].rstrip(HORIZONTAL_WHITESPACE))
        start = pos
    lines.append(joined[start:])
    return lines, vetoed


def fill_paragraph(
    text: str,
    fill_column: int,
    veto: VetoPredicate | None = None,
) -> tuple[str, FillStats]:
    """
    Remplit un paragraphe (les blancs sont fusionnés en un espace).

    veto(buffer, pos) est consulté pour chaque coupure candidate ; True la refuse.
    """
    t0 = time.perf_counter()
    stats = FillStats(lines_in=len(text.splitlines()))
    lines, vetoed = _fill_words(text, fill_column, veto)
    stats.paragraphs = 1 if lines else 0
    stats.lines_out = len(lines)
    stats.vetoed_breaks = vetoed
    stats.duration_ms = int((time.perf_counter() - t0) * 1000)
    return "\n".join(lines), stats


def fill_text(
    text: str,
    fill_column: int,
    veto: VetoPredicate | None = None,
) -> tuple[str, FillStats]:
    """
    Remplit tous les paragraphes d'un texte Texinfo.

    Lignes séparatrices (vides, commandes @...) et contenu des environnements
    @example, @verbatim, etc. conservés tels quels.
    """
    t0 = time.perf_counter()
    raw_lines = text.splitlines()
    stats = FillStats(lines_in=len(raw_lines))
    output: list[str] = []
    pending: list[str] = []
    nofill_env: str | None = None

    def flush() -> None:
        if not pending:
            return
        lines, vetoed = _fill_words(" ".join(pending), fill_column, veto)
        output.extend(lines)
        stats.paragraphs += 1
        stats.vetoed_breaks += vetoed
        pending.clear()

    for line in raw_lines:
        if nofill_env is not None:
            output.append(line)
            end = _ENV_END.match(line)
            if end and end.group(1) == nofill_env:
                nofill_env = None
            continue
        if is_paragraph_separator(line):
            flush()
            output.append(line)
            start = _ENV_START.match(line)
            if start and start.group(1) in NOFILL_ENVIRONMENTS:
                nofill_env = start.group(1)
            continue
        pending.append(line)
    flush()

    filled = "\n".join(output)
    if text.endswith("\n"):
        filled += "\n"
    stats.lines_out = len(output)
    stats.duration_ms = int((time.perf_counter() - t0) * 1000)
    return filled, stats
