"""Slot de politique anti-coupure par contexte et installation additive de la garde."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Union

from texifill.core.buffer import BufferBase
from texifill.core.nobreak.guard import should_veto_break

logger = logging.getLogger(__name__)

VetoFunction = Callable[[BufferBase, int], bool]

SLOT_SHAPE_SINGLE = "single"
SLOT_SHAPE_MULTI = "multi"
SLOT_SHAPES = (SLOT_SHAPE_SINGLE, SLOT_SHAPE_MULTI)


@dataclass(frozen=True)
class Unset:
    """Slot à fonction unique, encore vide (aucun veto)."""


@dataclass(frozen=True)
class SingleGuard:
    """Slot à fonction unique contenant une fonction de veto."""

    fn: VetoFunction


@dataclass(frozen=True)
class MultiGuard:
    """Slot multi-hook : collection ordonnée de fonctions de veto indépendantes."""

    fns: tuple[VetoFunction, ...] = ()


PolicySlot = Union[Unset, SingleGuard, MultiGuard]


@dataclass(frozen=True)
class CombinedGuard:
    """
    Composition OU de deux gardes : `guard` (la plus récente) puis `previous`.

    `previous` est capturée à l'installation ; le slot n'est jamais relu.
    """

    guard: VetoFunction
    previous: VetoFunction

    def __call__(self, doc: BufferBase, pos: int) -> bool:
        return bool(self.guard(doc, pos) or self.previous(doc, pos))

    def members(self) -> Iterator[VetoFunction]:
        """Fonctions composées, de la plus récente à la plus ancienne (chaînes aplaties)."""
        for fn in (self.guard, self.previous):
            if isinstance(fn, CombinedGuard):
                yield from fn.members()
            else:
                yield fn


def slot_contains(slot: PolicySlot, guard: VetoFunction) -> bool:
    """True si guard est déjà présente dans le slot (directement ou composée)."""
    if isinstance(slot, SingleGuard):
        if slot.fn == guard:
            return True
        return isinstance(slot.fn, CombinedGuard) and guard in tuple(slot.fn.members())
    if isinstance(slot, MultiGuard):
        return guard in slot.fns
    return False


def successor_slot(
    slot: Any,
    guard: VetoFunction,
    shape: str | None = SLOT_SHAPE_SINGLE,
) -> PolicySlot | None:
    """
    État du slot après installation de guard ; None si le slot n'est pas classable.

    Unset      -> SingleGuard(guard)  (forme "single")
               -> MultiGuard((guard,)) (forme "multi")
    SingleGuard(f) -> SingleGuard(CombinedGuard(guard, f))
    MultiGuard(L)  -> MultiGuard(L + (guard,))

    Forme inconnue, ou variante incompatible avec la forme (SingleGuard en
    "multi", MultiGuard en "single") : None.
    Aucune transition ne retire une fonction ; une garde déjà présente laisse le slot inchangé.
    """
    if shape not in SLOT_SHAPES:
        return None
    if isinstance(slot, Unset):
        if shape == SLOT_SHAPE_SINGLE:
            return SingleGuard(guard)
        return MultiGuard((guard,))
    if isinstance(slot, SingleGuard) and shape == SLOT_SHAPE_SINGLE:
        if slot_contains(slot, guard):
            return slot
        return SingleGuard(CombinedGuard(guard, slot.fn))
    if isinstance(slot, MultiGuard) and shape == SLOT_SHAPE_MULTI:
        if slot_contains(slot, guard):
            return slot
        return MultiGuard(slot.fns + (guard,))
    return None


def slot_vetoes(slot: PolicySlot | None, doc: BufferBase, pos: int) -> bool:
    """True si le slot refuse la coupure avant pos."""
    if isinstance(slot, SingleGuard):
        return bool(slot.fn(doc, pos))
    if isinstance(slot, MultiGuard):
        return any(fn(doc, pos) for fn in slot.fns)
    return False


def install_guard(context: Any, guard: VetoFunction = should_veto_break) -> None:
    """
    Installe guard dans le slot de politique du contexte, sans écraser l'existant.

    Ne modifie que `context.policy_slot`. Sans point d'extension (slot_shape None)
    ou avec un slot non classable : aucune action.
    """
    shape = getattr(context, "slot_shape", None)
    if shape is None:
        logger.debug("Pas de slot de veto pour le mode %s : garde non installée", getattr(context, "mode", "?"))
        return
    slot = getattr(context, "policy_slot", None)
    new_slot = successor_slot(slot, guard, shape)
    if new_slot is None:
        logger.debug(
            "Slot de veto non classable (%s, forme %r) : garde non installée",
            type(slot).__name__,
            shape,
        )
        return
    if new_slot is slot:
        logger.debug("Garde %s déjà installée", getattr(guard, "__name__", guard))
        return
    context.policy_slot = new_slot
    logger.debug("Garde installée : %s -> %s", type(slot).__name__, type(new_slot).__name__)
