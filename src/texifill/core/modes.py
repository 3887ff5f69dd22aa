"""Contextes de document et hooks d'activation par mode."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from texifill.core.buffer import BufferBase
from texifill.core.nobreak.policy import (
    SLOT_SHAPE_MULTI,
    SLOT_SHAPE_SINGLE,
    MultiGuard,
    PolicySlot,
    Unset,
    install_guard,
    slot_vetoes,
)

logger = logging.getLogger(__name__)

TEXINFO_MODE = "texinfo"

ActivationHook = Callable[["DocumentContext"], Any]


def _default_slot(shape: str | None) -> PolicySlot | None:
    if shape == SLOT_SHAPE_SINGLE:
        return Unset()
    if shape == SLOT_SHAPE_MULTI:
        return MultiGuard()
    return None


@dataclass
class DocumentContext:
    """
    État propre à un document ouvert : mode et slot de politique anti-coupure.

    slot_shape : "single" (une seule fonction), "multi" (liste de hooks) ou None
    si l'hôte n'offre aucun point d'extension de veto.
    """

    mode: str
    slot_shape: str | None = SLOT_SHAPE_SINGLE
    policy_slot: Any = field(default=None)

    def __post_init__(self) -> None:
        if self.policy_slot is None:
            self.policy_slot = _default_slot(self.slot_shape)

    def vetoes(self, doc: BufferBase, pos: int) -> bool:
        """True si la politique installée refuse une coupure avant pos."""
        return slot_vetoes(self.policy_slot, doc, pos)


class ModeHooks:
    """Registre des hooks d'activation (mode -> hooks), détenu par l'hôte."""

    def __init__(self) -> None:
        self._hooks: dict[str, list[ActivationHook]] = {}

    def add(self, mode: str, hook: ActivationHook) -> None:
        hooks = self._hooks.setdefault(mode, [])
        if hook not in hooks:
            hooks.append(hook)

    def remove(self, mode: str, hook: ActivationHook) -> None:
        hooks = self._hooks.get(mode, [])
        if hook in hooks:
            hooks.remove(hook)

    def hooks_for(self, mode: str) -> list[ActivationHook]:
        return list(self._hooks.get(mode, []))

    def run(self, context: DocumentContext) -> None:
        """Exécute les hooks du mode du contexte, dans l'ordre d'enregistrement."""
        for hook in self.hooks_for(context.mode):
            logger.debug("Activation %s : %s", context.mode, getattr(hook, "__name__", hook))
            hook(context)


def register_texinfo_mode(hooks: ModeHooks) -> None:
    """Installe la garde anti-coupure à chaque activation d'un document Texinfo."""
    hooks.add(TEXINFO_MODE, install_guard)


def open_context(
    hooks: ModeHooks,
    mode: str,
    *,
    slot_shape: str | None = SLOT_SHAPE_SINGLE,
    policy_slot: Any = None,
) -> DocumentContext:
    """Crée le contexte d'un document et lance ses hooks d'activation."""
    context = DocumentContext(mode=mode, slot_shape=slot_shape, policy_slot=policy_slot)
    hooks.run(context)
    return context
