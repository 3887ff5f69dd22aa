"""Politique anti-coupure Texinfo (garde + installation dans le slot du contexte)."""

from texifill.core.nobreak.guard import NOBREAK_SEQUENCES, should_veto_break
from texifill.core.nobreak.policy import (
    CombinedGuard,
    MultiGuard,
    PolicySlot,
    SingleGuard,
    Unset,
    install_guard,
    slot_contains,
    slot_vetoes,
    successor_slot,
)

__all__ = [
    "NOBREAK_SEQUENCES",
    "should_veto_break",
    "CombinedGuard",
    "MultiGuard",
    "PolicySlot",
    "SingleGuard",
    "Unset",
    "install_guard",
    "slot_contains",
    "slot_vetoes",
    "successor_slot",
]
