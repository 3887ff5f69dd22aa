"""Fixtures pytest communes."""
import pytest

from texifill.core.buffer import TextBuffer
from texifill.core.modes import ModeHooks, register_texinfo_mode


@pytest.fixture
def texinfo_hooks() -> ModeHooks:
    hooks = ModeHooks()
    register_texinfo_mode(hooks)
    return hooks


def _buffer_at_marker(text: str, marker: str = "|") -> tuple[TextBuffer, int]:
    pos = text.index(marker)
    return TextBuffer(text.replace(marker, "", 1)), pos


@pytest.fixture
def at_marker():
    """Tampon sans le marqueur + position du marqueur (offset de coupure candidate)."""
    return _buffer_at_marker
