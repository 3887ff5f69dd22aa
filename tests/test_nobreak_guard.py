"""Tests de la garde anti-coupure (@: et })."""

import pytest

from texifill.core.buffer import BeginningOfBufferError, BufferBase, TextBuffer
from texifill.core.nobreak.guard import NOBREAK_SEQUENCES, should_veto_break


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("See @pxref{Fooing,,, foo, Foo Manual})| more", True),
        ("end of sentence@:| next", True),
        ("plain text he|re", False),
        ("plain text here|", False),
        ("@:   |", True),
        ("@:|", True),
        ("@: |", True),
        ("@:  |", True),
        ("@:\t \t|x", True),
        ("@code{foo})|", True),
        ("foo) |bar", False),
        ("@@:|", True),  # forme échappée : non distinguée
        ("a:|", False),
        ("@;|", False),
        ("}]|", False),
    ],
)
def test_should_veto_break(at_marker, text: str, expected: bool) -> None:
    doc, pos = at_marker(text)
    assert should_veto_break(doc, pos) is expected


@pytest.mark.parametrize("text", ["|", "@|", " |", "   |", ":  |", "|@:"])
def test_should_veto_break_near_start_is_false(at_marker, text: str) -> None:
    doc, pos = at_marker(text)
    assert should_veto_break(doc, pos) is False


def test_should_veto_break_does_not_skip_newlines(at_marker) -> None:
    doc, pos = at_marker("@:\n|next")
    assert should_veto_break(doc, pos) is False


def test_should_veto_break_restores_point() -> None:
    doc = TextBuffer("Ref @xref{Node}) here", point=3)
    assert should_veto_break(doc, 17) is True
    assert doc.point == 3
    assert should_veto_break(doc, 1) is False
    assert doc.point == 3


def test_should_veto_break_is_idempotent(at_marker) -> None:
    doc, pos = at_marker("text@: |more")
    results = {should_veto_break(doc, pos) for _ in range(5)}
    assert results == {True}


def test_nobreak_sequences_are_two_characters() -> None:
    assert NOBREAK_SEQUENCES == ("@:", "})")
    assert all(len(seq) == 2 for seq in NOBREAK_SEQUENCES)


def test_backward_char_before_start_raises_and_keeps_point() -> None:
    doc = TextBuffer("ab", point=1)
    with pytest.raises(BeginningOfBufferError):
        doc.backward_char(2)
    assert doc.point == 1


def test_text_buffer_goto_is_clamped() -> None:
    doc = TextBuffer("abc")
    assert doc.goto(-4) == 0
    assert doc.goto(99) == 3


def test_text_buffer_skip_and_looking_at() -> None:
    doc = TextBuffer("x}) \t ", point=6)
    assert doc.skip_chars_backward(" \t") == 3
    assert doc.point == 3
    doc.backward_char(2)
    assert doc.looking_at("})")
    assert not doc.looking_at("}) \t  too long")
    assert doc.substring(1, 3) == "})"


def test_buffer_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        BufferBase()  # type: ignore[abstract]
