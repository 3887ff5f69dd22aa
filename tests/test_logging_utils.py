"""Tests de la configuration du logging."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from texifill.core.models import FillConfig
from texifill.core.utils.logging import level_from_name, owned_handlers, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    for h in owned_handlers(root):
        root.removeHandler(h)
        h.close()
    root.setLevel(level)
    logging.getLogger("texifill").setLevel(logging.NOTSET)


def test_setup_logging_uses_config_level_and_file(tmp_path: Path, restore_root_logging) -> None:
    log_file = tmp_path / "runs" / "app.log"
    logger = setup_logging(FillConfig(log_level="DEBUG", log_file=log_file))
    assert logger.name == "texifill"
    assert logger.level == logging.DEBUG
    logging.getLogger("texifill.core.modes").debug("activation texinfo")
    for h in owned_handlers():
        h.flush()
    assert "activation texinfo" in log_file.read_text(encoding="utf-8")


def test_setup_logging_defaults_to_info(restore_root_logging) -> None:
    logger = setup_logging()
    assert logger.level == logging.INFO
    assert len(owned_handlers()) == 1


def test_setup_logging_replaces_only_its_own_handlers(restore_root_logging) -> None:
    root = logging.getLogger()
    host_handler = logging.NullHandler()
    root.addHandler(host_handler)
    try:
        setup_logging()
        setup_logging(FillConfig(log_level="WARNING"))
        assert host_handler in root.handlers
        assert len(owned_handlers(root)) == 1
    finally:
        root.removeHandler(host_handler)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("bogus", logging.INFO)],
)
def test_level_from_name(name: str, expected: int) -> None:
    assert level_from_name(name) == expected
