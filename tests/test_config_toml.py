"""Tests de la configuration TOML (texifill.toml)."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from texifill.core.config import (
    ConfigValidationError,
    build_hooks,
    config_from_dict,
    load_fill_config,
    validate_config,
)
from texifill.core.models import FillConfig
from texifill.core.modes import open_context
from texifill.core.nobreak.guard import should_veto_break
from texifill.core.nobreak.policy import MultiGuard, SingleGuard, Unset


def test_load_fill_config_reads_toml(tmp_path: Path) -> None:
    path = tmp_path / "texifill.toml"
    path.write_text(
        'fill_column = 72\nmodes = ["texinfo", "info"]\nslot_shape = "multi"\n'
        'log_level = "debug"\nlog_file = "runs/app.log"\n',
        encoding="utf-8",
    )
    config = load_fill_config(path)
    assert config.fill_column == 72
    assert config.modes == ("texinfo", "info")
    assert config.slot_shape == "multi"
    assert config.log_level == "DEBUG"
    assert config.log_file == Path("runs/app.log")


def test_load_fill_config_missing_file_uses_defaults(tmp_path: Path, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="texifill.core.config"):
        config = load_fill_config(tmp_path / "absent.toml")
    assert config == FillConfig()
    assert any("absente" in rec.message for rec in caplog.records)


def test_slot_shape_none_disables_capability() -> None:
    config = config_from_dict({"slot_shape": "none"})
    assert config.slot_shape is None


@pytest.mark.parametrize(
    ("data", "match"),
    [
        ({"fill_column": 0}, "fill_column"),
        ({"fill_column": "70"}, "fill_column"),
        ({"fill_column": True}, "fill_column"),
        ({"modes": "texinfo"}, "modes"),
        ({"modes": ["texinfo", ""]}, "Mode #2"),
        ({"slot_shape": "list"}, "slot_shape"),
        ({"log_level": "LOUD"}, "log_level"),
        ({"log_file": 3}, "log_file"),
        ({"nobreak": ["@:"]}, "Clés inconnues"),
    ],
)
def test_validate_config_rejects_invalid(data: dict, match: str) -> None:
    with pytest.raises(ConfigValidationError, match=match):
        validate_config(data)


def test_validate_config_rejects_non_table() -> None:
    with pytest.raises(ConfigValidationError):
        validate_config(["fill_column"])  # type: ignore[arg-type]


def test_build_hooks_installs_guard_for_configured_modes() -> None:
    hooks = build_hooks(FillConfig(modes=("texinfo", "info")))
    assert open_context(hooks, "info").policy_slot == SingleGuard(should_veto_break)
    assert open_context(hooks, "markdown").policy_slot == Unset()
    multi = open_context(hooks, "texinfo", slot_shape="multi")
    assert multi.policy_slot == MultiGuard((should_veto_break,))
