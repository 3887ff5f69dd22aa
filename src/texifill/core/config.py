"""Configuration TOML du remplissage (texifill.toml)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from texifill.core.models import FillConfig
from texifill.core.modes import ModeHooks
from texifill.core.nobreak.policy import SLOT_SHAPES, install_guard

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "texifill.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

KNOWN_KEYS = {"fill_column", "modes", "slot_shape", "log_level", "log_file"}


class ConfigValidationError(Exception):
    """Erreur de validation de la configuration."""
    pass


def read_toml(path: Path) -> dict[str, Any]:
    """Lit un fichier TOML (stdlib tomllib en 3.11+)."""
    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore
    with open(path, "rb") as file_obj:
        return tomllib.load(file_obj)


def validate_config(data: dict[str, Any]) -> None:
    """
    Valide le contenu d'un fichier texifill.toml.
    Lève ConfigValidationError si invalide.

    Toutes les clés sont optionnelles ; les clés inconnues sont refusées.
    """
    if not isinstance(data, dict):
        raise ConfigValidationError("La configuration doit être une table TOML.")

    unknown = set(data.keys()) - KNOWN_KEYS
    if unknown:
        raise ConfigValidationError(f"Clés inconnues : {', '.join(sorted(unknown))}")

    fill_column = data.get("fill_column")
    if fill_column is not None:
        if isinstance(fill_column, bool) or not isinstance(fill_column, int) or not 1 <= fill_column <= 1000:
            raise ConfigValidationError("'fill_column' doit être un entier entre 1 et 1000.")

    modes = data.get("modes")
    if modes is not None:
        if not isinstance(modes, list):
            raise ConfigValidationError("'modes' doit être une liste.")
        for i, mode in enumerate(modes):
            if not isinstance(mode, str) or not mode.strip():
                raise ConfigValidationError(f"Mode #{i+1} : doit être une chaîne non vide.")

    if "slot_shape" in data:
        shape = data["slot_shape"]
        if shape not in SLOT_SHAPES and shape != "none":
            raise ConfigValidationError(
                f"'slot_shape' doit être l'un de : {', '.join(SLOT_SHAPES)}, none"
            )

    level = data.get("log_level")
    if level is not None and (not isinstance(level, str) or level.upper() not in LOG_LEVELS):
        raise ConfigValidationError(f"'log_level' doit être l'un de : {', '.join(LOG_LEVELS)}")

    log_file = data.get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigValidationError("'log_file' doit être un chemin (chaîne).")


def config_from_dict(data: dict[str, Any]) -> FillConfig:
    """Construit un FillConfig après validation ; les clés absentes gardent leur défaut."""
    validate_config(data)
    defaults = FillConfig()
    shape = data.get("slot_shape", defaults.slot_shape)
    log_file = data.get("log_file")
    return FillConfig(
        fill_column=data.get("fill_column", defaults.fill_column),
        modes=tuple(m.strip() for m in data.get("modes", defaults.modes)),
        slot_shape=None if shape == "none" else shape,
        log_level=data.get("log_level", defaults.log_level).upper(),
        log_file=Path(log_file) if log_file else None,
    )


def load_fill_config(path: Path | None = None) -> FillConfig:
    """Charge la configuration ; fichier absent : valeurs par défaut."""
    if path is None:
        path = Path.cwd() / CONFIG_FILENAME
    path = Path(path)
    if not path.exists():
        logger.warning("Configuration %s absente : valeurs par défaut", path)
        return FillConfig()
    return config_from_dict(read_toml(path))


def build_hooks(config: FillConfig) -> ModeHooks:
    """Registre de hooks installant la garde anti-coupure pour chaque mode configuré."""
    hooks = ModeHooks()
    for mode in config.modes:
        hooks.add(mode, install_guard)
    return hooks
