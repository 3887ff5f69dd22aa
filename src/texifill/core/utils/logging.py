"""Logging de texifill, piloté par FillConfig (log_level, log_file)."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from texifill.core.models import FillConfig

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Marque posée sur les handlers créés ici ; les autres handlers racine (hôte, pytest) sont conservés.
_OWNED_ATTR = "_texifill_owned"


def level_from_name(name: str) -> int:
    """Convertit un nom de niveau (INFO, debug...) en constante logging ; INFO par défaut."""
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def owned_handlers(logger: logging.Logger | None = None) -> list[logging.Handler]:
    """Handlers installés par setup_logging sur le logger racine."""
    logger = logger or logging.getLogger()
    return [h for h in logger.handlers if getattr(h, _OWNED_ATTR, False)]


def _own(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    setattr(handler, _OWNED_ATTR, True)
    return handler


def setup_logging(
    config: FillConfig | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure le logging à partir de la configuration texifill.

    Le niveau vient de `config.log_level` (nom, ex. "DEBUG"), le fichier
    optionnel de `config.log_file`. Un nouvel appel remplace uniquement les
    handlers posés par un appel précédent.

    Returns:
        Logger 'texifill'.
    """
    config = config or FillConfig()
    level = level_from_name(config.log_level)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    for h in owned_handlers(root):
        root.removeHandler(h)
        h.close()

    root.addHandler(_own(logging.StreamHandler(sys.stderr), formatter))

    if config.log_file:
        log_file = Path(config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_own(logging.FileHandler(log_file, encoding="utf-8"), formatter))

    logger = logging.getLogger("texifill")
    logger.setLevel(level)
    return logger
