"""Modèle de données : dataclasses typées pour la configuration et les statistiques de remplissage."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FillConfig:
    """Configuration du remplissage de paragraphes."""

    fill_column: int = 70
    """Largeur maximale d'une ligne remplie (colonne de remplissage)."""
    modes: tuple[str, ...] = ("texinfo",)
    """Modes de document pour lesquels la garde anti-coupure est installée."""
    slot_shape: str | None = "single"
    """Forme du slot de veto offert par l'hôte : "single", "multi" ou None (absent)."""
    log_level: str = "INFO"
    """Niveau de log (DEBUG, INFO, WARNING, ERROR)."""
    log_file: Path | None = None
    """Fichier de log optionnel."""


@dataclass
class FillStats:
    """Statistiques d'un remplissage (fill_text / fill_paragraph)."""

    paragraphs: int = 0
    lines_in: int = 0
    lines_out: int = 0
    vetoed_breaks: int = 0
    duration_ms: int = 0
