# assets_process/app.py
"""
Core wiring for the export post-processor.

- AppContext: typed container for paths, translations and the logger
- build_default_context: fills in defaults from constants

This module only depends on constants and the models, so services can take
an AppContext without import cycles.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
from typing import Optional

from . import constants
from .models.translation_model import TranslationTable


@dataclass(slots=True)
class AppContext:
    """
    Shared, read-only state for one run.

    Attributes:
      out_dir:        Root of the static export (scanned recursively).
      manifest_path:  JSON manifest whose "version" ends up in the meta tags.
      translations:   Category -> page type -> PageText lookup.
      logger:         Preconfigured logger for the run.
    """
    out_dir: Path
    manifest_path: Path
    translations: TranslationTable
    logger: logging.Logger


def build_default_context(
    out_dir: Optional[Path] = None,
    manifest_path: Optional[Path] = None,
    translations: Optional[TranslationTable] = None,
    logger: Optional[logging.Logger] = None,
) -> AppContext:
    """
    Build an AppContext with sensible defaults.

    - out_dir defaults to ./out
    - manifest_path defaults to package.json at the repository root
    - translations default to an empty table (callers normally load one)
    """
    return AppContext(
        out_dir=Path(out_dir) if out_dir else constants.DEFAULT_OUT_DIR,
        manifest_path=Path(manifest_path) if manifest_path else constants.DEFAULT_MANIFEST_PATH,
        translations=translations if translations is not None else TranslationTable(),
        logger=logger or make_logger(constants.LOGGER_NAME),
    )


def make_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        ch = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        ch.setFormatter(fmt)
        logger.addHandler(ch)
        # Avoid duplicate logs if parent handlers exist
        logger.propagate = False
    logger.setLevel(level)
    return logger


__all__ = ["AppContext", "build_default_context", "make_logger"]
