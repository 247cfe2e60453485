# assets_process/services/translation_service.py
"""
TranslationService: load the block/error/challenge page tables.

The tables live in a JSON file shaped like
    {"block": {"ip": {"title": "...", "message": "..."}, ...},
     "error": {...},
     "challenge": {...}}
Unknown categories are ignored and malformed entries are skipped, so a
partial file still yields a usable table.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
from typing import Any, Dict

from .. import constants
from ..models.translation_model import PageText, TranslationTable


class TranslationError(Exception):
    """The translation file could not be read or is not a JSON object."""


class TranslationService:
    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def load(self, path: Path = constants.DEFAULT_TRANSLATIONS_PATH) -> TranslationTable:
        try:
            raw = self._read_json(Path(path))
        except (OSError, ValueError) as e:
            raise TranslationError(f"Cannot load translations from {path}: {e}") from e
        if not isinstance(raw, dict):
            raise TranslationError(f"Translations in {path} must be a JSON object")
        return self.from_dict(raw)

    def from_dict(self, raw: Dict[str, Any]) -> TranslationTable:
        pages: Dict[str, Dict[str, PageText]] = {c: {} for c in constants.CATEGORIES}
        for category, entries in raw.items():
            if category not in pages:
                self.logger.debug("Ignoring unknown translation category %r", category)
                continue
            if not isinstance(entries, dict):
                self.logger.warning("Translation category %r is not an object; skipped", category)
                continue
            for page_type, entry in entries.items():
                text = PageText.from_dict(entry) if isinstance(entry, dict) else None
                if text is None:
                    self.logger.warning("Skipping translation %s/%s: needs title and message",
                                        category, page_type)
                    continue
                pages[category][page_type] = text
        return TranslationTable(pages)

    # ---- Internals -------------------------------------------------------

    def _read_json(self, path: Path) -> Any:
        text = path.read_text(encoding="utf-8")
        return json.loads(text)
