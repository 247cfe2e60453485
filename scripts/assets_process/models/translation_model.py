# assets_process/models/translation_model.py
"""
Typed translation tables for the Cloudflare custom pages.

- PageText: one {title, message} pair
- TranslationTable: category -> page type -> PageText, read-only after load
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True, slots=True)
class PageText:
    title: str
    message: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["PageText"]:
        """Return None when title or message is missing/empty."""
        title = data.get("title")
        message = data.get("message")
        if not isinstance(title, str) or not isinstance(message, str):
            return None
        if not title or not message:
            return None
        return cls(title=title, message=message)


@dataclass(slots=True)
class TranslationTable:
    pages: Dict[str, Dict[str, PageText]] = field(default_factory=dict)

    def lookup(self, category: str, page_type: str) -> Optional[PageText]:
        return self.pages.get(category, {}).get(page_type)

    def categories(self) -> tuple[str, ...]:
        return tuple(self.pages)

    def count(self) -> int:
        return sum(len(v) for v in self.pages.values())
