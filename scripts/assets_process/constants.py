# assets_process/constants.py
"""
Centralized constants for the static export post-processor.

This module is the single source of truth for:
- Which files are picked up from the export tree
- How page category/type are read from a file path
- Brand, default keywords and the Cloudflare placeholder tokens
- Default locations of the manifest and the translation tables

If the export layout changes (different marker folder, different brand),
update this file and the services will follow.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "assets-process"
LOGGER_NAME: Final[str] = "assets_process"

# ---- File discovery --------------------------------------------------------

HTML_EXTENSION: Final[str] = ".html"

# Default export folder, relative to the working directory
DEFAULT_OUT_DIR: Final[Path] = Path("out")

# ---- Path conventions ------------------------------------------------------

# out/.../cf/<category>/<type>/...  -> category + type select the translations
ROUTE_MARKER: Final[str] = "cf"

# Only files under out/cf/ get the Cloudflare meta tags
PLATFORM_SEGMENTS: Final[tuple[str, ...]] = ("out", "cf")

CATEGORIES: Final[tuple[str, ...]] = ("block", "error", "challenge")

# ---- Metadata --------------------------------------------------------------

BRAND: Final[str] = "Cloudflare"
TITLE_TEMPLATE: Final[str] = "{title} - " + BRAND

DEFAULT_KEYWORDS: Final[str] = "Cloudflare, security, WAF, protection"

# Placeholders substituted by Cloudflare when the custom page is served
CLIENT_IP_TOKEN: Final[str] = "::CLIENT_IP::"
RAY_ID_TOKEN: Final[str] = "::RAY_ID::"
GEO_TOKEN: Final[str] = "::GEO::"

PLATFORM_META_NAMES: Final[tuple[str, ...]] = (
    "client-ip",
    "ray-id",
    "location-code",
    "build-date",
    "version",
)

# ---- Manifest --------------------------------------------------------------

UNKNOWN_VERSION: Final[str] = "unknown"

# package.json at the repository root (scripts/assets_process/ -> repo root)
DEFAULT_MANIFEST_PATH: Final[Path] = Path(__file__).resolve().parents[2] / "package.json"

# ---- Translations ----------------------------------------------------------

DEFAULT_TRANSLATIONS_PATH: Final[Path] = Path(__file__).resolve().parent / "config" / "i18n.json"
