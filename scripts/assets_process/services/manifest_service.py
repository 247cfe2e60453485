# assets_process/services/manifest_service.py
"""Read the build version from the package manifest."""

from __future__ import annotations

from pathlib import Path
import json
import logging

from .. import constants


def read_version(path: Path, logger: logging.Logger) -> str:
    """
    Return manifest["version"], or UNKNOWN_VERSION when the file is missing,
    not valid JSON, or has no usable version. Failures are logged, not raised.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Failed to read manifest version from %s: %s", path, e)
        return constants.UNKNOWN_VERSION

    version = data.get("version") if isinstance(data, dict) else None
    if not version:
        return constants.UNKNOWN_VERSION
    return str(version)
