import json
import logging
from pathlib import Path

import pytest

from assets_process.app import build_default_context
from assets_process.services.translation_service import TranslationService

TRANSLATIONS = {
    "block": {
        "ip": {"title": "Access Denied", "message": "Your IP has been blocked."},
    },
    "error": {
        "500s": {"title": "Server Error", "message": "Something went wrong."},
    },
    "challenge": {
        "managed": {"title": "Checking Your Browser", "message": "Please wait."},
    },
}


@pytest.fixture
def logger():
    # propagates to root so caplog sees it
    log = logging.getLogger("assets_process_tests")
    log.setLevel(logging.DEBUG)
    return log


@pytest.fixture
def translations(logger):
    return TranslationService(logger).from_dict(TRANSLATIONS)


@pytest.fixture
def manifest(tmp_path):
    path = tmp_path / "package.json"
    path.write_text(json.dumps({"name": "pages", "version": "2.5.0"}), encoding="utf-8")
    return path


@pytest.fixture
def make_page(tmp_path):
    def _make(rel: str, html: str) -> Path:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        return path
    return _make


@pytest.fixture
def ctx(tmp_path, manifest, translations, logger):
    return build_default_context(
        out_dir=tmp_path / "out",
        manifest_path=manifest,
        translations=translations,
        logger=logger,
    )
