# assets_process/main.py
"""
Entry point for the static export post-processor.

- Parses CLI flags (out dir, manifest, translations, log level)
- Loads the translation tables once
- Builds AppContext and runs BatchOps over every exported page
"""

from __future__ import annotations

import sys
import argparse
from pathlib import Path
import logging

from . import constants
from .app import AppContext, build_default_context, make_logger
from .services.batch_ops import BatchOps, DiscoveryFailed, OutDirMissing
from .services.translation_service import TranslationError, TranslationService

EXIT_OK = 0
EXIT_MISSING_OUT_DIR = 1
EXIT_BAD_TRANSLATIONS = 2
EXIT_SCAN_FAILED = 3


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=constants.APP_NAME, add_help=True,
                                description="Rewrite exported HTML pages in place for Cloudflare custom pages.")
    p.add_argument("--out-dir", type=Path, default=constants.DEFAULT_OUT_DIR,
                   help="Static export root, scanned recursively (default: ./out).")
    p.add_argument("--manifest", type=Path, default=constants.DEFAULT_MANIFEST_PATH,
                   help="package.json whose version goes into the version meta tag "
                        "(default: package.json at the repository root). Pass it explicitly "
                        "when the export is not built from a Node project; without a readable "
                        "manifest the version is 'unknown'.")
    p.add_argument("--translations", type=Path, default=constants.DEFAULT_TRANSLATIONS_PATH,
                   help="JSON file with block/error/challenge page titles and messages.")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Console log level.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    logger = make_logger(constants.LOGGER_NAME, getattr(logging, args.log_level))

    try:
        translations = TranslationService(logger).load(args.translations)
    except TranslationError as e:
        logger.error("%s", e)
        return EXIT_BAD_TRANSLATIONS

    ctx = build_default_context(
        out_dir=args.out_dir,
        manifest_path=args.manifest,
        translations=translations,
        logger=logger,
    )
    return run(ctx)


def run(ctx: AppContext) -> int:
    try:
        summary = BatchOps(ctx).process_all()
    except OutDirMissing as e:
        ctx.logger.error("%s", e)
        return EXIT_MISSING_OUT_DIR
    except DiscoveryFailed as e:
        ctx.logger.error("%s", e)
        return EXIT_SCAN_FAILED

    if summary.ok:
        ctx.logger.info("All files processed successfully!")
    else:
        ctx.logger.warning("Processed %d of %d files; %d failed:",
                           summary.processed, summary.discovered, len(summary.failed))
        for path in summary.failed:
            ctx.logger.warning("  %s", path)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
