# assets_process/services/batch_ops.py
"""
BatchOps: run every page of the export through the DOM edits.

Pages are handled one at a time; a failure on one page is logged and the
run moves on to the next.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import List, Optional

from ..app import AppContext
from ..models.page_route import has_segments
from . import html_service
from .file_service import FileService, find_html_files
from .manifest_service import read_version


@dataclass(slots=True)
class RunSummary:
    discovered: int = 0
    processed: int = 0
    failed: List[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class OutDirMissing(Exception):
    pass


class DiscoveryFailed(Exception):
    """Listing the export tree failed (unreadable folder, broken mount, ...)."""


class BatchOps:
    def __init__(self, ctx: AppContext, fs: Optional[FileService] = None):
        self.ctx = ctx
        self.fs = fs or FileService()

    def process_all(self) -> RunSummary:
        root = self.ctx.out_dir
        if not root.is_dir():
            raise OutDirMissing(f"Directory {root} does not exist")

        try:
            files = find_html_files(root)
        except OSError as e:
            raise DiscoveryFailed(f"Cannot scan {root}: {e}") from e
        summary = RunSummary(discovered=len(files))
        for path in files:
            try:
                self.process_one(path)
            except Exception as e:
                self.ctx.logger.error("Error processing %s: %s", path, e)
                self.ctx.logger.debug("Traceback for %s", path, exc_info=True)
                summary.failed.append(path)
            else:
                summary.processed += 1
                self.ctx.logger.info("Processed: %s", path)
        return summary

    def process_one(self, path: Path) -> None:
        html = self.fs.read_text(path)
        soup = html_service.parse_html(html)
        self.transform(soup, path)
        self.fs.write_text(path, html_service.serialize_html(soup))

    def site_path(self, path: Path) -> PurePath:
        """
        Path of the page as seen from the export, e.g. out/cf/block/ip/index.html.
        Folders above out_dir never take part in route or platform checks.
        """
        root = self.ctx.out_dir
        rel = Path(path).relative_to(root)
        return PurePath(root.resolve().name, *rel.parts)

    def transform(self, soup, path: Path) -> None:
        """Apply the page edits in their fixed order."""
        site_path = self.site_path(path)
        html_service.normalize_preloads(soup)
        html_service.apply_page_metadata(soup, site_path, self.ctx.translations)
        if has_segments(site_path):
            version = read_version(self.ctx.manifest_path, self.ctx.logger)
            html_service.add_platform_meta_tags(soup, version)
        moved = html_service.move_head_scripts_to_body(soup)
        if moved:
            self.ctx.logger.debug("Moved %d script(s) to <body> in %s", moved, path)
