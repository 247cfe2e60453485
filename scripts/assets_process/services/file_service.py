# assets_process/services/file_service.py
"""
FileService: discovery and safe disk I/O for the export tree.

Goals:
- Recursive discovery of exported pages (.html only)
- Atomic writes (temp -> fsync -> replace) so an interrupted run never
  leaves a half-written page behind

Notes:
- The temp file is created in the target's own folder; Path.replace() is
  only atomic on the same filesystem.
- Symlinked directories are followed; the export tree is assumed acyclic.
"""

from __future__ import annotations

from pathlib import Path
from typing import List
import io
import os
import shutil
import tempfile

from .. import constants


def find_html_files(root: Path) -> List[Path]:
    """Every file under `root` (recursively) with a .html extension."""
    files: List[Path] = []
    for item in sorted(Path(root).iterdir()):
        if item.is_dir():
            files.extend(find_html_files(item))
        elif item.suffix == constants.HTML_EXTENSION:
            files.append(item)
    return files


class FileService:
    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    # ---- Public API ------------------------------------------------------

    def read_text(self, path: Path) -> str:
        """Read the whole file; undecodable bytes raise UnicodeDecodeError."""
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: Path, text: str) -> None:
        """
        Replace `path` with `text`.

        Steps:
          1) write to a temp file in the same directory
          2) fsync temp, then replace original
        """
        path = Path(path)
        tmp_path = self._write_temp(path.parent, text)
        if path.exists():
            # mkstemp creates 0600 files; keep the page's own permissions
            shutil.copymode(path, tmp_path)
        tmp_path.replace(path)

    # ---- Internals -------------------------------------------------------

    def _write_temp(self, folder: Path, text: str) -> Path:
        fd, tmp_name = tempfile.mkstemp(prefix=".tmp_", dir=str(folder))
        tmp_path = Path(tmp_name)
        try:
            with io.open(fd, mode="w", encoding=self.encoding, newline="") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
        return tmp_path
