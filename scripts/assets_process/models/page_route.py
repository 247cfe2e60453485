# assets_process/models/page_route.py
"""
Page route parsing.

The export writes custom pages as  <...>/cf/<category>/<type>/...  so the two
segments after the marker folder name the translation entry to use. Parsing
is done once here instead of indexing into a split path at the call sites.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
from typing import Optional, Sequence, Union

from .. import constants

PathLike = Union[str, PurePath]


@dataclass(frozen=True, slots=True)
class PageRoute:
    category: str
    page_type: str


def parse_page_route(path: PathLike, marker: str = constants.ROUTE_MARKER) -> Optional[PageRoute]:
    """
    Return the route for `path`, or None when the marker is absent or fewer
    than two segments follow its first occurrence.
    """
    parts = PurePath(path).parts
    try:
        idx = parts.index(marker)
    except ValueError:
        return None
    if idx + 2 >= len(parts):
        return None
    return PageRoute(category=parts[idx + 1], page_type=parts[idx + 2])


def has_segments(path: PathLike, segments: Sequence[str] = constants.PLATFORM_SEGMENTS) -> bool:
    """True if `segments` occur consecutively in the path."""
    parts = PurePath(path).parts
    n = len(segments)
    if n == 0:
        return False
    return any(tuple(parts[i:i + n]) == tuple(segments) for i in range(len(parts) - n + 1))
