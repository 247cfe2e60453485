from pathlib import PurePosixPath

import pytest

from assets_process.models.page_route import PageRoute, has_segments, parse_page_route


@pytest.mark.parametrize("path, expected", [
    ("out/cf/block/ip/index.html", PageRoute("block", "ip")),
    ("/srv/site/out/cf/challenge/managed/index.html", PageRoute("challenge", "managed")),
    ("out/cf/error/500s", PageRoute("error", "500s")),
])
def test_route_is_read_after_marker(path, expected):
    assert parse_page_route(PurePosixPath(path)) == expected


@pytest.mark.parametrize("path", [
    "out/index.html",
    "out/cf/index.html",
    "out/cf/block",
    "out/cfx/block/ip/index.html",
])
def test_no_route_without_marker_and_two_segments(path):
    assert parse_page_route(PurePosixPath(path)) is None


def test_first_marker_wins():
    route = parse_page_route(PurePosixPath("cf/block/ip/cf/error/500s/index.html"))
    assert route == PageRoute("block", "ip")


def test_platform_segments_must_be_consecutive():
    assert has_segments(PurePosixPath("out/cf/block/ip/index.html"))
    assert has_segments(PurePosixPath("/build/out/cf/index.html"))
    assert not has_segments(PurePosixPath("out/pages/cf/block/ip/index.html"))
    assert not has_segments(PurePosixPath("cf/out/index.html"))
    assert not has_segments(PurePosixPath("out/cfg/index.html"))
