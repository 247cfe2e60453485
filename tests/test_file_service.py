import os
import stat

from assets_process.services.file_service import FileService, find_html_files


def test_find_html_files_recurses_and_filters(tmp_path, make_page):
    a = make_page("out/index.html", "<p>a</p>")
    b = make_page("out/cf/block/ip/index.html", "<p>b</p>")
    make_page("out/_next/static/app.js", "x")
    make_page("out/legacy.htm", "<p>old</p>")
    make_page("out/notes.txt", "x")

    found = find_html_files(tmp_path / "out")
    assert sorted(found) == sorted([a, b])


def test_find_html_files_empty_dir(tmp_path):
    (tmp_path / "out").mkdir()
    assert find_html_files(tmp_path / "out") == []


def test_write_text_replaces_content_without_leftovers(tmp_path, make_page):
    page = make_page("out/index.html", "<p>old</p>")
    fs = FileService()
    fs.write_text(page, "<p>new</p>")
    assert fs.read_text(page) == "<p>new</p>"
    assert os.listdir(page.parent) == ["index.html"]


def test_write_text_keeps_permissions(tmp_path, make_page):
    page = make_page("out/index.html", "<p>old</p>")
    page.chmod(0o644)
    FileService().write_text(page, "<p>new</p>")
    assert stat.S_IMODE(page.stat().st_mode) == 0o644
