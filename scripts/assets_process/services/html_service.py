# assets_process/services/html_service.py
"""
DOM edits applied to every exported page.

All helpers take a BeautifulSoup document and mutate it in place:
- normalize_preloads:         style preloads -> stylesheets, font preloads dropped
- apply_page_metadata:        translated <title>/description + default keywords
- add_platform_meta_tags:     Cloudflare placeholder/build meta tags at top of <head>
- move_head_scripts_to_body:  <head> scripts moved to the end of <body>
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import PurePath
from typing import Optional, Union

from bs4 import BeautifulSoup, Doctype, Tag

from .. import constants
from ..models.page_route import parse_page_route
from ..models.translation_model import TranslationTable

HTML_PARSER = "html.parser"


def parse_html(html_text: str) -> BeautifulSoup:
    return BeautifulSoup(html_text, HTML_PARSER)


def serialize_html(soup: BeautifulSoup) -> str:
    return str(soup)


# --------- Preloads ---------

def normalize_preloads(soup: BeautifulSoup) -> None:
    for link in soup.select('link[rel="preload"]'):
        kind = link.get("as")
        if kind == "style":
            link["rel"] = "stylesheet"
            del link["as"]
        elif kind == "font":
            link.decompose()


# --------- Title / description / keywords ---------

def apply_page_metadata(soup: BeautifulSoup, path: Union[str, PurePath],
                        translations: TranslationTable) -> bool:
    """
    Inject translated metadata for pages under cf/<category>/<type>/.
    Returns False (and leaves the page alone) when the path has no route.
    """
    route = parse_page_route(path)
    if route is None:
        return False

    text = translations.lookup(route.category, route.page_type)
    if text is not None:
        set_title(soup, constants.TITLE_TEMPLATE.format(title=text.title))
        set_meta(soup, "description", text.message)

    if soup.find("meta", attrs={"name": "keywords"}) is None:
        ensure_head(soup).append(_meta_tag(soup, "keywords", constants.DEFAULT_KEYWORDS))
    return True


def set_title(soup: BeautifulSoup, text: str) -> None:
    titles = soup.find_all("title")
    if not titles:
        title = soup.new_tag("title")
        ensure_head(soup).append(title)
        titles = [title]
    for title in titles:
        title.string = text


def set_meta(soup: BeautifulSoup, name: str, content: str) -> None:
    """Set content on every <meta name=...>, or append one to <head>."""
    metas = soup.find_all("meta", attrs={"name": name})
    if not metas:
        ensure_head(soup).append(_meta_tag(soup, name, content))
        return
    for meta in metas:
        meta["content"] = content


# --------- Cloudflare meta tags ---------

def add_platform_meta_tags(soup: BeautifulSoup, version: str,
                           build_date: Optional[str] = None) -> None:
    """
    Prepend the client-ip/ray-id/location-code/build-date/version tags.
    Tags with the same names left by an earlier run are replaced.
    """
    head = ensure_head(soup)
    for old in head.find_all("meta", attrs={"name": list(constants.PLATFORM_META_NAMES)}):
        old.decompose()

    contents = (
        constants.CLIENT_IP_TOKEN,
        constants.RAY_ID_TOKEN,
        constants.GEO_TOKEN,
        build_date or utc_timestamp(),
        version,
    )
    for i, (name, content) in enumerate(zip(constants.PLATFORM_META_NAMES, contents)):
        head.insert(2 * i, _meta_tag(soup, name, content))
        head.insert(2 * i + 1, soup.new_string("\n"))


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC with milliseconds, e.g. 2024-05-01T12:00:00.000Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# --------- Scripts ---------

def move_head_scripts_to_body(soup: BeautifulSoup) -> int:
    """
    Move every <script> in <head> to the end of <body>, keeping their order.

    Cloudflare inlines all scripts and styles into the served error page,
    which defeats the framework's deferred script loading. Scripts at the
    bottom of <body> run after the page has been parsed, like defer.
    """
    head = soup.head
    if head is None:
        return 0
    scripts = head.find_all("script")
    if not scripts:
        return 0

    for script in scripts:
        script.extract()
    body = ensure_body(soup)
    for script in scripts:
        body.append(script)
    return len(scripts)


# --------- Structure helpers ---------

def ensure_head(soup: BeautifulSoup) -> Tag:
    if soup.head is not None:
        return soup.head
    head = soup.new_tag("head")
    if soup.html is not None:
        soup.html.insert(0, head)
    else:
        pos = 1 if soup.contents and isinstance(soup.contents[0], Doctype) else 0
        soup.insert(pos, head)
    return head


def ensure_body(soup: BeautifulSoup) -> Tag:
    if soup.body is not None:
        return soup.body
    body = soup.new_tag("body")
    parent = soup.html if soup.html is not None else soup
    parent.append(body)
    return body


def _meta_tag(soup: BeautifulSoup, name: str, content: str) -> Tag:
    return soup.new_tag("meta", attrs={"name": name, "content": content})
