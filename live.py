#!/usr/bin/env python3
"""
Live timings renderer.

Mirrors what the page does on load: fetch the sheet, render one entry per
masjid into #timings-list, and fall back to a visible error message when the
fetch fails. The page is modelled as a small element tree so the same logic
can be run (and tested) outside a browser.
"""

import argparse
import sys
from datetime import date
from html import escape

import config
from fetcher import FetchFailure, fetch_records
from masjids import MasjidEntry, prepare

NO_DATA = "No masjid data available yet."
LOAD_FAILED = "Failed to load live data."
FALLBACK_FAILED = "Unable to load live Namaz timings. Please try again."

VOID_TAGS = {"br", "img", "hr", "input", "meta", "link"}


class Element:
    """A minimal DOM node: tag, attributes, inline style, children (Elements or text)."""

    def __init__(self, tag: str, attrs: dict | None = None, children=None):
        self.tag = tag
        self.attrs = dict(attrs or {})
        self.style = {}
        self.children = []
        self.listeners = {}
        for child in _as_list(children):
            self.append(child)

    @property
    def id(self):
        return self.attrs.get("id")

    def append(self, child):
        if child is None or child == "":
            return
        self.children.append(child)

    def clear(self):
        self.children = []

    @property
    def text(self) -> str:
        return "".join(c if isinstance(c, str) else c.text for c in self.children)

    @text.setter
    def text(self, value: str):
        self.children = [str(value)]

    def add_event_listener(self, event: str, handler):
        self.listeners.setdefault(event, []).append(handler)

    def dispatch(self, event: str):
        for handler in self.listeners.get(event, []):
            handler()

    def iter(self):
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.iter()

    def find_all(self, class_name: str) -> list["Element"]:
        return [e for e in self.iter() if class_name in e.attrs.get("class", "").split()]

    def to_html(self) -> str:
        attrs = dict(self.attrs)
        if self.style:
            attrs["style"] = "; ".join(f"{k}: {v}" for k, v in self.style.items())
        attr_text = "".join(f' {k}="{escape(str(v), quote=True)}"' for k, v in attrs.items())
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attr_text}>"
        inner = "".join(escape(c) if isinstance(c, str) else c.to_html() for c in self.children)
        return f"<{self.tag}{attr_text}>{inner}</{self.tag}>"


def _as_list(children) -> list:
    if children is None:
        return []
    if isinstance(children, (list, tuple)):
        return list(children)
    return [children]


def el(tag: str, attrs: dict | None = None, children=None) -> Element:
    return Element(tag, attrs, children)


class Page:
    """A document: a root element plus id lookup."""

    def __init__(self, root: Element):
        self.root = root

    def get_element_by_id(self, element_id: str) -> Element | None:
        for node in self.root.iter():
            if node.id == element_id:
                return node
        return None


def page_skeleton() -> Page:
    """The anchors the live script expects on index.html."""
    return Page(el("body", {}, [
        el("div", {"id": "notify-banner", "class": "notify-banner"}, [
            "Timings are verified every Thursday.",
            el("button", {"id": "close-banner", "type": "button"}, "×"),
        ]),
        el("section", {"id": "timings"}, [
            el("div", {"id": "seo-fallback"}, "Loading Jummah timings for Noida masjids..."),
            el("div", {"id": "timings-list"}),
        ]),
        el("footer", {}, ["© ", el("span", {"id": "year"}), " PrayerDetails"]),
    ]))


def render_entry(entry: MasjidEntry) -> Element:
    badge = el("div", {"class": "masjid-badge"}, entry.badge)
    title = el("h3", {"class": "masjid-title"}, entry.name)
    sub = el("div", {"class": "masjid-sub"}, entry.subtitle)

    left = el("div", {"class": "masjid-meta"}, [
        badge,
        el("div", {"class": "masjid-body"}, [title, sub]),
    ])

    time_label = el("div", {"class": "masjid-time"}, entry.time_label)
    map_btn = el("a", {
        "class": "masjid-map",
        "href": entry.map_link,
        "target": "_blank",
        "rel": "noopener noreferrer",
    }, "Open in Maps")

    right = el("div", {"class": "masjid-right"}, [time_label, map_btn])
    return el("div", {"class": "masjid", "role": "article", "aria-label": entry.name}, [left, right])


def render_masjids(page: Page, rows: list, source: str = "live"):
    """Replace the list contents with one entry per masjid, sorted by Jummah time."""
    timings_root = page.get_element_by_id("timings-list")
    fallback = page.get_element_by_id("seo-fallback")
    if timings_root is None:
        return

    timings_root.clear()
    if fallback is not None:
        fallback.style["display"] = "none"

    entries = prepare(rows, source=source)
    for entry in entries:
        timings_root.append(render_entry(entry))

    if not entries:
        timings_root.append(el("p", {"class": "masjid-empty"}, NO_DATA))


def show_load_error(page: Page, err: Exception):
    """Failure path: keep the fallback content and add a visible error line."""
    timings_root = page.get_element_by_id("timings-list")
    fallback = page.get_element_by_id("seo-fallback")

    if fallback is not None:
        fallback.text = FALLBACK_FAILED
    if timings_root is not None:
        timings_root.append(el("p", {"class": "masjid-error"}, LOAD_FAILED))

    print(f"❌ Load error: {err}", file=sys.stderr)


def load(page: Page, url: str = config.API_URL, fetch=fetch_records) -> bool:
    """Fetch and render. Returns False (never raises) if the fetch failed."""
    try:
        rows = fetch(url)
    except FetchFailure as e:
        show_load_error(page, e)
        return False
    render_masjids(page, rows)
    return True


def dismiss_banner(page: Page):
    banner = page.get_element_by_id("notify-banner")
    if banner is not None:
        banner.style["display"] = "none"


def on_ready(page: Page, url: str = config.API_URL, fetch=fetch_records, today: date | None = None) -> bool:
    """Wire the banner close button, stamp the footer year, then load the list."""
    close = page.get_element_by_id("close-banner")
    if close is not None:
        close.add_event_listener("click", lambda: dismiss_banner(page))

    year = page.get_element_by_id("year")
    if year is not None:
        year.text = str((today or date.today()).year)

    return load(page, url, fetch)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render the live timings list once and print it.")
    parser.add_argument("--url", default=config.API_URL, help="SheetDB endpoint")
    args = parser.parse_args(argv)

    page = page_skeleton()
    ok = on_ready(page, args.url)
    print(page.get_element_by_id("timings").to_html())
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
