#!/usr/bin/env python3
"""
Jummah Directory Builder
Fetches masjid rows from SheetDB and bakes them into a static index.html
(masjid cards + JSON-LD structured data).
"""

import argparse
import sys
from html import escape
from pathlib import Path

import config
from fetcher import FetchFailure, fetch_records
from masjids import MasjidEntry, prepare
from structured_data import build_structured_data, to_json_ld

EMPTY_CARDS = '<p class="masjid-empty">No masjid data available yet.</p>'


class TemplateIOFailure(Exception):
    """Raised when the page template can't be read or the output can't be written."""


def _attr(value: str) -> str:
    return escape(value, quote=True)


def render_card(entry: MasjidEntry) -> str:
    """One <article> card for a masjid."""
    name = escape(entry.name)
    if entry.map_link != "#":
        name = f'<a href="{_attr(entry.map_link)}" target="_blank" rel="noopener">{name}</a>'
    prayers = "".join(f'<span class="masjid-prayer">{escape(p)}</span>' for p in entry.prayers)

    return f"""
      <article class="masjid-card" id="{_attr(entry.anchor)}">
        <div class="masjid-info">
          <span class="masjid-icon">🕌</span>
          <div class="masjid-text">
            <h3 class="masjid-name">{name}</h3>
            <p class="masjid-location">{escape(entry.location)}</p>
          </div>
        </div>

        <div class="masjid-right">
          <div class="masjid-time">Jummah: {escape(entry.time_label)}</div>
          <div class="masjid-prayers">{prayers}</div>
          <a href="{_attr(entry.map_link)}" target="_blank" rel="noopener" class="masjid-map">📍 Map</a>
        </div>
      </article>
      """


def render_cards(entries: list[MasjidEntry]) -> str:
    if not entries:
        return EMPTY_CARDS
    return "\n".join(render_card(e) for e in entries)


def inject(template: str, cards_html: str, json_ld: str) -> str:
    """Splice the cards and JSON-LD into the template at the first marker of each kind."""
    html = template.replace(config.CARDS_MARKER, cards_html, 1)
    return html.replace(config.JSON_LD_MARKER, f"{config.JSON_LD_MARKER}\n{json_ld}", 1)


def read_template(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateIOFailure(f"Cannot read template {path}: {e}") from e


def write_page(path: Path, html: str):
    try:
        Path(path).write_text(html, encoding="utf-8")
    except OSError as e:
        raise TemplateIOFailure(f"Cannot write {path}: {e}") from e


def build(url: str, template_path: Path, output_path: Path, fetch=fetch_records) -> int:
    """Full pipeline: SheetDB → entries → HTML + JSON-LD → index.html.

    Returns the number of masjids written.
    """
    print("📡 Fetching records from SheetDB...")
    rows = fetch(url)
    print(f"✅ Loaded {len(rows)} rows from SheetDB")

    print("⚙️ Generating HTML...")
    template = read_template(template_path)

    entries = prepare(rows, source="sheetdb")
    cards_html = render_cards(entries)
    json_ld = to_json_ld(build_structured_data(entries))

    write_page(output_path, inject(template, cards_html, json_ld))
    print(f"🎉 Build Complete → {output_path} generated!")
    return len(entries)


def parse_args(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Build the static Jummah timings page.")
    parser.add_argument("--url", default=config.API_URL, help="SheetDB endpoint")
    parser.add_argument("--template", type=Path, default=config.TEMPLATE_PATH, help="Page template")
    parser.add_argument("--output", type=Path, default=config.OUTPUT_PATH, help="Where to write the page")
    parser.add_argument("--preview", action="store_true", help="Also render og-image.png from the built page")
    return parser.parse_args(argv)


def main(argv=None):
    """
    Usage:
        python generate.py                         # build index.html
        python generate.py --output dist/index.html
        python generate.py --preview               # build + social preview image
    """
    args = parse_args(argv)

    try:
        build(args.url, args.template, args.output)
    except FetchFailure as e:
        print(f"❌ SheetDB Fetch Failed: {e}")
        sys.exit(1)
    except TemplateIOFailure as e:
        print(f"❌ Build Failed: {e}")
        sys.exit(1)

    if args.preview:
        from preview import render_preview

        render_preview(args.output, config.PREVIEW_PATH)


if __name__ == "__main__":
    main()
