"""Render the built page to a social-share preview image (og-image.png)."""

import tempfile
from pathlib import Path

from PIL import Image
from playwright.sync_api import sync_playwright

PREVIEW_SIZE = (1200, 630)
VIEWPORT = {"width": 600, "height": 315}


def render_preview(page_path, output_path, scale: int = 2) -> Path:
    """Screenshot the page's first viewport in Chromium and resize it to 1200x630."""
    page_url = Path(page_path).resolve().as_uri()
    output_path = Path(output_path)

    with tempfile.TemporaryDirectory() as tmp:
        shot = Path(tmp) / "preview_hires.png"

        with sync_playwright() as p:
            browser = p.chromium.launch()
            page = browser.new_page(viewport=VIEWPORT, device_scale_factor=scale)
            page.goto(page_url)
            page.wait_for_load_state("networkidle")
            page.screenshot(path=str(shot), full_page=False)
            browser.close()

        with Image.open(shot) as img:
            resized = img.convert("RGB").resize(PREVIEW_SIZE, Image.LANCZOS)
            resized.save(output_path)

    print(f"  ✅ Saved preview: {output_path}")
    return output_path
