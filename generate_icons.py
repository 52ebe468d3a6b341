"""Generate the favicon and touch icons from masjid_icon.png."""

import argparse
from pathlib import Path

from PIL import Image

import config

ICON_SRC = config.ROOT_DIR / "masjid_icon.png"
ICONS_DIR = config.ROOT_DIR / "icons"
BG_COLOR = (15, 81, 50)  # #0f5132, matches the page header

# filename -> (size, padding fraction)
ICON_SPECS = {
    "icon-192.png": (192, 0.0),
    "icon-512.png": (512, 0.0),
    "apple-touch-icon.png": (180, 0.1),
}
FAVICON_SIZE = 96


def create_icon(src_img: Image.Image, size: int, padding_fraction: float = 0.0) -> Image.Image:
    """Square icon with the source image centred on the site background."""
    canvas = Image.new("RGBA", (size, size), (*BG_COLOR, 255))
    inner_size = int(size * (1 - padding_fraction * 2))

    resized = src_img.convert("RGBA").resize((inner_size, inner_size), Image.LANCZOS)
    offset = (size - inner_size) // 2
    canvas.paste(resized, (offset, offset), resized)
    return canvas


def generate_icons(src_path: Path = ICON_SRC, icons_dir: Path = ICONS_DIR,
                   favicon_path: Path = config.ROOT_DIR / "favicon.png") -> list[Path]:
    """Write favicon.png (the image the structured data points at) plus the PWA icons."""
    icons_dir.mkdir(parents=True, exist_ok=True)
    written = []

    with Image.open(src_path) as src:
        create_icon(src, FAVICON_SIZE).save(favicon_path)
        written.append(favicon_path)
        for name, (size, padding) in ICON_SPECS.items():
            path = icons_dir / name
            create_icon(src, size, padding_fraction=padding).save(path)
            written.append(path)

    return written


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate site icons.")
    parser.add_argument("--src", type=Path, default=ICON_SRC, help="Source icon image")
    args = parser.parse_args(argv)

    print("Generated icons:")
    for path in generate_icons(args.src):
        with Image.open(path) as img:
            print(f"  {path.name}: {img.size[0]}x{img.size[1]}")


if __name__ == "__main__":
    main()
