"""
Site configuration for the Jummah directory.

Everything here can be overridden from the environment or a .env file in the
project root (see load_env).
"""

import os
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent


def load_env(env_file: Path = ROOT_DIR / ".env"):
    """Load a .env file into os.environ without overriding variables already set."""
    if not env_file.exists():
        return
    with open(env_file, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, _, value = line.partition("=")
                os.environ.setdefault(key.strip(), value.strip())


load_env()

# ── Data source ────────────────────────────────────────────────────────────

API_URL = os.environ.get("MASJID_API_URL", "https://sheetdb.io/api/v1/6dmklr71ru3mu")
FETCH_TIMEOUT = float(os.environ.get("FETCH_TIMEOUT", "30"))

# ── Build paths ────────────────────────────────────────────────────────────

TEMPLATE_PATH = Path(os.environ.get("TEMPLATE_PATH", str(ROOT_DIR / "templates" / "index_template.html")))
OUTPUT_PATH = Path(os.environ.get("OUTPUT_PATH", str(ROOT_DIR / "index.html")))
PREVIEW_PATH = Path(os.environ.get("PREVIEW_PATH", str(ROOT_DIR / "og-image.png")))

# Injection anchors in the template
CARDS_MARKER = "<!--MASJID_DATA-->"
JSON_LD_MARKER = '<script id="json-ld" type="application/ld+json">'

# ── Site identity ──────────────────────────────────────────────────────────

SITE_URL = os.environ.get("SITE_URL", "https://prayerdetails.github.io/")
SITE_NAME = "PrayerDetails"
PAGE_TITLE = "Noida Jummah Prayer Timings"
PAGE_DESCRIPTION = "Verified and updated Jummah timings for Masjids in Noida & NCR."

# ── Region / locale ────────────────────────────────────────────────────────

# Events are pinned to one Friday; only the time of day varies per masjid.
REFERENCE_DATE = "2025-12-31"
TZ_OFFSET = "+05:30"
OFFER_VALID_FROM = "2025-01-01T00:00:00+05:30"

LOCALITY = "Noida"
REGION = "Uttar Pradesh"
COUNTRY = "IN"
CURRENCY = "INR"
GEO = {"latitude": 28.5355, "longitude": 77.3910}

FAQ = [
    (
        "What time is Jummah prayer in Noida?",
        "Most masjids in Noida hold Jummah between 1:00 PM and 2:00 PM. "
        "Check the list above for the exact time at each masjid.",
    ),
    (
        "How often are these timings updated?",
        "Timings are rebuilt from our verified sheet every time the site is published.",
    ),
    (
        "Can I suggest a masjid or correct a timing?",
        "Yes. Use the contact link at the bottom of the page to send a new masjid or a correction.",
    ),
    (
        "Do these timings change in winter and summer?",
        "Some masjids shift Jummah with the season. The list always shows the latest time we have.",
    ),
]
