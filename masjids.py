"""
Masjid records: source adapters, normalization and sorting.

Raw rows arrive from two sources that name their columns differently. Each
source gets a column map that adapts its rows into one canonical RawMasjid,
which is then normalized into display-ready Masjid values.
"""

from dataclasses import dataclass, field
from datetime import datetime, time

UNKNOWN_NAME = "Unknown Masjid"
NO_LOCATION = "Location not provided"
NO_TIME = "—"
NO_MAP = "#"

# ── Source adapters ────────────────────────────────────────────────────────

# canonical field -> column name in the source row (None = source has no such column)
SOURCES = {
    "sheetdb": {
        "id": "id",
        "name": "name",
        "location": "location",
        "area": None,
        "prayers": "prayers",
        "jummah_time": "jummah_time",
        "map_link": "map_link",
    },
    "live": {
        "id": "id",
        "name": "name",
        "location": "address",
        "area": "area",
        "prayers": "prayers",
        "jummah_time": "jummah",
        "map_link": "maps",
    },
}

TIME_FORMATS = ("%I:%M %p", "%I:%M%p", "%I %p", "%I%p", "%H:%M", "%H:%M:%S")


@dataclass(frozen=True)
class RawMasjid:
    """Canonical raw record. Values are passed through untouched and may be of any type."""
    id: object = None
    name: object = None
    location: object = None
    area: object = None
    prayers: object = None
    jummah_time: object = None
    map_link: object = None


@dataclass(frozen=True)
class Masjid:
    """A normalized record; every display field has a value."""
    id: str
    name: str
    location: str
    area: str
    prayers: tuple = field(default_factory=tuple)
    jummah_time: str = NO_TIME
    map_link: str = NO_MAP
    raw: RawMasjid = field(default_factory=RawMasjid)


def adapt_row(row, source: str = "sheetdb") -> RawMasjid:
    """Map one source row onto the canonical RawMasjid shape."""
    columns = SOURCES[source]
    if not isinstance(row, dict):
        return RawMasjid()
    values = {key: row.get(col) if col else None for key, col in columns.items()}
    return RawMasjid(**values)


def adapt_rows(rows: list, source: str = "sheetdb") -> list[RawMasjid]:
    return [adapt_row(row, source) for row in rows]


# ── Normalization ──────────────────────────────────────────────────────────

def _text(value) -> str:
    """Coerce a loosely-typed cell to a stripped string ('' for None/bools/containers)."""
    if value is None or isinstance(value, bool):
        return ""
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def capitalize(value) -> str:
    """Title-case every space-delimited word: 'AL-NOOR masjid' -> 'Al-noor Masjid'."""
    if not value or not isinstance(value, str):
        return ""
    return " ".join(w[:1].upper() + w[1:] for w in value.lower().split(" "))


def split_prayers(value) -> tuple:
    """Split 'Fajr, Dhuhr,Asr' into ('Fajr', 'Dhuhr', 'Asr'). Non-strings give ()."""
    if not value or not isinstance(value, str):
        return ()
    return tuple(p.strip() for p in value.split(","))


def normalize(raw: RawMasjid) -> Masjid:
    """Resolve every field of a raw record to a display value. Never raises."""
    return Masjid(
        id=_text(raw.id),
        name=capitalize(_text(raw.name) or UNKNOWN_NAME),
        location=_text(raw.location) or NO_LOCATION,
        area=_text(raw.area),
        prayers=split_prayers(raw.prayers),
        jummah_time=_text(raw.jummah_time) or NO_TIME,
        map_link=_text(raw.map_link) or NO_MAP,
        raw=raw,
    )


def normalize_all(raws: list[RawMasjid]) -> list[Masjid]:
    return [normalize(r) for r in raws]


# ── Sorting ────────────────────────────────────────────────────────────────

def parse_jummah_time(value) -> time | None:
    """Parse a time-of-day string like '1:30 PM' or '13:30'.

    Returns None if the value is missing or not in a recognised format.
    """
    text = _text(value)
    if not text:
        return None
    text = " ".join(text.upper().split())
    for fmt in TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return None


def jummah_sort_key(masjid: Masjid) -> time:
    # Unparsable times count as midnight so they sort first.
    return parse_jummah_time(masjid.raw.jummah_time) or time.min


def sort_by_jummah(masjids: list[Masjid]) -> list[Masjid]:
    """Stable ascending sort by Jummah time; the input list is left as is."""
    return sorted(masjids, key=jummah_sort_key)


# ── Render-agnostic entries ────────────────────────────────────────────────

@dataclass(frozen=True)
class MasjidEntry:
    """Everything a renderer needs for one masjid, already formatted."""
    anchor: str
    name: str
    badge: str
    location: str
    subtitle: str
    time_label: str
    prayers: tuple
    map_link: str
    start_time: str | None


def badge_text(raw: RawMasjid) -> str:
    name = _text(raw.name)
    return name[:2].upper() if name else "M"


def to_entry(masjid: Masjid, position: int) -> MasjidEntry:
    parsed = parse_jummah_time(masjid.raw.jummah_time)
    return MasjidEntry(
        anchor=masjid.id or f"masjid-{position}",
        name=masjid.name,
        badge=badge_text(masjid.raw),
        location=masjid.location,
        subtitle=f"{masjid.area} • {masjid.location}",
        time_label=masjid.jummah_time,
        prayers=masjid.prayers,
        map_link=masjid.map_link,
        start_time=parsed.strftime("%H:%M:%S") if parsed else None,
    )


def prepare(rows: list, source: str = "sheetdb") -> list[MasjidEntry]:
    """Full pipeline: raw rows -> adapted -> normalized -> sorted -> entries."""
    masjids = sort_by_jummah(normalize_all(adapt_rows(rows, source)))
    return [to_entry(m, i) for i, m in enumerate(masjids, start=1)]
