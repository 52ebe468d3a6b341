from datetime import time

import pytest

from masjids import (
    NO_LOCATION,
    NO_MAP,
    NO_TIME,
    UNKNOWN_NAME,
    RawMasjid,
    adapt_row,
    capitalize,
    normalize,
    parse_jummah_time,
    prepare,
    sort_by_jummah,
    split_prayers,
)


def test_capitalize_title_cases_each_word():
    assert capitalize("AL-NOOR masjid COMPLEX") == "Al-noor Masjid Complex"
    assert capitalize("baitul noor") == "Baitul Noor"


@pytest.mark.parametrize("value", [None, "", 42, 3.5, ["x"]])
def test_capitalize_non_strings_give_empty(value):
    assert capitalize(value) == ""


def test_capitalize_keeps_double_spaces():
    assert capitalize("masjid  e  noor") == "Masjid  E  Noor"


@pytest.mark.parametrize("value", [None, "", 7, {"a": 1}])
def test_split_prayers_empty_for_missing_or_non_string(value):
    assert split_prayers(value) == ()


def test_split_prayers_trims_and_keeps_order_and_duplicates():
    assert split_prayers("Fajr, Dhuhr,Asr") == ("Fajr", "Dhuhr", "Asr")
    assert split_prayers("Jummah, Jummah") == ("Jummah", "Jummah")


def test_normalize_defaults_every_field():
    m = normalize(RawMasjid())
    assert m.name == UNKNOWN_NAME
    assert m.location == NO_LOCATION
    assert m.jummah_time == NO_TIME
    assert m.map_link == NO_MAP
    assert m.prayers == ()
    assert m.area == ""


def test_normalize_blank_strings_fall_back_to_sentinels():
    m = normalize(RawMasjid(name="   ", location="", jummah_time=" ", map_link=""))
    assert m.name == UNKNOWN_NAME
    assert m.location == NO_LOCATION
    assert m.jummah_time == NO_TIME
    assert m.map_link == NO_MAP


def test_normalize_odd_types_never_raise():
    m = normalize(RawMasjid(id=12, name=101, location=["x"], prayers=5, jummah_time=True))
    assert m.id == "12"
    assert m.name == "101"
    assert m.location == NO_LOCATION
    assert m.prayers == ()
    assert m.jummah_time == NO_TIME


def test_adapt_row_per_source_naming():
    sheet = adapt_row({"name": "a", "location": "Sector 18", "jummah_time": "1:30 PM", "map_link": "u"})
    live = adapt_row({"name": "a", "address": "Sector 18", "area": "Noida", "jummah": "1:30 PM", "maps": "u"},
                     source="live")
    assert sheet.location == live.location == "Sector 18"
    assert sheet.jummah_time == live.jummah_time == "1:30 PM"
    assert sheet.map_link == live.map_link == "u"
    assert sheet.area is None
    assert live.area == "Noida"


def test_adapt_row_ignores_non_dicts():
    assert adapt_row("garbage") == RawMasjid()


@pytest.mark.parametrize("text,expected", [
    ("1:30 PM", time(13, 30)),
    ("1:30pm", time(13, 30)),
    ("12:30 PM", time(12, 30)),
    ("13:30", time(13, 30)),
    ("13:30:00", time(13, 30)),
    ("1 PM", time(13, 0)),
])
def test_parse_jummah_time_formats(text, expected):
    assert parse_jummah_time(text) == expected


@pytest.mark.parametrize("text", [None, "", "soon", "after zuhr", 1330, "1.30", "13.30"])
def test_parse_jummah_time_unparsable(text):
    assert parse_jummah_time(text) is None


def _masjid(name, t):
    return normalize(RawMasjid(name=name, jummah_time=t))


def test_sort_puts_unparsable_first_then_ascending():
    records = [_masjid("a", "1:00 PM"), _masjid("b", "soon"), _masjid("c", "12:30 PM")]
    assert [m.name for m in sort_by_jummah(records)] == ["B", "C", "A"]


def test_sort_is_stable_for_ties_and_missing():
    records = [
        _masjid("one", "1:30 PM"),
        _masjid("two", None),
        _masjid("three", "13:30"),
        _masjid("four", "later"),
    ]
    assert [m.name for m in sort_by_jummah(records)] == ["Two", "Four", "One", "Three"]


def test_sort_does_not_mutate_input():
    records = [_masjid("a", "2:00 PM"), _masjid("b", "1:00 PM")]
    sort_by_jummah(records)
    assert [m.name for m in records] == ["A", "B"]


def test_prepare_builds_entries():
    entries = prepare([
        {"id": "m2", "name": "baitul noor", "location": "Sector 62", "jummah_time": "1:15 PM"},
        {"name": "jama masjid", "jummah_time": "12:45"},
    ])
    first, second = entries
    assert first.name == "Jama Masjid"
    assert first.anchor == "masjid-1"
    assert first.start_time == "12:45:00"
    assert second.anchor == "m2"
    assert second.badge == "BA"
    assert second.time_label == "1:15 PM"
    assert second.start_time == "13:15:00"


def test_prepare_badge_defaults_to_m():
    (entry,) = prepare([{}])
    assert entry.badge == "M"
    assert entry.name == UNKNOWN_NAME
