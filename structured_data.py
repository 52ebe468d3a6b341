"""
JSON-LD structured data for the directory page.

One @graph document: the per-masjid Event list plus the static site sections
(WebSite, BreadcrumbList, Place, CollectionPage, FAQPage).
"""

import json

import config
from masjids import MasjidEntry


def start_date(entry: MasjidEntry) -> str | None:
    """'2025-12-31T13:30:00+05:30' for a 13:30 Jummah, None if the time is unknown."""
    if not entry.start_time:
        return None
    return f"{config.REFERENCE_DATE}T{entry.start_time}{config.TZ_OFFSET}"


def build_event(entry: MasjidEntry) -> dict:
    start = start_date(entry)
    return {
        "@type": "Event",
        "name": f"Jummah Prayer at {entry.name}",
        "description": f"Jummah prayer timing for {entry.name} located at {entry.location}.",
        "eventStatus": "https://schema.org/EventScheduled",
        "eventAttendanceMode": "https://schema.org/OfflineEventAttendanceMode",
        "startDate": start,
        "endDate": start,  # short event, no separate end time in the sheet
        "image": f"{config.SITE_URL}favicon.png",
        "organizer": {
            "@type": "Organization",
            "name": entry.name,
            "url": config.SITE_URL,
        },
        "performer": {"@type": "Person", "name": "Imam (Masjid)"},
        "offers": {
            "@type": "Offer",
            "price": "0",
            "priceCurrency": config.CURRENCY,
            "availability": "https://schema.org/InStock",
            "url": f"{config.SITE_URL}#{entry.anchor}",
            "validFrom": config.OFFER_VALID_FROM,
        },
        "location": {
            "@type": "Place",
            "name": entry.name,
            "address": postal_address(entry.location),
        },
    }


def postal_address(street: str) -> dict:
    return {
        "@type": "PostalAddress",
        "streetAddress": street,
        "addressLocality": config.LOCALITY,
        "addressRegion": config.REGION,
        "addressCountry": config.COUNTRY,
    }


def build_event_list(entries: list[MasjidEntry]) -> dict:
    return {
        "@type": "ItemList",
        "@id": f"{config.SITE_URL}#masjid-list",
        "name": config.PAGE_TITLE,
        "description": config.PAGE_DESCRIPTION,
        "url": config.SITE_URL,
        "numberOfItems": len(entries),
        "itemListElement": [
            {"@type": "ListItem", "position": i, "item": build_event(entry)}
            for i, entry in enumerate(entries, start=1)
        ],
    }


def site_sections() -> list[dict]:
    """The constant, data-independent parts of the document."""
    site = config.SITE_URL
    return [
        {
            "@type": "WebSite",
            "@id": f"{site}#website",
            "name": config.SITE_NAME,
            "url": site,
            "inLanguage": "en-IN",
            "potentialAction": {
                "@type": "SearchAction",
                "target": f"{site}?q={{search_term_string}}",
                "query-input": "required name=search_term_string",
            },
        },
        {
            "@type": "BreadcrumbList",
            "itemListElement": [
                {"@type": "ListItem", "position": 1, "name": "Home", "item": site},
                {"@type": "ListItem", "position": 2, "name": config.PAGE_TITLE, "item": f"{site}#timings"},
            ],
        },
        {
            "@type": "Place",
            "@id": f"{site}#area",
            "name": f"{config.LOCALITY}, {config.REGION}",
            "geo": {"@type": "GeoCoordinates", **config.GEO},
            "address": {
                "@type": "PostalAddress",
                "addressLocality": config.LOCALITY,
                "addressRegion": config.REGION,
                "addressCountry": config.COUNTRY,
            },
        },
        {
            "@type": "CollectionPage",
            "@id": f"{site}#page",
            "name": config.PAGE_TITLE,
            "description": config.PAGE_DESCRIPTION,
            "url": site,
            "isPartOf": {"@id": f"{site}#website"},
            "about": {"@id": f"{site}#area"},
            "mainEntity": {"@id": f"{site}#masjid-list"},
        },
        {
            "@type": "FAQPage",
            "mainEntity": [
                {"@type": "Question", "name": q, "acceptedAnswer": {"@type": "Answer", "text": a}}
                for q, a in config.FAQ
            ],
        },
    ]


def build_structured_data(entries: list[MasjidEntry]) -> dict:
    return {
        "@context": "https://schema.org",
        "@graph": site_sections() + [build_event_list(entries)],
    }


def to_json_ld(document: dict) -> str:
    # "</" would close the surrounding <script> tag early.
    return json.dumps(document, indent=2, ensure_ascii=False).replace("</", "<\\/")
