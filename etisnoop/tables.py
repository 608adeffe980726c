"""Lookup tables for languages, announcements, programme types, DSCTy and CA modes."""

from __future__ import annotations

_RESERVED_NATIONAL = "Reserved for national assignment"
_RFU_LOWER = "rfu"

_LANGUAGE_NAMES: tuple[str, ...] = (
    "Unknown/not applicable",
    "Albanian", "Breton", "Catalan", "Croatian", "Welsh", "Czech", "Danish",
    "German", "English", "Spanish", "Esperanto", "Estonian", "Basque",
    "Faroese", "French", "Frisian", "Irish", "Gaelic", "Galician",
    "Icelandic", "Italian", "Lappish", "Latin", "Latvian", "Luxembourgian",
    "Lithuanian", "Hungarian", "Maltese", "Dutch", "Norwegian", "Occitan",
    "Polish", "Portuguese", "Romanian", "Romansh", "Serbian", "Slovak",
    "Slovene", "Finnish", "Swedish", "Turkish", "Flemish", "Walloon",
    *([_RFU_LOWER] * 4),
    *([_RESERVED_NATIONAL] * 16),
    "Background sound/clean feed",
    *([_RFU_LOWER] * 4),
    "Zulu", "Vietnamese", "Uzbek", "Urdu", "Ukranian", "Thai", "Telugu",
    "Tatar", "Tamil", "Tadzhik", "Swahili", "Sranan Tongo", "Somali",
    "Sinhalese", "Shona", "Serbo-Croat", "Rusyn", "Russian", "Quechua",
    "Pushtu", "Punjabi", "Persian", "Papiamento", "Oriya", "Nepali",
    "Ndebele", "Marathi", "Moldavian", "Malaysian", "Malagasay",
    "Macedonian", "Laotian", "Korean", "Khmer", "Kazakh", "Kannada",
    "Japanese", "Indonesian", "Hindi", "Hebrew", "Hausa", "Gurani",
    "Gujurati", "Greek", "Georgian", "Fulani", "Dari", "Chuvash", "Chinese",
    "Burmese", "Bulgarian", "Bengali", "Belorussian", "Bambora",
    "Azerbaijani", "Assamese", "Armenian", "Arabic", "Amharic",
)

# FIG 0/18 and 0/19 announcement types (ETSI TS 101 756 tables 14 and 15)
_ANNOUNCEMENT_TYPES: tuple[str, ...] = (
    "Alarm", "Road Traffic flash", "Transport flash", "Warning/Service",
    "News flash", "Area weather flash", "Event announcement", "Special event",
    "Programme Information", "Sport report", "Financial report",
    *(["Reserved for future definition"] * 5),
)

_NOT_USED = ("Not used", "Not used")

# FIG 0/17 programme type codes (ETSI TS 101 756 tables 12 and 13)
_PROGRAMME_TYPES: tuple[tuple[str, ...], ...] = (
    (
        "No programme type", "News", "Current Affairs", "Information",
        "Sport", "Education", "Drama", "Culture", "Science", "Varied",
        "Pop Music", "Rock Music", "Easy Listening Music", "Light Classical",
        "Serious Classical", "Other Music", "Weather/meteorology",
        "Finance/Business", "Children's programmes", "Social Affairs",
        "Religion", "Phone In", "Travel", "Leisure", "Jazz Music",
        "Country Music", "National Music", "Oldies Music", "Folk Music",
        "Documentary", *_NOT_USED,
    ),
    (
        "No program type", "News", "Information", "Sports", "Talk", "Rock",
        "Classic Rock", "Adult Hits", "Soft Rock", "Top 40", "Country",
        "Oldies", "Soft", "Nostalgia", "Jazz", "Classical", "Rhythm and Blues",
        "Soft Rhythm and Blues", "Foreign Language", "Religious Music",
        "Religious Talk", "Personality", "Public", "College",
        *([_RFU_LOWER] * 5), "Weather", *_NOT_USED,
    ),
)


def _dscty_table() -> tuple[str, ...]:
    # ETSI TS 101 756 table 2
    table = ["Rfu"] * 64
    named = {
        0: "Unspecified data",
        1: "Traffic Message Channel (TMC)",
        2: "Emergency Warning System (EWS)",
        3: "Interactive Text Transmission System (ITTS)",
        4: "Paging",
        5: "Transparent Data Channel (TDC)",
        24: "MPEG-2 Transport Stream, see ETSI TS 102 427",
        59: "Embedded IP packets",
        60: "Multimedia Object Transfer (MOT)",
        61: "Proprietary service: no DSCTy signalled",
        62: "Not used",
        63: "Not used",
    }
    for index, name in named.items():
        table[index] = name
    return tuple(table)


_DSCTY_TYPES = _dscty_table()

# ETSI TS 102 367 5.4.1 Conditional Access Mode, used in FIG 0/3
_CA_MODES: tuple[str, ...] = (
    "Sub-channel CA", "Data Group CA", "MOT CA", "proprietary CA",
    *(["reserved"] * 4),
)


def _lookup(table: tuple[str, ...], index: int, what: str) -> str:
    if not 0 <= index < len(table):
        raise ValueError(f"Invalid {what}: {index}")
    return table[index]


def get_language_name(language_code: int) -> str:
    """Return the language name for a DAB language code."""
    if not 0 <= language_code < len(_LANGUAGE_NAMES):
        raise ValueError("Invalid language_code!")
    return _LANGUAGE_NAMES[language_code]


def get_announcement_type(announcement_type: int) -> str:
    """Return the name of an announcement type (0 to 15)."""
    return _lookup(_ANNOUNCEMENT_TYPES, announcement_type, "announcement type")


def get_programme_type(int_table_id: int, pty: int) -> str:
    """Return the programme type name from an international table id (1 or 2)."""
    if not 1 <= int_table_id <= len(_PROGRAMME_TYPES):
        return "unknown international table Id"
    table = _PROGRAMME_TYPES[int_table_id - 1]
    if not 0 <= pty < len(table):
        return "invalid programme type"
    return table[pty]


def get_dscty_type(dscty: int) -> str:
    """Return the name of a data service component type (0 to 63)."""
    return _lookup(_DSCTY_TYPES, dscty, "DSCTy")


def get_ca_mode(ca_mode: int) -> str:
    """Return the name of a conditional access mode (0 to 7)."""
    return _lookup(_CA_MODES, ca_mode, "CA mode")