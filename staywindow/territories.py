"""Counted-territory registry: Schengen members, open-border microstates, common exclusions.

Membership is treated as time-invariant. ``since`` is informational only.
"""
from staywindow.schemas.territory import TerritoryInfo, TerritoryKind

REGISTRY_VERSION = "2025-01-07"
REGISTRY_SOURCE = "https://home-affairs.ec.europa.eu/policies/schengen-borders-and-visa/schengen-area_en"


def _member(code: str, name: str, since: str) -> TerritoryInfo:
    return TerritoryInfo(code=code, name=name, kind=TerritoryKind.member, since=since)


def _microstate(code: str, name: str, note: str) -> TerritoryInfo:
    return TerritoryInfo(code=code, name=name, kind=TerritoryKind.microstate, note=note)


def _excluded(code: str, name: str, note: str) -> TerritoryInfo:
    return TerritoryInfo(code=code, name=name, kind=TerritoryKind.excluded, note=note)


TERRITORIES: tuple[TerritoryInfo, ...] = (
    _member("AT", "Austria", "1997-12-01"),
    _member("BE", "Belgium", "1995-03-26"),
    _member("BG", "Bulgaria", "2025-01-01"),
    _member("HR", "Croatia", "2023-01-01"),
    _member("CZ", "Czech Republic", "2007-12-21"),
    _member("DK", "Denmark", "2001-03-25"),
    _member("EE", "Estonia", "2007-12-21"),
    _member("FI", "Finland", "2001-03-25"),
    _member("FR", "France", "1995-03-26"),
    _member("DE", "Germany", "1995-03-26"),
    _member("GR", "Greece", "2000-01-01"),
    _member("HU", "Hungary", "2007-12-21"),
    _member("IS", "Iceland", "2001-03-25"),
    _member("IT", "Italy", "1997-10-26"),
    _member("LV", "Latvia", "2007-12-21"),
    _member("LI", "Liechtenstein", "2011-12-19"),
    _member("LT", "Lithuania", "2007-12-21"),
    _member("LU", "Luxembourg", "1995-03-26"),
    _member("MT", "Malta", "2007-12-21"),
    _member("NL", "Netherlands", "1995-03-26"),
    _member("NO", "Norway", "2001-03-25"),
    _member("PL", "Poland", "2007-12-21"),
    _member("PT", "Portugal", "1995-03-26"),
    _member("RO", "Romania", "2025-01-01"),
    _member("SK", "Slovakia", "2007-12-21"),
    _member("SI", "Slovenia", "2007-12-21"),
    _member("ES", "Spain", "1995-03-26"),
    _member("SE", "Sweden", "2001-03-25"),
    _member("CH", "Switzerland", "2008-12-12"),
    # No border controls with the surrounding member states: time here counts
    _microstate("MC", "Monaco", "Open border with France"),
    _microstate("VA", "Vatican City", "Open border with Italy"),
    _microstate("SM", "San Marino", "Open border with Italy"),
    _microstate("AD", "Andorra", "Open borders with France and Spain"),
    _excluded("IE", "Ireland", "EU member, opted out of Schengen"),
    _excluded("CY", "Cyprus", "EU member, not yet implemented Schengen"),
    _excluded("GB", "United Kingdom", "Not EU, not Schengen"),
)

TERRITORIES_BY_CODE: dict[str, TerritoryInfo] = {t.code: t for t in TERRITORIES}

# Alternative names, upper-cased, for name-based lookup
NAME_ALIASES: dict[str, str] = {
    "CZECHIA": "CZ",
    "CZECH": "CZ",
    "HOLLAND": "NL",
    "THE NETHERLANDS": "NL",
    "HELLENIC REPUBLIC": "GR",
    "SWISS CONFEDERATION": "CH",
    "SLOVAK REPUBLIC": "SK",
    "FRENCH REPUBLIC": "FR",
    "FEDERAL REPUBLIC OF GERMANY": "DE",
    "ITALIAN REPUBLIC": "IT",
    "PORTUGUESE REPUBLIC": "PT",
    "KINGDOM OF SPAIN": "ES",
    "KINGDOM OF THE NETHERLANDS": "NL",
    "GRAND DUCHY OF LUXEMBOURG": "LU",
    "PRINCIPALITY OF LIECHTENSTEIN": "LI",
    "PRINCIPALITY OF MONACO": "MC",
    "PRINCIPALITY OF ANDORRA": "AD",
    "REPUBLIC OF SAN MARINO": "SM",
    "HOLY SEE": "VA",
    "STATE OF VATICAN CITY": "VA",
    "REPUBLIC OF IRELAND": "IE",
    "EIRE": "IE",
    "REPUBLIC OF CYPRUS": "CY",
    "UK": "GB",
    "GREAT BRITAIN": "GB",
    "ENGLAND": "GB",
    "SCOTLAND": "GB",
    "WALES": "GB",
    "NORTHERN IRELAND": "GB",
}

NAME_TO_CODE: dict[str, str] = {t.name.upper(): t.code for t in TERRITORIES} | NAME_ALIASES

DEFAULT_COUNTED_TERRITORIES: frozenset[str] = frozenset(
    t.code for t in TERRITORIES if t.kind in (TerritoryKind.member, TerritoryKind.microstate)
)
