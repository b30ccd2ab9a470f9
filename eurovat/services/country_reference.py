"""
Country reference data for VAT purposes.
Covers the 27 EU member states, plus the non-EU European countries whose VAT
numbers we recognize (GB, CH, NO, RS, RU). Any other country (US, ...) is
simply unknown: not an EU member, no VAT number format.
"""
from types import MappingProxyType
from typing import Mapping, Optional

from eurovat.models.country import CountryRecord, IsoCode

# Format: (alpha-2, alpha-3, numeric, name, EU member, VAT prefix | None, VAT number pattern)
# The pattern applies to the normalized number with its prefix removed.
_COUNTRY_ROWS: list[tuple[str, str, str, str, bool, Optional[str], str]] = [
    # ── EU member states ──
    ("AT", "AUT", "040", "Austria", True, None, r"U\d{8}"),
    ("BE", "BEL", "056", "Belgium", True, None, r"[01]?\d{9}"),
    ("BG", "BGR", "100", "Bulgaria", True, None, r"\d{9,10}"),
    ("CY", "CYP", "196", "Cyprus", True, None, r"\d{8}[A-Z]"),
    ("CZ", "CZE", "203", "Czech Republic", True, None, r"\d{8,10}"),
    ("DE", "DEU", "276", "Germany", True, None, r"\d{9}"),
    ("DK", "DNK", "208", "Denmark", True, None, r"\d{8}"),
    ("EE", "EST", "233", "Estonia", True, None, r"\d{9}"),
    ("ES", "ESP", "724", "Spain", True, None, r"[A-Z]\d{8}|\d{8}[A-Z]|[A-Z]\d{7}[A-Z]"),
    ("FI", "FIN", "246", "Finland", True, None, r"\d{8}"),
    ("FR", "FRA", "250", "France", True, None, r"[0-9A-HJ-NP-Z]{2}\d{9}"),
    ("GR", "GRC", "300", "Greece", True, "EL", r"\d{9}"),
    ("HR", "HRV", "191", "Croatia", True, None, r"\d{11}"),
    ("HU", "HUN", "348", "Hungary", True, None, r"\d{8}"),
    ("IE", "IRL", "372", "Ireland", True, None, r"\d{7}[A-W][A-IW]?|\d[A-Z]\d{5}[A-W]"),
    ("IT", "ITA", "380", "Italy", True, None, r"\d{11}"),
    ("LT", "LTU", "440", "Lithuania", True, None, r"\d{9}|\d{12}"),
    ("LU", "LUX", "442", "Luxembourg", True, None, r"\d{8}"),
    ("LV", "LVA", "428", "Latvia", True, None, r"\d{11}"),
    ("MT", "MLT", "470", "Malta", True, None, r"\d{8}"),
    ("NL", "NLD", "528", "Netherlands", True, None, r"\d{9}B\d{2}"),
    ("PL", "POL", "616", "Poland", True, None, r"\d{10}"),
    ("PT", "PRT", "620", "Portugal", True, None, r"\d{9}"),
    ("RO", "ROU", "642", "Romania", True, None, r"\d{2,10}"),
    ("SE", "SWE", "752", "Sweden", True, None, r"\d{10}01"),
    ("SI", "SVN", "705", "Slovenia", True, None, r"\d{8}"),
    ("SK", "SVK", "703", "Slovakia", True, None, r"\d{10}"),

    # ── Non-EU ──
    ("GB", "GBR", "826", "United Kingdom", False, None, r"\d{9}|\d{12}|GD\d{3}|HA\d{3}"),
    ("CH", "CHE", "756", "Switzerland", False, None, r"E\d{9}(MWST|TVA|IVA)?"),
    ("NO", "NOR", "578", "Norway", False, None, r"\d{9}(MVA)?"),
    ("RS", "SRB", "688", "Serbia", False, None, r"\d{9}"),
    ("RU", "RUS", "643", "Russia", False, None, r"\d{10}|\d{12}"),
]


def _build_registry(
    rows: list[tuple[str, str, str, str, bool, Optional[str], str]],
) -> tuple[Mapping[str, CountryRecord], Mapping[str, CountryRecord]]:
    by_code: dict[str, CountryRecord] = {}
    by_prefix: dict[str, CountryRecord] = {}
    for short, long, numeric, name, is_eu, prefix, pattern in rows:
        record = CountryRecord(
            iso_code=IsoCode(short=short, long=long, numeric=numeric),
            name=name,
            is_eu_member=is_eu,
            vat_prefix=prefix,
            vat_number_pattern=pattern,
        )
        if short in by_code:
            raise ValueError(f"Duplicate country code in registry: {short}")
        if record.number_prefix in by_prefix:
            raise ValueError(f"Duplicate VAT prefix in registry: {record.number_prefix}")
        by_code[short] = record
        by_prefix[record.number_prefix] = record
    return MappingProxyType(by_code), MappingProxyType(by_prefix)


COUNTRY_REGISTRY, _COUNTRIES_BY_VAT_PREFIX = _build_registry(_COUNTRY_ROWS)

EU_COUNTRY_CODES: frozenset[str] = frozenset(
    code for code, record in COUNTRY_REGISTRY.items() if record.is_eu_member
)


def normalize_country_code(code: Optional[str]) -> str:
    """Strip + uppercase. ``None`` becomes an empty string."""
    return (code or "").strip().upper()


def get_country(code: Optional[str]) -> Optional[CountryRecord]:
    """Registry entry for an alpha-2 code, or None if unsupported."""
    return COUNTRY_REGISTRY.get(normalize_country_code(code))


def get_country_by_vat_prefix(prefix: Optional[str]) -> Optional[CountryRecord]:
    """Registry entry for a VAT number prefix (``EL`` for Greece, else alpha-2)."""
    return _COUNTRIES_BY_VAT_PREFIX.get(normalize_country_code(prefix))


def is_eu_member(code: Optional[str]) -> bool:
    return normalize_country_code(code) in EU_COUNTRY_CODES


def search_countries(
    query: str = "",
    eu_only: bool = False,
    limit: int = 20,
) -> list[dict[str, str]]:
    """Search countries by alpha-2/alpha-3 code or name, optionally EU members only."""
    q = query.lower().strip()

    records = [r for r in COUNTRY_REGISTRY.values() if r.is_eu_member or not eu_only]

    results = []
    for record in records:
        iso = record.iso_code
        if not q or q in (iso.short.lower(), iso.long.lower()) or q in record.name.lower():
            results.append({"code": iso.short, "name": record.name})
    return results[:max(limit, 0)]
