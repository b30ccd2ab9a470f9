"""
Standard VAT rates of EU member states, in percent.
Reduced rates are not modelled. Rate changes are data updates: edit the
table below and bump the version.
"""
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional

from eurovat.services.country_reference import EU_COUNTRY_CODES, is_eu_member, normalize_country_code
from eurovat.services.tax_category import CategoryLike, is_tier_type_subject_to_vat

ZERO = Decimal("0")

STANDARD_VAT_RATES: Mapping[str, Decimal] = MappingProxyType({
    "AT": Decimal("20"),
    "BE": Decimal("21"),
    "BG": Decimal("20"),
    "CY": Decimal("19"),
    "CZ": Decimal("21"),
    "DE": Decimal("19"),
    "DK": Decimal("25"),
    "EE": Decimal("24"),    # since 2025-07-01
    "ES": Decimal("21"),
    "FI": Decimal("25.5"),  # since 2024-09-01
    "FR": Decimal("20"),
    "GR": Decimal("24"),
    "HR": Decimal("25"),
    "HU": Decimal("27"),
    "IE": Decimal("23"),
    "IT": Decimal("22"),
    "LT": Decimal("21"),
    "LU": Decimal("17"),
    "LV": Decimal("21"),
    "MT": Decimal("18"),
    "NL": Decimal("21"),
    "PL": Decimal("23"),
    "PT": Decimal("23"),
    "RO": Decimal("21"),    # since 2025-08-01
    "SE": Decimal("25"),
    "SI": Decimal("22"),
    "SK": Decimal("23"),    # since 2025-01-01
})

_unknown = set(STANDARD_VAT_RATES) - EU_COUNTRY_CODES
if _unknown:
    raise RuntimeError(f"VAT rates declared for non-EU countries: {sorted(_unknown)}")


def get_standard_vat_rate(category: CategoryLike, country: Optional[str]) -> Decimal:
    """Standard rate for ``country``; 0 for untaxed categories and unknown countries."""
    if not is_tier_type_subject_to_vat(category):
        return ZERO
    return STANDARD_VAT_RATES.get(normalize_country_code(country), ZERO)


def vat_may_apply(category: CategoryLike, country: Optional[str]) -> bool:
    """Coarse pre-check: taxable category sold from/in an EU member state."""
    return is_tier_type_subject_to_vat(category) and is_eu_member(country)
