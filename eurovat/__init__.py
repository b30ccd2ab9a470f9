"""European VAT rules: liability, rate and VAT number format checks.

Usage:
    from eurovat import get_vat_origin_country, get_vat_percentage, check_vat_number_format

    origin = get_vat_origin_country("PRODUCT", "FR", "BE")      # "FR"
    get_vat_percentage("PRODUCT", origin, "BE", False)          # Decimal("20")
    check_vat_number_format(" FR XX-999999999 ").is_valid       # True
"""
from eurovat.core.exceptions import UnknownCategoryError
from eurovat.models import (
    CategoryVatPolicy,
    CountryRecord,
    OriginSelector,
    TransactionCategory,
    VatNumberCheckResult,
)
from eurovat.services.country_reference import get_country, is_eu_member, search_countries
from eurovat.services.tax_category import get_vat_origin_country, is_tier_type_subject_to_vat
from eurovat.services.vat_rates import get_standard_vat_rate, vat_may_apply
from eurovat.services.vat_resolver import VatDecision, VatScenario, get_vat_percentage, resolve_vat
from eurovat.utils.vat import check_vat_number_format, is_valid_vat_number, normalize_vat_number

__version__ = "0.1.0"

__all__ = [
    "CategoryVatPolicy",
    "CountryRecord",
    "OriginSelector",
    "TransactionCategory",
    "UnknownCategoryError",
    "VatDecision",
    "VatNumberCheckResult",
    "VatScenario",
    "check_vat_number_format",
    "get_country",
    "get_standard_vat_rate",
    "get_vat_origin_country",
    "get_vat_percentage",
    "is_eu_member",
    "is_tier_type_subject_to_vat",
    "is_valid_vat_number",
    "normalize_vat_number",
    "resolve_vat",
    "search_countries",
    "vat_may_apply",
]
