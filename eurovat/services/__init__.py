"""Rules engine services."""
from eurovat.services.tax_category import get_vat_origin_country, is_tier_type_subject_to_vat
from eurovat.services.vat_rates import get_standard_vat_rate, vat_may_apply
from eurovat.services.vat_resolver import VatDecision, VatScenario, get_vat_percentage, resolve_vat

__all__ = [
    "VatDecision",
    "VatScenario",
    "get_standard_vat_rate",
    "get_vat_origin_country",
    "get_vat_percentage",
    "is_tier_type_subject_to_vat",
    "resolve_vat",
    "vat_may_apply",
]
