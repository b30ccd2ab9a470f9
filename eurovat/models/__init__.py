"""Value types of the VAT engine.

Import models from here:
    from eurovat.models import TransactionCategory, CountryRecord, ...
"""
from eurovat.models.category import CategoryVatPolicy, OriginSelector, TransactionCategory
from eurovat.models.country import CountryRecord, IsoCode
from eurovat.models.vat_number import VatNumberCheckResult, VatNumberFailure

__all__ = [
    "CategoryVatPolicy",
    "CountryRecord",
    "IsoCode",
    "OriginSelector",
    "TransactionCategory",
    "VatNumberCheckResult",
    "VatNumberFailure",
]
