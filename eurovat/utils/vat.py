"""VAT number validation and normalization.

Format check only: a known country prefix followed by a remainder that
matches that country's pattern. Checksums and registration status (VIES)
are not verified.
"""
import logging
import re
from typing import Optional

from eurovat.models.vat_number import VatNumberCheckResult, VatNumberFailure
from eurovat.services.country_reference import get_country_by_vat_prefix

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[^A-Za-z0-9]")


def normalize_vat_number(raw: Optional[str]) -> str:
    """Strip spaces, dots, dashes and any other separator; uppercase."""
    return _SEPARATORS.sub("", raw or "").upper()


def check_vat_number_format(raw: Optional[str]) -> VatNumberCheckResult:
    """Validate and normalize a VAT number.

    Never raises: any input yields a result whose ``value`` is the normalized
    string. ``country`` is only set for valid numbers.

    Examples:
        >>> check_vat_number_format(" FR XX-999999999 ").value
        'FRXX999999999'
        >>> check_vat_number_format("xxx").is_valid
        False
    """
    value = normalize_vat_number(raw)

    country = get_country_by_vat_prefix(value[:2]) if len(value) >= 2 else None
    if country is None:
        _log_rejection(value, VatNumberFailure.UNRECOGNIZED_PREFIX)
        return VatNumberCheckResult(value=value, is_valid=False)

    if not country.matches_vat_number(value[2:]):
        _log_rejection(value, VatNumberFailure.MALFORMED_NUMBER)
        return VatNumberCheckResult(value=value, is_valid=False)

    return VatNumberCheckResult(value=value, is_valid=True, country=country)


def is_valid_vat_number(raw: Optional[str]) -> bool:
    return check_vat_number_format(raw).is_valid


def _log_rejection(value: str, reason: VatNumberFailure) -> None:
    logger.debug("VAT number %r rejected: %s", value, reason.value)
