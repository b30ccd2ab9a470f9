"""VAT applicability and rate resolution for a single sale.

Decision order, first match wins:

  1. Category outside VAT scope (donation, membership)  → 0
  2. Origin country has no VAT regime (non-EU)          → 0
  3. Event ticket: taxed where the event takes place    → origin rate
  4. Buyer in the origin country (domestic)             → origin rate
  5. Buyer outside the EU (export)                      → 0
  6. Business buyer in another EU country               → 0 (reverse charge)
  7. Private buyer in another EU country                → origin rate

"Origin country" is the seller's country for goods/services/support and the
event's country for tickets, i.e. what ``get_vat_origin_country`` returns.
"""
import enum
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from eurovat.models.category import OriginSelector, TransactionCategory
from eurovat.services.country_reference import is_eu_member, normalize_country_code
from eurovat.services.tax_category import CategoryLike, coerce_category, get_category_policy
from eurovat.services.vat_rates import ZERO, get_standard_vat_rate

logger = logging.getLogger(__name__)


class VatScenario(str, enum.Enum):
    """Why a given rate was chosen."""

    NOT_TAXABLE_CATEGORY = "not_taxable_category"
    NO_VAT_REGIME = "no_vat_regime"
    EVENT_LOCATION = "event_location"
    DOMESTIC = "domestic"
    EXPORT = "export"
    INTRA_EU_REVERSE_CHARGE = "intra_eu_reverse_charge"
    INTRA_EU_B2C = "intra_eu_b2c"


@dataclass(frozen=True)
class VatDecision:
    category: TransactionCategory
    origin_country: str
    buyer_country: str
    buyer_is_company: bool
    scenario: VatScenario
    rate: Decimal

    @property
    def is_charged(self) -> bool:
        return self.rate > 0


def _decide(
    category: TransactionCategory,
    origin: str,
    buyer: str,
    buyer_is_company: bool,
) -> tuple[VatScenario, Decimal]:
    policy = get_category_policy(category)
    if not policy.is_vat_relevant:
        return VatScenario.NOT_TAXABLE_CATEGORY, ZERO
    if not is_eu_member(origin):
        return VatScenario.NO_VAT_REGIME, ZERO

    origin_rate = get_standard_vat_rate(category, origin)
    if policy.origin is OriginSelector.BUYER:
        return VatScenario.EVENT_LOCATION, origin_rate
    if origin == buyer:
        return VatScenario.DOMESTIC, origin_rate
    if not is_eu_member(buyer):
        return VatScenario.EXPORT, ZERO
    if buyer_is_company:
        return VatScenario.INTRA_EU_REVERSE_CHARGE, ZERO
    return VatScenario.INTRA_EU_B2C, origin_rate


def resolve_vat(
    category: CategoryLike,
    origin_country: Optional[str],
    buyer_country: Optional[str],
    buyer_is_company: bool,
) -> VatDecision:
    """Full VAT decision for a sale: the rate plus the scenario that produced it.

    Args:
        category: Transaction category (enum member or its value)
        origin_country: Seller's country, or the event's country for tickets
        buyer_country: Buyer's country. Missing or empty counts as outside the EU,
            so goods and services resolve to EXPORT at 0%. Callers must collect
            the buyer country before charging, or VAT is under-collected.
        buyer_is_company: Whether the buyer is a business (B2B)

    Raises:
        UnknownCategoryError: if ``category`` is not a known category
    """
    cat = coerce_category(category)
    origin = normalize_country_code(origin_country)
    buyer = normalize_country_code(buyer_country)
    scenario, rate = _decide(cat, origin, buyer, bool(buyer_is_company))
    logger.debug(
        "VAT %s origin=%s buyer=%s company=%s → %s (%s%%)",
        cat.value, origin or "-", buyer or "-", buyer_is_company, scenario.value, rate,
    )
    return VatDecision(
        category=cat,
        origin_country=origin,
        buyer_country=buyer,
        buyer_is_company=bool(buyer_is_company),
        scenario=scenario,
        rate=rate,
    )


def get_vat_percentage(
    category: CategoryLike,
    origin_country: Optional[str],
    buyer_country: Optional[str],
    buyer_is_company: bool,
) -> Decimal:
    """VAT percentage to charge on a sale (e.g. ``Decimal("21")``), 0 when none."""
    return resolve_vat(category, origin_country, buyer_country, buyer_is_company).rate
