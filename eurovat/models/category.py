"""Transaction categories and their VAT policy."""
import enum
from dataclasses import dataclass


class TransactionCategory(str, enum.Enum):
    """Kind of thing being sold."""

    PRODUCT = "PRODUCT"
    SERVICE = "SERVICE"
    SUPPORT = "SUPPORT"
    TICKET = "TICKET"
    DONATION = "DONATION"
    MEMBERSHIP = "MEMBERSHIP"


class OriginSelector(str, enum.Enum):
    """Which party's country governs the VAT rate."""

    SELLER = "SELLER"
    BUYER = "BUYER"  # event location, for tickets


@dataclass(frozen=True)
class CategoryVatPolicy:
    """Whether a category carries VAT, and whose country sets the rate."""

    is_vat_relevant: bool
    origin: OriginSelector
