"""Which transaction categories are subject to VAT, and whose country governs them.

Goods, services and support are taxed where the seller is established.
Event tickets are taxed where the event takes place. Donations and
memberships are outside the scope of VAT.
"""
from types import MappingProxyType
from typing import Mapping, Optional, Union

from eurovat.core.exceptions import UnknownCategoryError
from eurovat.models.category import CategoryVatPolicy, OriginSelector, TransactionCategory
from eurovat.services.country_reference import is_eu_member, normalize_country_code

CategoryLike = Union[TransactionCategory, str]

CATEGORY_VAT_POLICIES: Mapping[TransactionCategory, CategoryVatPolicy] = MappingProxyType({
    TransactionCategory.PRODUCT: CategoryVatPolicy(True, OriginSelector.SELLER),
    TransactionCategory.SERVICE: CategoryVatPolicy(True, OriginSelector.SELLER),
    TransactionCategory.SUPPORT: CategoryVatPolicy(True, OriginSelector.SELLER),
    TransactionCategory.TICKET: CategoryVatPolicy(True, OriginSelector.BUYER),
    TransactionCategory.DONATION: CategoryVatPolicy(False, OriginSelector.SELLER),
    TransactionCategory.MEMBERSHIP: CategoryVatPolicy(False, OriginSelector.SELLER),
})

_missing = set(TransactionCategory) - set(CATEGORY_VAT_POLICIES)
if _missing:
    raise RuntimeError(f"No VAT policy declared for: {sorted(c.value for c in _missing)}")


def coerce_category(category: CategoryLike) -> TransactionCategory:
    """Accept an enum member or its value ("PRODUCT"). Anything else is a caller bug."""
    if isinstance(category, TransactionCategory):
        return category
    try:
        return TransactionCategory(category)
    except ValueError:
        raise UnknownCategoryError(category) from None


def get_category_policy(category: CategoryLike) -> CategoryVatPolicy:
    return CATEGORY_VAT_POLICIES[coerce_category(category)]


def is_tier_type_subject_to_vat(category: CategoryLike) -> bool:
    """True if sales of this category carry VAT at all."""
    return get_category_policy(category).is_vat_relevant


def get_vat_origin_country(
    category: CategoryLike,
    seller_country: Optional[str],
    buyer_country: Optional[str],
) -> Optional[str]:
    """Country whose VAT rate governs the transaction.

    Seller's country for goods/services/support, event (buyer side) country
    for tickets. Returns None when the category is not taxable or when that
    country has no VAT regime (outside the EU).
    """
    policy = get_category_policy(category)
    if not policy.is_vat_relevant:
        return None
    if policy.origin is OriginSelector.BUYER:
        origin = normalize_country_code(buyer_country)
    else:
        origin = normalize_country_code(seller_country)
    if not is_eu_member(origin):
        return None
    return origin
