"""Tests for the tax category classifier."""
import pytest

from eurovat.core.exceptions import UnknownCategoryError
from eurovat.models.category import CategoryVatPolicy, OriginSelector, TransactionCategory
from eurovat.services.tax_category import (
    CATEGORY_VAT_POLICIES,
    coerce_category,
    get_category_policy,
    get_vat_origin_country,
    is_tier_type_subject_to_vat,
)


@pytest.mark.unit
class TestIsTierTypeSubjectToVat:
    """is_tier_type_subject_to_vat()"""

    @pytest.mark.parametrize("category", ["PRODUCT", "SERVICE", "SUPPORT", "TICKET"])
    def test_taxed_types(self, category):
        assert is_tier_type_subject_to_vat(category) is True

    @pytest.mark.parametrize("category", ["DONATION", "MEMBERSHIP"])
    def test_untaxed_types(self, category):
        assert is_tier_type_subject_to_vat(category) is False

    def test_accepts_enum_members(self):
        assert is_tier_type_subject_to_vat(TransactionCategory.PRODUCT) is True
        assert is_tier_type_subject_to_vat(TransactionCategory.DONATION) is False

    @pytest.mark.parametrize("category", ["GIFT", "product", "", None, 42])
    def test_unknown_category_raises(self, category):
        with pytest.raises(UnknownCategoryError) as exc_info:
            is_tier_type_subject_to_vat(category)
        assert exc_info.value.category == category

    def test_unknown_category_is_a_value_error(self):
        with pytest.raises(ValueError, match="Unknown transaction category"):
            is_tier_type_subject_to_vat("GIFT")


@pytest.mark.unit
class TestCategoryPolicies:
    """CATEGORY_VAT_POLICIES table integrity."""

    def test_every_category_has_a_policy(self):
        assert set(CATEGORY_VAT_POLICIES) == set(TransactionCategory)

    def test_only_tickets_follow_the_buyer(self):
        buyer_side = [c for c, p in CATEGORY_VAT_POLICIES.items() if p.origin is OriginSelector.BUYER]
        assert buyer_side == [TransactionCategory.TICKET]

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            CATEGORY_VAT_POLICIES[TransactionCategory.DONATION] = get_category_policy("PRODUCT")

    def test_policy_is_documented(self):
        assert CategoryVatPolicy.__doc__.startswith("Whether a category carries VAT")

    def test_coerce_category(self):
        assert coerce_category("TICKET") is TransactionCategory.TICKET
        assert coerce_category(TransactionCategory.TICKET) is TransactionCategory.TICKET


@pytest.mark.unit
class TestGetVatOriginCountry:
    """get_vat_origin_country()"""

    @pytest.mark.parametrize("category,expected", [
        ("PRODUCT", "FR"),
        ("SUPPORT", "FR"),
        ("SERVICE", "FR"),
        ("TICKET", "BE"),
    ])
    def test_origin_depends_on_tier_type(self, category, expected):
        assert get_vat_origin_country(category, "FR", "BE") == expected

    def test_none_for_untaxed_category(self):
        assert get_vat_origin_country("DONATION", "FR", "BE") is None

    def test_none_outside_eu(self):
        assert get_vat_origin_country("PRODUCT", "US", "US") is None

    def test_none_for_event_outside_eu(self):
        assert get_vat_origin_country("TICKET", "FR", "CH") is None

    def test_normalizes_country_codes(self):
        assert get_vat_origin_country("PRODUCT", " fr ", "be") == "FR"

    def test_missing_country(self):
        assert get_vat_origin_country("PRODUCT", None, "BE") is None

    def test_unknown_category_raises(self):
        with pytest.raises(UnknownCategoryError):
            get_vat_origin_country("GIFT", "FR", "BE")
