"""Tests for the standard VAT rate table and the vat_may_apply pre-check."""
from decimal import Decimal

import pytest

from eurovat.core.exceptions import UnknownCategoryError
from eurovat.services.country_reference import EU_COUNTRY_CODES
from eurovat.services.vat_rates import STANDARD_VAT_RATES, get_standard_vat_rate, vat_may_apply

FRENCH_VAT = 20
BELGIUM_VAT = 21


@pytest.mark.unit
class TestStandardVatRates:
    """STANDARD_VAT_RATES data integrity."""

    def test_every_eu_member_has_a_rate(self):
        assert set(STANDARD_VAT_RATES) == EU_COUNTRY_CODES
        assert len(STANDARD_VAT_RATES) == 27

    def test_rates_are_plausible_percentages(self):
        for code, rate in STANDARD_VAT_RATES.items():
            assert isinstance(rate, Decimal), code
            assert Decimal("15") <= rate <= Decimal("30"), f"{code}: {rate}"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            STANDARD_VAT_RATES["FR"] = Decimal("5.5")


@pytest.mark.unit
class TestGetStandardVatRate:
    """get_standard_vat_rate()"""

    @pytest.mark.parametrize("category,country,expected", [
        ("SERVICE", "BE", BELGIUM_VAT),
        ("SERVICE", "FR", FRENCH_VAT),
        ("SUPPORT", "BE", BELGIUM_VAT),
        ("PRODUCT", "BE", BELGIUM_VAT),
        ("TICKET", "BE", BELGIUM_VAT),
        ("DONATION", "BE", 0),
    ])
    def test_rate_by_country(self, category, country, expected):
        assert get_standard_vat_rate(category, country) == expected

    def test_decimal_rate(self):
        assert get_standard_vat_rate("PRODUCT", "FI") == Decimal("25.5")

    @pytest.mark.parametrize("country", ["US", "GB", "CH", "ZZ", "", None])
    def test_unknown_or_non_eu_country_is_zero(self, country):
        assert get_standard_vat_rate("PRODUCT", country) == 0

    def test_untaxed_category_is_zero_everywhere(self, untaxed_category):
        for country in list(EU_COUNTRY_CODES) + ["US", "GB"]:
            assert get_standard_vat_rate(untaxed_category, country) == 0

    def test_country_code_case_insensitive(self):
        assert get_standard_vat_rate("PRODUCT", "fr") == FRENCH_VAT

    def test_unknown_category_raises(self):
        with pytest.raises(UnknownCategoryError):
            get_standard_vat_rate("GIFT", "FR")


@pytest.mark.unit
class TestVatMayApply:
    """vat_may_apply()"""

    def test_false_for_non_european_countries(self):
        assert vat_may_apply("PRODUCT", "US") is False
        assert vat_may_apply("PRODUCT", "CH") is False

    def test_true_for_european_countries(self):
        assert vat_may_apply("PRODUCT", "FR") is True
        assert vat_may_apply("PRODUCT", "BE") is True

    def test_false_when_tier_type_is_not_taxed(self):
        assert vat_may_apply("DONATION", "FR") is False

    def test_unknown_category_raises(self):
        with pytest.raises(UnknownCategoryError):
            vat_may_apply("GIFT", "FR")
