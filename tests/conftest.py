"""Pytest configuration and shared fixtures."""
import pytest

from eurovat.models.category import OriginSelector
from eurovat.services.tax_category import CATEGORY_VAT_POLICIES


# ── Category fixtures ────────────────────────────────────────────────

UNTAXED_CATEGORIES = [c for c, p in CATEGORY_VAT_POLICIES.items() if not p.is_vat_relevant]
SELLER_ORIGIN_CATEGORIES = [
    c for c, p in CATEGORY_VAT_POLICIES.items()
    if p.is_vat_relevant and p.origin is OriginSelector.SELLER
]


@pytest.fixture(params=UNTAXED_CATEGORIES, ids=lambda c: c.value)
def untaxed_category(request):
    """DONATION, MEMBERSHIP."""
    return request.param


@pytest.fixture(params=SELLER_ORIGIN_CATEGORIES, ids=lambda c: c.value)
def seller_origin_category(request):
    """PRODUCT, SERVICE, SUPPORT."""
    return request.param


# ── Markers ──────────────────────────────────────────────────────────

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: marks unit tests")
