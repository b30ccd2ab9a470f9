"""Exceptions for the VAT rules engine."""


class UnknownCategoryError(ValueError):
    """Raised when a transaction category is outside the known enumeration."""

    def __init__(self, category: object):
        self.category = category
        super().__init__(f"Unknown transaction category: {category!r}")
