"""Country record schema for the country registry."""
import re
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class IsoCode(BaseModel):
    """ISO 3166-1 codes of a country."""

    model_config = ConfigDict(frozen=True)

    short: str = Field(..., pattern=r"^[A-Z]{2}$", description="alpha-2, e.g. FR")
    long: str = Field(..., pattern=r"^[A-Z]{3}$", description="alpha-3, e.g. FRA")
    numeric: str = Field(..., pattern=r"^\d{3}$", description="numeric, zero-padded, e.g. 250")


class CountryRecord(BaseModel):
    """One supported country: identity, EU membership and VAT number format."""

    model_config = ConfigDict(frozen=True)

    iso_code: IsoCode
    name: str = Field(..., min_length=1)
    is_eu_member: bool = False
    vat_prefix: Optional[str] = Field(
        None,
        pattern=r"^[A-Z]{2}$",
        description="VAT number prefix, only where it differs from alpha-2 (Greece: EL)",
    )
    vat_number_pattern: str = Field(..., description="Regex for the part after the prefix")

    @field_validator("vat_number_pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Make sure the pattern compiles when the registry is built."""
        re.compile(v)
        return v

    @property
    def short_code(self) -> str:
        return self.iso_code.short

    @property
    def number_prefix(self) -> str:
        return self.vat_prefix or self.iso_code.short

    def matches_vat_number(self, number: str) -> bool:
        """True if ``number`` (normalized, prefix stripped) has this country's format."""
        return re.fullmatch(self.vat_number_pattern, number) is not None

    def to_public_dict(self) -> dict[str, Any]:
        """Shape exposed to billing/checkout callers."""
        return {
            "name": self.name,
            "isoCode": self.iso_code.model_dump(),
        }
