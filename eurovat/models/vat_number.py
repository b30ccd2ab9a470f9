"""VAT number check result."""
import enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from eurovat.models.country import CountryRecord


class VatNumberFailure(str, enum.Enum):
    """Why a number was rejected. Diagnostic only, never part of the result."""

    UNRECOGNIZED_PREFIX = "unrecognized_prefix"
    MALFORMED_NUMBER = "malformed_number"


class VatNumberCheckResult(BaseModel):
    """Outcome of a VAT number format check."""

    model_config = ConfigDict(frozen=True)

    value: str
    is_valid: bool
    country: Optional[CountryRecord] = None

    @model_validator(mode="after")
    def country_only_when_valid(self) -> "VatNumberCheckResult":
        if not self.is_valid and self.country is not None:
            raise ValueError("an invalid VAT number cannot carry a country")
        return self

    def to_public_dict(self) -> dict[str, Any]:
        """``{"value", "isValid"}`` plus ``"country"`` when the number is valid."""
        data: dict[str, Any] = {"value": self.value, "isValid": self.is_valid}
        if self.country is not None:
            data["country"] = self.country.to_public_dict()
        return data
