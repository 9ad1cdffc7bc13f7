"""
Address domain types shared by the gateways and the API layer.

These are plain dataclasses constructed fresh per call and never persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Address:
    """A structured US postal address as entered by the applicant."""

    line1: str
    city: str
    state: str
    zip: str
    line2: str = ""

    def trimmed(self) -> Address:
        """Copy with surrounding whitespace removed from every field."""
        return Address(
            line1=(self.line1 or "").strip(),
            city=(self.city or "").strip(),
            state=(self.state or "").strip(),
            zip=(self.zip or "").strip(),
            line2=(self.line2 or "").strip(),
        )

    def to_upstream(self) -> dict[str, str]:
        """Serialise in the field names the address service expects."""
        return {
            "address1": self.line1,
            "address2": self.line2,
            "city": self.city,
            "state": self.state,
            "zip": self.zip,
        }


@dataclass
class AddressValidationResult:
    """Outcome of an address validation.  errors is empty iff is_valid."""

    is_valid: bool
    errors: list[str] = field(default_factory=list)
    normalized_address: Address | None = None


@dataclass(frozen=True)
class CountyRecord:
    """One county option returned for a ZIP code."""

    county: str
    city: str
    state: str
    county_fips_code: str | None = None
    state_fips_code: str | None = None
    deliverable: bool = True
    preferred: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "county": self.county,
            "city": self.city,
            "state": self.state,
            "countyFipsCode": self.county_fips_code,
            "stateFipsCode": self.state_fips_code,
            "deliverable": self.deliverable,
            "preferred": self.preferred,
        }


@dataclass
class ZipCodeInfo:
    """Geographic metadata for a ZIP code."""

    zip: str
    city: str
    state: str
    county: str
    county_fips_code: str | None = None
    deliverable: bool = True
    preferred: bool = True
    all_options: list[CountyRecord] = field(default_factory=list)
