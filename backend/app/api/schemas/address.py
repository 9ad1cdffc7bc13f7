"""Address validation and ZIP lookup request/response schemas."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.gateway.models import Address, AddressValidationResult, CountyRecord, ZipCodeInfo


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys, accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AddressRequest(BaseModel):
    """
    Address submitted for validation.

    Fields are optional at the schema level so that blank or missing values
    reach the gateway and come back as a 400, not a 422.

    A plain BaseModel rather than CamelModel: the accepted keys are the
    explicit AliasChoices below (line1/address1, zip/zipCode), none of which
    a camelCase alias generator would produce.  It is never serialised.
    """

    line1: str | None = Field(None, validation_alias=AliasChoices("line1", "address1"))
    line2: str | None = Field(None, validation_alias=AliasChoices("line2", "address2"))
    city: str | None = None
    state: str | None = None
    zip: str | None = Field(None, validation_alias=AliasChoices("zip", "zipCode"))

    def to_address(self) -> Address:
        return Address(
            line1=self.line1 or "",
            line2=self.line2 or "",
            city=self.city or "",
            state=self.state or "",
            zip=self.zip or "",
        )


class NormalizedAddress(CamelModel):
    address1: str
    address2: str = ""
    city: str
    state: str
    zip: str


class AddressValidationResponse(CamelModel):
    """Validation verdict.  errors is empty iff is_valid."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    normalized_address: NormalizedAddress | None = None

    @classmethod
    def from_result(cls, result: AddressValidationResult) -> AddressValidationResponse:
        normalized = None
        if result.normalized_address is not None:
            normalized = NormalizedAddress(**result.normalized_address.to_upstream())
        return cls(
            is_valid=result.is_valid,
            errors=list(result.errors),
            normalized_address=normalized,
        )


class CountyOption(CamelModel):
    county: str
    city: str
    state: str
    county_fips_code: str | None = None
    state_fips_code: str | None = None
    deliverable: bool = True
    preferred: bool = False

    @classmethod
    def from_record(cls, record: CountyRecord) -> CountyOption:
        return cls(**record.to_dict())


class ZipCodeInfoResponse(CamelModel):
    """Geographic metadata for a ZIP code."""

    zip_code: str
    city: str
    state: str
    county: str
    county_fips_code: str | None = None
    deliverable: bool = True
    preferred: bool = True
    all_options: list[CountyOption] = Field(default_factory=list)

    @classmethod
    def from_info(cls, info: ZipCodeInfo) -> ZipCodeInfoResponse:
        return cls(
            zip_code=info.zip,
            city=info.city,
            state=info.state,
            county=info.county,
            county_fips_code=info.county_fips_code,
            deliverable=info.deliverable,
            preferred=info.preferred,
            all_options=[CountyOption.from_record(r) for r in info.all_options],
        )


class ZipValidationResponse(CamelModel):
    """State-abbreviation check for a ZIP code."""

    valid: bool
    zip_code: str
    state: str | None = None
    error: str | None = None
