"""Document models for the resources of a trenako dataset.

Each dataset file holds one JSON document. Keys are snake_case, localized
texts carry an ``it`` and an ``en`` translation and enumerations use the
upper-case constants of the trenako catalog.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

OrganizationEntityType = Literal[
    "CIVIL_LAW_PARTNERSHIP",
    "ENTREPRENEURIAL_COMPANY",
    "GLOBAL_PARTNERSHIP",
    "LIMITED_COMPANY",
    "LIMITED_PARTNERSHIP",
    "LIMITED_PARTNERSHIP_LIMITED_COMPANY",
    "OTHER",
    "PUBLIC_INSTITUTION",
    "PUBLIC_LIMITED_COMPANY",
    "REGISTERED_SOLE_TRADER",
    "SOLE_TRADER",
    "STATE_OWNED_ENTERPRISE",
]
BrandKind = Literal["INDUSTRIAL", "BRASS_MODELS"]
BrandStatus = Literal["ACTIVE", "OUT_OF_BUSINESS"]
RailwayStatus = Literal["ACTIVE", "INACTIVE"]
TrackGauge = Literal["BROAD", "MEDIUM", "MINIMUM", "NARROW", "STANDARD"]
Standard = Literal["BRITISH", "JAPANESE", "NEM", "NMRA"]
Category = Literal[
    "LOCOMOTIVES",
    "TRAIN_SETS",
    "STARTER_SETS",
    "FREIGHT_CARS",
    "PASSENGER_CARS",
    "ELECTRIC_MULTIPLE_UNITS",
    "RAILCARS",
]
RollingStockCategory = Literal[
    "ELECTRIC_MULTIPLE_UNIT",
    "FREIGHT_CAR",
    "LOCOMOTIVE",
    "PASSENGER_CAR",
    "RAILCAR",
]
PowerMethod = Literal["AC", "DC"]
AvailabilityStatus = Literal["ANNOUNCED", "AVAILABLE", "DISCONTINUED"]
Control = Literal["DCC", "DCC_READY", "DCC_SOUND", "NO_DCC"]
DccInterface = Literal[
    "NEM_651",
    "NEM_652",
    "NEM_654",
    "PLUX_8",
    "PLUX_12",
    "PLUX_16",
    "PLUX_22",
    "NEXT_18",
    "NEXT_18_S",
    "MTC_21",
]
Socket = Literal[
    "NONE",
    "NEM_355",
    "NEM_356",
    "NEM_357",
    "NEM_359",
    "NEM_360",
    "NEM_362",
    "NEM_365",
]
FeatureFlag = Literal["YES", "NO", "NOT_APPLICABLE"]

EPOCHS = frozenset(
    [
        "I",
        "II",
        "IIa",
        "IIb",
        "III",
        "IIIa",
        "IIIb",
        "IIIc",
        "IV",
        "IVa",
        "IVb",
        "V",
        "Va",
        "Vb",
        "Vm",
        "VI",
    ]
)

_DELIVERY_DATE = re.compile(r"^\d{4}(/Q[1-4])?$")


def parse_epoch(value: str) -> str:
    """Check an epoch value: a single epoch (``IV``) or two epochs (``IV/V``)."""
    if not value:
        raise ValueError("Epoch value cannot be blank")

    tokens = value.split("/")
    if len(tokens) > 2 or any(not token for token in tokens):
        raise ValueError("Invalid number of elements for epoch values")
    for token in tokens:
        if token not in EPOCHS:
            raise ValueError(f"Invalid value for epoch: '{token}'")

    return value


class Document(BaseModel):
    model_config = ConfigDict(extra="forbid")


class LocalizedText(Document):
    it: str | None = None
    en: str | None = None


class Address(Document):
    street_address: str
    extended_address: str | None = None
    postal_code: str
    city: str
    region: str | None = None
    country: str = Field(pattern=r"^[A-Z]{2}$")


class ContactInfo(Document):
    email: str | None = None
    phone: str | None = None
    website_url: str | None = None


class Socials(Document):
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    youtube: str | None = None


class Brand(Document):
    name: str = Field(min_length=1)
    registered_company_name: str | None = None
    organization_entity_type: OrganizationEntityType | None = None
    group_name: str | None = None
    description: LocalizedText = Field(default_factory=LocalizedText)
    address: Address | None = None
    contact_info: ContactInfo | None = None
    socials: Socials | None = None
    kind: BrandKind
    status: BrandStatus | None = None


class PeriodOfActivity(Document):
    operating_since: date | None = None
    operating_until: date | None = None
    status: RailwayStatus


class RailwayGauge(Document):
    track_gauge: TrackGauge
    meters: float | None = Field(default=None, gt=0)


class RailwayLength(Document):
    kilometers: float | None = Field(default=None, ge=0)
    miles: float | None = Field(default=None, ge=0)


class Railway(Document):
    name: str = Field(min_length=1)
    abbreviation: str | None = None
    registered_company_name: str | None = None
    organization_entity_type: OrganizationEntityType | None = None
    country: str = Field(pattern=r"^[A-Z]{2}$")
    description: LocalizedText = Field(default_factory=LocalizedText)
    period_of_activity: PeriodOfActivity | None = None
    gauge: RailwayGauge | None = None
    total_length: RailwayLength | None = None
    contact_info: ContactInfo | None = None
    social: Socials | None = None
    headquarters: list[str] = Field(default_factory=list)


class ScaleGauge(Document):
    millimeters: float = Field(gt=0)
    inches: float | None = Field(default=None, gt=0)
    track_gauge: TrackGauge


class Scale(Document):
    name: str = Field(min_length=1)
    description: LocalizedText = Field(default_factory=LocalizedText)
    ratio: float = Field(gt=0)
    gauge: ScaleGauge
    standards: list[Standard] = Field(default_factory=list)


class LengthOverBuffer(Document):
    inches: float | None = Field(default=None, gt=0)
    millimeters: float | None = Field(default=None, gt=0)


class Coupling(Document):
    socket: Socket | None = None
    close_couplers: FeatureFlag | None = None
    digital_shunting: FeatureFlag | None = None


class TechnicalSpecifications(Document):
    minimum_radius: float | None = Field(default=None, gt=0)
    coupling: Coupling | None = None
    flywheel_fitted: FeatureFlag | None = None
    metal_body: FeatureFlag | None = None
    interior_lights: FeatureFlag | None = None
    lights: FeatureFlag | None = None
    spring_buffers: FeatureFlag | None = None


class RollingStock(Document):
    # Category specific fields (locomotive_type, freight_car_type, ...) are
    # accepted as free text.
    model_config = ConfigDict(extra="allow")

    category: RollingStockCategory
    railway: str = Field(min_length=1)
    epoch: str
    livery: str | None = None
    road_number: str | None = None
    class_name: str | None = None
    type_name: str | None = None
    series: str | None = None
    depot: str | None = None
    dcc_interface: DccInterface | None = None
    control: Control | None = None
    length_over_buffer: LengthOverBuffer | None = None
    technical_specifications: TechnicalSpecifications | None = None
    is_dummy: bool = False

    @field_validator("epoch")
    @classmethod
    def check_epoch(cls, value: str) -> str:
        return parse_epoch(value)


class CatalogItem(Document):
    brand: str = Field(min_length=1)
    item_number: str = Field(min_length=1)
    scale: str = Field(min_length=1)
    category: Category
    description: LocalizedText = Field(default_factory=LocalizedText)
    details: LocalizedText = Field(default_factory=LocalizedText)
    power_method: PowerMethod
    delivery_date: str | None = None
    availability_status: AvailabilityStatus | None = None
    rolling_stocks: list[RollingStock] = Field(min_length=1)
    count: int = Field(ge=1)

    @field_validator("delivery_date")
    @classmethod
    def check_delivery_date(cls, value: str | None) -> str | None:
        if value is not None and not _DELIVERY_DATE.match(value):
            raise ValueError("delivery date must be 'YYYY' or 'YYYY/Qn'")
        return value
