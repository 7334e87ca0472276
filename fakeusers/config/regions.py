"""Supported regions and their immutable generation profiles."""

from enum import Enum
from typing import Dict, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import UnsupportedRegionError

DIGITS = "0123456789"


class Region(str, Enum):
    """Closed set of regions records can be generated for."""

    USA = "USA"
    POLAND = "Poland"
    UKRAINE = "Ukraine"

    @classmethod
    def parse(cls, value: Union["Region", str]) -> "Region":
        """
        Resolve a region tag, ignoring case.

        Args:
            value: Region member or its tag (e.g. "usa", "Poland")

        Returns:
            Matching Region

        Raises:
            UnsupportedRegionError: If the tag names no known region
        """
        if isinstance(value, cls):
            return value

        tag = str(value).strip().lower()
        for region in cls:
            if region.value.lower() == tag or region.name.lower() == tag:
                return region

        supported = ", ".join(r.value for r in cls)
        raise UnsupportedRegionError(
            f"Unsupported region {value!r} (expected one of: {supported})"
        )


class RegionProfile(BaseModel):
    """Locale, phone mask, address templates and alphabet for one region.

    Address templates are ``str.format`` style strings. Each placeholder is
    resolved by the record generator, left to right:

    - ``{street_name}`` and friends call the Faker method of that name
    - ``{random_int:LO-HI}`` draws an integer in ``[LO, HI]``
    - ``{subdivision}`` picks one entry from ``subdivisions``
    """

    model_config = ConfigDict(frozen=True)

    locale: str = Field(description="Faker locale identifier")

    phone_mask: str = Field(description="Phone format, each '#' is one digit")

    address_templates: Tuple[str, ...] = Field(
        description="Ordered address formats, one is picked per record"
    )

    alphabet: str = Field(
        description="Characters inserted into names and addresses by typos"
    )

    subdivisions: Tuple[str, ...] = Field(
        default=(), description="Administrative units for {subdivision}"
    )

    @field_validator("address_templates")
    @classmethod
    def validate_templates_non_empty(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("Region profile needs at least one address template")
        return v

    @field_validator("alphabet")
    @classmethod
    def validate_alphabet_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Region profile alphabet must not be empty")
        return v


REGION_PROFILES: Dict[Region, RegionProfile] = {
    Region.USA: RegionProfile(
        locale="en_US",
        phone_mask="+1 ###-###-####",
        address_templates=(
            "{street_address}, {city}, {state_abbr} {zipcode}",
            "{building_number} {street_name}, Apt. {random_int:1-999}, "
            "{city}, {state_abbr} {zipcode}",
            "P.O. Box {random_int:1000-9999}, {city}, {state_abbr} {zipcode}",
            "{street_address}, {secondary_address}, {city}, {state} {zipcode}",
        ),
        alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz",
    ),
    Region.POLAND: RegionProfile(
        locale="pl_PL",
        phone_mask="+48 ## ### ## ##",
        address_templates=(
            "{street_name} {building_number}, {postcode} {city}",
            "{street_name} {building_number}/{random_int:1-100}, {postcode} {city}",
            "{street_name} {building_number}, m. {random_int:1-100}, "
            "{postcode} {city}",
            "{city}, {street_name} {building_number}, {postcode} woj. {subdivision}",
        ),
        alphabet=(
            "AĄBCĆDEĘFGHIJKLŁMNŃOÓPRSŚTUWYZŹŻ"
            "abcdefghijklmnoprstuwyzźżąćęłńóś"
        ),
        subdivisions=(
            "dolnośląskie",
            "kujawsko-pomorskie",
            "lubelskie",
            "lubuskie",
            "łódzkie",
            "małopolskie",
            "mazowieckie",
            "opolskie",
            "podkarpackie",
            "podlaskie",
            "pomorskie",
            "śląskie",
            "świętokrzyskie",
            "warmińsko-mazurskie",
            "wielkopolskie",
            "zachodniopomorskie",
        ),
    ),
    Region.UKRAINE: RegionProfile(
        locale="uk_UA",
        phone_mask="+380 ## ### ## ##",
        address_templates=(
            "{street_name}, {building_number}, {city}, {subdivision} обл., "
            "{postcode}",
            "{street_name}, буд. {building_number}, кв. {random_int:1-100}, "
            "м. {city}, {subdivision} обл., {postcode}",
            "{city}, {street_name} {building_number}, {postcode}",
            "{subdivision} обл., м. {city}, {street_name}, {building_number}",
        ),
        alphabet=(
            "АБВГҐДЕЄЖЗИІЇЙКЛМНОПРСТУФХЦЧШЩЬЮЯ"
            "абвгґдеєжзиіїйклмнопрстуфхцчшщьюя"
        ),
        subdivisions=(
            "Вінницька",
            "Волинська",
            "Дніпропетровська",
            "Донецька",
            "Житомирська",
            "Закарпатська",
            "Запорізька",
            "Івано-Франківська",
            "Київська",
            "Кіровоградська",
            "Луганська",
            "Львівська",
            "Миколаївська",
            "Одеська",
            "Полтавська",
            "Рівненська",
            "Сумська",
            "Тернопільська",
            "Харківська",
            "Херсонська",
            "Хмельницька",
            "Черкаська",
            "Чернівецька",
            "Чернігівська",
        ),
    ),
}


def get_region_profile(region: Union[Region, str]) -> RegionProfile:
    """Look up the profile for a region member or tag."""
    return REGION_PROFILES[Region.parse(region)]
