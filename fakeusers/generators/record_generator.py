"""Generate structurally valid fake user records with Faker."""

import re
from string import Formatter
from typing import List, Union

from faker import Faker

from ..config import Region, RegionProfile, get_region_profile
from ..core.record import Record

_RANGE_SPEC = re.compile(r"^(\d+)-(\d+)$")


class RecordGenerator:
    """Generates one page of region-specific records from a page seed.

    A fresh Faker instance is seeded for every page, and fields are drawn in
    a fixed order (id, full name, address, phone) record after record, so the
    same page seed always reproduces the same page.
    """

    def __init__(self, region: Union[Region, str]):
        """
        Initialize record generator.

        Args:
            region: Region whose locale, phone mask and templates are used
        """
        self.region = Region.parse(region)
        self.profile: RegionProfile = get_region_profile(self.region)

    def generate_records(self, page: int, page_size: int, page_seed: int) -> List[Record]:
        """
        Generate one page of clean records.

        Args:
            page: Zero-based page index (drives record numbering)
            page_size: Number of records on the page
            page_seed: Seed for the page's Faker instance

        Returns:
            List of ``page_size`` records numbered from ``page * page_size + 1``
        """
        faker = Faker(self.profile.locale)
        faker.seed_instance(page_seed)

        records = []
        for local_index in range(page_size):
            records.append(
                Record(
                    number=page * page_size + local_index + 1,
                    id=faker.uuid4(),
                    full_name=faker.name(),
                    address=self._generate_address(faker),
                    phone=faker.numerify(self.profile.phone_mask),
                )
            )

        return records

    def _generate_address(self, faker: Faker) -> str:
        """Pick one address template at random and fill it in."""
        template = faker.random_element(self.profile.address_templates)
        return self.fill_template(faker, template)

    def fill_template(self, faker: Faker, template: str) -> str:
        """
        Resolve every placeholder of an address template, left to right.

        Args:
            faker: Seeded Faker instance
            template: Template from the region profile

        Returns:
            Formatted address
        """
        parts = []
        for literal, field_name, format_spec, _ in Formatter().parse(template):
            parts.append(literal)
            if field_name is not None:
                parts.append(self._resolve_field(faker, field_name, format_spec))
        return "".join(parts)

    def _resolve_field(self, faker: Faker, field_name: str, format_spec: str) -> str:
        if field_name == "random_int":
            match = _RANGE_SPEC.match(format_spec or "")
            if not match:
                raise ValueError(
                    f"random_int placeholder needs a LO-HI range, got {format_spec!r}"
                )
            low, high = int(match.group(1)), int(match.group(2))
            return str(faker.random_int(low, high))

        if field_name == "subdivision":
            return faker.random_element(self.profile.subdivisions)

        return str(getattr(faker, field_name)())
