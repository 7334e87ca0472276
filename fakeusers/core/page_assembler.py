"""Assemble pages of records: seed mixing, synthesis, then error injection."""

import logging
from typing import Dict, Iterator, List, Tuple, Union

from ..config import Region
from ..generators import RecordGenerator
from ..utils.validators import (
    validate_error_rate,
    validate_page,
    validate_page_range,
    validate_page_size,
)
from .error_injector import ErrorInjector
from .record import Record
from .seeding import page_seed, record_seed

logger = logging.getLogger(__name__)

PAGE_SIZE = 20


def assemble_page(
    region: Union[Region, str],
    error_rate: float,
    seed: str,
    page: int,
    page_size: int = PAGE_SIZE,
) -> Tuple[List[Record], List[Dict]]:
    """
    Generate one page of records together with its error log.

    Args:
        region: Region tag or member
        error_rate: Expected number of typos per record
        seed: User seed string
        page: Zero-based page index
        page_size: Records per page

    Returns:
        Tuple of (records, error log)

    Raises:
        UnsupportedRegionError: If the region is unknown
        InvalidParameterError: If a numeric parameter is out of range
    """
    region = Region.parse(region)
    error_rate = validate_error_rate(error_rate)
    validate_page(page)
    validate_page_size(page_size)

    seed_value = page_seed(seed, page, page_size)
    records = RecordGenerator(region).generate_records(page, page_size, seed_value)

    injector = ErrorInjector(region, error_rate)
    error_log = []
    for local_index, record in enumerate(records):
        _, record_errors = injector.inject_errors_into_record(
            record, record_seed(seed_value, local_index)
        )
        error_log.extend(record_errors)

    logger.debug(
        f"Generated page {page} ({region.value}, {page_size} records, "
        f"{len(error_log)} errors)"
    )
    return records, error_log


def generate_page(
    region: Union[Region, str],
    error_rate: float,
    seed: str,
    page: int,
    page_size: int = PAGE_SIZE,
) -> List[Record]:
    """Generate one page of records. Same inputs always give the same page."""
    records, _ = assemble_page(region, error_rate, seed, page, page_size)
    return records


def iter_records(
    region: Union[Region, str],
    error_rate: float,
    seed: str,
    from_page: int,
    to_page: int,
    page_size: int = PAGE_SIZE,
) -> Iterator[Record]:
    """
    Lazily yield the records of pages ``from_page..to_page`` (inclusive).

    Parameters are validated before the first record is produced.
    """
    region = Region.parse(region)
    validate_error_rate(error_rate)
    validate_page_range(from_page, to_page)
    validate_page_size(page_size)
    return _iter_pages(region, error_rate, seed, from_page, to_page, page_size)


def _iter_pages(region, error_rate, seed, from_page, to_page, page_size):
    for page in range(from_page, to_page + 1):
        yield from generate_page(region, error_rate, seed, page, page_size)


def generate_pages(
    region: Union[Region, str],
    error_rate: float,
    seed: str,
    from_page: int,
    to_page: int,
    page_size: int = PAGE_SIZE,
) -> List[Record]:
    """Concatenate pages ``from_page..to_page`` (inclusive) for bulk export."""
    records = list(iter_records(region, error_rate, seed, from_page, to_page, page_size))
    logger.info(
        f"Generated {len(records)} records for pages {from_page}-{to_page}"
    )
    return records
