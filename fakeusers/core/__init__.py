"""Core processing modules."""

from .error_injector import CorruptionKind, CorruptionTarget, ErrorInjector
from .page_assembler import (
    PAGE_SIZE,
    assemble_page,
    generate_page,
    generate_pages,
    iter_records,
)
from .record import Record
from .seeding import page_seed, record_seed, stable_hash

__all__ = [
    "PAGE_SIZE",
    "CorruptionKind",
    "CorruptionTarget",
    "ErrorInjector",
    "Record",
    "assemble_page",
    "generate_page",
    "generate_pages",
    "iter_records",
    "page_seed",
    "record_seed",
    "stable_hash",
]
