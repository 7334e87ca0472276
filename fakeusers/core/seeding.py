"""Deterministic seed derivation for pages and records.

A user seed string is hashed with SHA-256 (never Python's per-process
``hash``) so the same string maps to the same integer on every run. Page and
record seeds are plain offsets from that integer, wrapped to the unsigned
32-bit range accepted by both Faker and numpy generators.
"""

import hashlib

SEED_MODULUS = 2**32


def stable_hash(seed: str) -> int:
    """Return a process-independent 32-bit unsigned hash of ``seed``."""
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big")


def page_seed(seed: str, page: int, page_size: int) -> int:
    """
    Combine a user seed with a page index.

    Args:
        seed: User-supplied seed string
        page: Zero-based page index
        page_size: Records per page

    Returns:
        Seed for the page's record generator
    """
    return (stable_hash(seed) + page * page_size) % SEED_MODULUS


def record_seed(page_seed_value: int, local_index: int) -> int:
    """Seed for the error injection stream of one record within a page."""
    return (page_seed_value + local_index) % SEED_MODULUS
