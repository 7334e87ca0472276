"""Seeded, paginated fake user data with controllable typos."""

from .core import generate_page, generate_pages

__version__ = "0.1.0"

__all__ = ["generate_page", "generate_pages"]
