"""Request parameter validation shared by the API, CLIs and config models."""

import math

from ..exceptions import InvalidParameterError


def validate_error_rate(error_rate: float) -> float:
    """
    Ensure the expected error count per record is a finite, non-negative number.

    Args:
        error_rate: Expected number of corruptions per record

    Returns:
        The error rate as a float

    Raises:
        InvalidParameterError: If the rate is negative, NaN or infinite
    """
    try:
        rate = float(error_rate)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(
            f"error_rate must be a number, got {error_rate!r}"
        ) from exc

    if not math.isfinite(rate) or rate < 0:
        raise InvalidParameterError(
            f"error_rate must be a finite number >= 0, got {error_rate!r}"
        )
    return rate


def validate_page(page: int, name: str = "page") -> int:
    """Ensure a page index is a non-negative integer."""
    if isinstance(page, bool) or not isinstance(page, int):
        raise InvalidParameterError(f"{name} must be an integer, got {page!r}")
    if page < 0:
        raise InvalidParameterError(f"{name} must be >= 0, got {page}")
    return page


def validate_page_size(page_size: int) -> int:
    """Ensure the page size is a positive integer."""
    if isinstance(page_size, bool) or not isinstance(page_size, int):
        raise InvalidParameterError(
            f"page_size must be an integer, got {page_size!r}"
        )
    if page_size < 1:
        raise InvalidParameterError(f"page_size must be >= 1, got {page_size}")
    return page_size


def validate_page_range(from_page: int, to_page: int) -> None:
    """Ensure ``from_page..to_page`` is a valid inclusive page range."""
    validate_page(from_page, "from_page")
    validate_page(to_page, "to_page")
    if from_page > to_page:
        raise InvalidParameterError(
            f"from_page ({from_page}) > to_page ({to_page})"
        )
