"""Typed exceptions raised before any records are generated."""


class FakeUsersError(ValueError):
    """Base class for generation request errors."""


class UnsupportedRegionError(FakeUsersError):
    """Raised when a region tag does not name a known region profile."""


class InvalidParameterError(FakeUsersError):
    """Raised when a numeric request parameter is out of range."""
