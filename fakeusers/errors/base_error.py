"""Base class for character-level corruptions."""

from abc import ABC, abstractmethod

import numpy as np


class BaseError(ABC):
    """Abstract base class for typo transformations.

    Implementations never own a random generator. The caller passes the
    record's own stream so that every draw stays in one reproducible sequence.
    """

    @abstractmethod
    def apply(self, value: str, rng: np.random.Generator, alphabet: str) -> str:
        """
        Apply the corruption to a value.

        Args:
            value: Current (possibly already corrupted) field value
            rng: The record's random generator
            alphabet: Characters available for insertion

        Returns:
            Corrupted value, or ``value`` unchanged when inapplicable
        """
        pass

    @abstractmethod
    def get_error_type_name(self) -> str:
        """
        Return error type name for logging.

        Returns:
            Error type name (e.g., "delete")
        """
        pass

    def should_apply(self, value: str) -> bool:
        """
        Check if the corruption can change this value.

        Inapplicable corruptions are no-ops, not failures.

        Args:
            value: Value to check

        Returns:
            True if the corruption applies
        """
        return True

    @staticmethod
    def _random_index(rng: np.random.Generator, upper: int) -> int:
        """Uniform integer in ``[0, upper)``."""
        return int(rng.integers(upper))
