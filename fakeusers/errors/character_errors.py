"""Character-level typos: deletion, insertion and adjacent swap."""

import numpy as np

from .base_error import BaseError


class CharacterDeletion(BaseError):
    """Remove one character at a random position."""

    def get_error_type_name(self) -> str:
        return "delete"

    def should_apply(self, value: str) -> bool:
        return len(value) > 0

    def apply(self, value: str, rng: np.random.Generator, alphabet: str) -> str:
        if not self.should_apply(value):
            return value

        pos = self._random_index(rng, len(value))
        return value[:pos] + value[pos + 1 :]


class CharacterInsertion(BaseError):
    """Insert one alphabet character at a random position (empty values too)."""

    def get_error_type_name(self) -> str:
        return "insert"

    def apply(self, value: str, rng: np.random.Generator, alphabet: str) -> str:
        pos = self._random_index(rng, len(value) + 1)
        new_char = alphabet[self._random_index(rng, len(alphabet))]
        return value[:pos] + new_char + value[pos:]


class AdjacentSwap(BaseError):
    """Swap a random character with its right-hand neighbour."""

    def get_error_type_name(self) -> str:
        return "swap"

    def should_apply(self, value: str) -> bool:
        return len(value) >= 2

    def apply(self, value: str, rng: np.random.Generator, alphabet: str) -> str:
        if not self.should_apply(value):
            return value

        pos = self._random_index(rng, len(value) - 1)
        return value[:pos] + value[pos + 1] + value[pos] + value[pos + 2 :]
