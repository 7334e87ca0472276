"""Error transformation modules."""

from .base_error import BaseError
from .character_errors import AdjacentSwap, CharacterDeletion, CharacterInsertion

__all__ = [
    "BaseError",
    "CharacterDeletion",
    "CharacterInsertion",
    "AdjacentSwap",
]
