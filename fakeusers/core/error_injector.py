"""Error injection orchestrator."""

import logging
import math
from enum import Enum
from typing import Dict, List, Tuple, Union

import numpy as np

from ..config import DIGITS, Region, get_region_profile
from ..errors import AdjacentSwap, BaseError, CharacterDeletion, CharacterInsertion
from ..utils.validators import validate_error_rate
from .record import Record

logger = logging.getLogger(__name__)


class CorruptionTarget(str, Enum):
    """Record fields that typos can land in (values are attribute names)."""

    FULL_NAME = "full_name"
    ADDRESS = "address"
    PHONE = "phone"


class CorruptionKind(str, Enum):
    """Character-level operations a single error can perform."""

    DELETE = "delete"
    INSERT = "insert"
    SWAP = "swap"


class ErrorInjector:
    """Applies a seeded, expected number of typos to records of one region.

    Every record gets its own generator seeded from its record seed, so the
    typos of one record never depend on which other records were processed.
    """

    TARGETS: Tuple[CorruptionTarget, ...] = tuple(CorruptionTarget)
    KINDS: Tuple[CorruptionKind, ...] = tuple(CorruptionKind)

    # Map corruption kinds to their implementations
    ERROR_TYPE_REGISTRY = {
        CorruptionKind.DELETE: CharacterDeletion,
        CorruptionKind.INSERT: CharacterInsertion,
        CorruptionKind.SWAP: AdjacentSwap,
    }

    def __init__(self, region: Union[Region, str], error_rate: float):
        """
        Initialize error injector.

        Args:
            region: Region whose alphabet feeds name/address insertions
            error_rate: Expected number of errors per record (may be fractional)
        """
        self.region = Region.parse(region)
        self.error_rate = validate_error_rate(error_rate)
        self.profile = get_region_profile(self.region)

        self._errors: Dict[CorruptionKind, BaseError] = {
            kind: error_class() for kind, error_class in self.ERROR_TYPE_REGISTRY.items()
        }
        self._fraction, whole = math.modf(self.error_rate)
        self._whole = int(whole)

    def alphabet_for(self, target: CorruptionTarget) -> str:
        """Phone numbers only ever receive digits."""
        if target is CorruptionTarget.PHONE:
            return DIGITS
        return self.profile.alphabet

    def draw_error_count(self, rng: np.random.Generator) -> int:
        """
        Round the expected error count to an integer with a seeded coin flip.

        The uniform draw happens even for integral rates so every record
        stream starts the same way.

        Args:
            rng: The record's random generator

        Returns:
            ``floor(rate)``, plus one with probability ``frac(rate)``
        """
        extra = 1 if rng.random() < self._fraction else 0
        return self._whole + extra

    def inject_errors_into_record(
        self, record: Record, record_seed: int
    ) -> Tuple[Record, List[Dict]]:
        """
        Inject errors into one record in place.

        Args:
            record: Record to corrupt; ``number`` and ``id`` are left alone
            record_seed: Seed of this record's private random stream

        Returns:
            Tuple of (the same record, list of error records for logging)
        """
        rng = np.random.default_rng(record_seed)
        error_log = []

        for _ in range(self.draw_error_count(rng)):
            target = self.TARGETS[int(rng.integers(len(self.TARGETS)))]
            kind = self.KINDS[int(rng.integers(len(self.KINDS)))]
            error_log.append(self._apply_error(record, target, kind, rng))

        logger.debug(f"Record {record.number}: applied {len(error_log)} errors")
        return record, error_log

    def _apply_error(
        self,
        record: Record,
        target: CorruptionTarget,
        kind: CorruptionKind,
        rng: np.random.Generator,
    ) -> Dict:
        """
        Apply one corruption to the current value of a field.

        Args:
            record: Record to modify in place
            target: Field to corrupt
            kind: Corruption to perform
            rng: The record's random generator

        Returns:
            Error log record
        """
        error = self._errors[kind]
        original_value = getattr(record, target.value)
        errored_value = error.apply(original_value, rng, self.alphabet_for(target))
        setattr(record, target.value, errored_value)

        return {
            "number": record.number,
            "id": record.id,
            "field": target.value,
            "error_type": error.get_error_type_name(),
            "original": original_value,
            "errored": errored_value,
            "changed": errored_value != original_value,
        }

    def get_error_statistics(self, error_log: List[Dict]) -> Dict:
        """
        Generate statistics about applied errors.

        Args:
            error_log: List of error records

        Returns:
            Dictionary with error statistics
        """
        if not error_log:
            return {
                "total_errors": 0,
                "visible_errors": 0,
                "records_with_errors": 0,
                "errors_by_type": {},
                "errors_by_field": {},
            }

        # Count by error type
        errors_by_type = {}
        for record in error_log:
            error_type = record["error_type"]
            errors_by_type[error_type] = errors_by_type.get(error_type, 0) + 1

        # Count by field
        errors_by_field = {}
        for record in error_log:
            field = record["field"]
            errors_by_field[field] = errors_by_field.get(field, 0) + 1

        return {
            "total_errors": len(error_log),
            "visible_errors": sum(1 for record in error_log if record["changed"]),
            "records_with_errors": len({record["number"] for record in error_log}),
            "errors_by_type": errors_by_type,
            "errors_by_field": errors_by_field,
        }
