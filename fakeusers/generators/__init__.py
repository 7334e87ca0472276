"""Record generators."""

from .record_generator import RecordGenerator

__all__ = ["RecordGenerator"]
