"""Detection engine."""

from .engine import DetectionEngine, naming_sample, read_source

__all__ = ["DetectionEngine", "naming_sample", "read_source"]
