"""
codeshape - Structural Pattern Detection

Profiles a source tree: naming conventions, module dependency topology and
architectural style (MVC, MVVM, layered, microservices, hexagonal,
event-driven, feature-based), each with confidence and evidence.
"""

__version__ = "0.1.0"

from .analysis import DetectionEngine
from .api import analyze
from .config import AnalysisConfig, load_config
from .report import AnalysisReport, DependencyInsights
from .runtime import Deadline

__all__ = [
    "analyze",  # Main entry point
    "DetectionEngine",
    "AnalysisConfig",
    "AnalysisReport",
    "DependencyInsights",
    "Deadline",
    "load_config",
]
