"""JSON output, identical to ``AnalysisReport.to_json``."""

from ..report import AnalysisReport
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    def __init__(self, indent: int = 2):
        self.indent = indent

    def format(self, report: AnalysisReport) -> str:
        return report.to_json(indent=self.indent)
