"""Formatter interface for AnalysisReport output."""

from abc import ABC, abstractmethod

from ..report import AnalysisReport


class BaseFormatter(ABC):
    """Turns an AnalysisReport into text.

    Subclasses implement ``format``; ``render`` prints its result to stdout
    unless the formatter draws to a console of its own.
    """

    @abstractmethod
    def format(self, report: AnalysisReport) -> str:
        """Return the report as a string."""

    def render(self, report: AnalysisReport) -> None:
        print(self.format(report))
