from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, TextIO
import sys


AUTO_REPORT_HEADER = "Automatic report:"


@dataclass(frozen=True)
class RenderedReport:
    text: str
    automatic: bool = False


class ReportSink(ABC):
    """Destination of robot status renderings."""

    @abstractmethod
    def report(self, text: str, automatic: bool = False) -> None:
        """Emit one rendering; ``automatic`` marks auto-reports."""


class ConsoleSink(ReportSink):
    """Print renderings to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def report(self, text: str, automatic: bool = False) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        if automatic:
            print(f"\n{AUTO_REPORT_HEADER}", file=stream)
        print(text, file=stream)


class MemorySink(ReportSink):
    """Keep renderings in memory, in emission order."""

    def __init__(self) -> None:
        self.reports: List[RenderedReport] = []

    def report(self, text: str, automatic: bool = False) -> None:
        self.reports.append(RenderedReport(text=text, automatic=automatic))
