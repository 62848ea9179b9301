"""Abstract log store."""
from abc import ABC, abstractmethod
from typing import List


class LogStore(ABC):
    """Append-only, ordered sequence of text lines."""

    @abstractmethod
    def read_lines(self) -> List[str]:
        """Return all non-blank lines, trimmed, in file order."""
        pass

    @abstractmethod
    def append_line(self, line: str) -> None:
        """Append a single line to the end of the log."""
        pass


def clean_lines(raw_lines) -> List[str]:
    """Trim whitespace and drop blank lines."""
    return [line.strip() for line in raw_lines if line and line.strip()]
