"""In-memory log store for tests and dry runs."""
from typing import Iterable, List, Optional

from .backend import LogStore, clean_lines


class InMemoryLogStore(LogStore):
    """List-backed store with the same read/append contract as a file."""

    def __init__(self, lines: Optional[Iterable[str]] = None):
        self._lines: List[str] = list(lines or [])

    def read_lines(self) -> List[str]:
        return clean_lines(self._lines)

    def append_line(self, line: str) -> None:
        self._lines.append(line.strip())
