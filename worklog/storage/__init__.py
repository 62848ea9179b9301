"""Storage layer for the time log."""

from .backend import LogStore
from .local import LocalFileLogStore
from .memory import InMemoryLogStore

__all__ = ['LogStore', 'LocalFileLogStore', 'InMemoryLogStore']
