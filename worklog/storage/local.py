"""Plain text file log store."""
import logging
from pathlib import Path
from typing import List, Union

from ..errors import CorruptLogError, LogAccessError
from .backend import LogStore, clean_lines

try:
    import fcntl
except ImportError:  # Windows
    fcntl = None

logger = logging.getLogger(__name__)


class LocalFileLogStore(LogStore):
    """Log kept in a UTF-8 text file, one entry per line."""

    def __init__(self, path: Union[str, Path], encoding: str = 'utf-8'):
        self.path = Path(path).expanduser()
        self.encoding = encoding

    def ensure_exists(self) -> Path:
        """Create the log (and its directory) empty if it is missing."""
        if not self.path.exists():
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
            except OSError as e:
                raise LogAccessError(f"Cannot create log {self.path}: {e}") from e
            logger.info(f"Created empty log at {self.path}")
        return self.path

    def read_lines(self) -> List[str]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, 'r', encoding=self.encoding) as f:
                lines = clean_lines(f.read().splitlines())
        except UnicodeDecodeError as e:
            raise CorruptLogError(f"Log {self.path} is not valid {self.encoding}: {e}") from e
        except OSError as e:
            raise LogAccessError(f"Cannot read log {self.path}: {e}") from e
        logger.debug(f"Read {len(lines)} entries from {self.path}")
        return lines

    def append_line(self, line: str) -> None:
        self.ensure_exists()
        data = (line.strip() + '\n').encode(self.encoding)
        try:
            with open(self.path, 'ab+') as f:
                if fcntl is not None:
                    fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                try:
                    # a hand-edited log may lack its final newline
                    size = f.seek(0, 2)
                    if size:
                        f.seek(size - 1)
                        if f.read(1) != b'\n':
                            data = b'\n' + data
                    f.write(data)
                    f.flush()
                finally:
                    if fcntl is not None:
                        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        except OSError as e:
            raise LogAccessError(f"Cannot append to log {self.path}: {e}") from e
        logger.debug(f"Appended {line!r} to {self.path}")
