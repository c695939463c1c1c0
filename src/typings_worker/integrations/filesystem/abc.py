"""Abstract filesystem primitives.

Only the handful of operations the worker needs are exposed, so registry
loading and project root discovery can be tested without touching disk.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Filesystem(ABC):
    """Abstract filesystem operations for dependency injection."""

    @abstractmethod
    def path_exists(self, path: Path) -> bool:
        """Check if a file or directory exists at path."""
        ...

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Raises:
            OSError: If the file cannot be read
        """
        ...

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file, replacing any existing content.

        Raises:
            OSError: If the file cannot be written
        """
        ...

    @abstractmethod
    def ensure_directory(self, path: Path) -> None:
        """Create path and any missing parents.

        Raises:
            OSError: If the directory cannot be created
        """
        ...
