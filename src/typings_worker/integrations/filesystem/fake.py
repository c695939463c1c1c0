"""In-memory fake filesystem for testing."""

from pathlib import Path

from typings_worker.integrations.filesystem.abc import Filesystem


class FakeFilesystem(Filesystem):
    """In-memory filesystem.

    Files are provided via constructor as a path -> content mapping. Parent
    directories of every file are treated as existing.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        files: dict[Path, str] | None = None,
        directories: set[Path] | None = None,
        read_only: bool = False,
    ) -> None:
        """Create FakeFilesystem with pre-populated content.

        Args:
            files: Mapping of file path -> text content
            directories: Additional directories that exist
            read_only: If True, writes and mkdir raise PermissionError
        """
        self._files = dict(files or {})
        self._directories = set(directories or set())
        for path in self._files:
            self._directories.update(path.parents)
        self._read_only = read_only
        self._exists_checks: list[Path] = []

    @property
    def files(self) -> dict[Path, str]:
        """Current file contents (for test assertions)."""
        return self._files.copy()

    @property
    def exists_checks(self) -> list[Path]:
        """Paths passed to path_exists, in call order."""
        return self._exists_checks.copy()

    def path_exists(self, path: Path) -> bool:
        self._exists_checks.append(path)
        return path in self._files or path in self._directories

    def read_text(self, path: Path) -> str:
        if path not in self._files:
            raise FileNotFoundError(f"No such file: {path}")
        return self._files[path]

    def write_text(self, path: Path, content: str) -> None:
        if self._read_only:
            raise PermissionError(f"Read-only filesystem: {path}")
        self._files[path] = content
        self._directories.update(path.parents)

    def ensure_directory(self, path: Path) -> None:
        if self._read_only:
            raise PermissionError(f"Read-only filesystem: {path}")
        self._directories.add(path)
        self._directories.update(path.parents)
