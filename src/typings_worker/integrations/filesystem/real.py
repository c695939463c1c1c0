"""Production filesystem backed by pathlib."""

from pathlib import Path

from typings_worker.integrations.filesystem.abc import Filesystem


class RealFilesystem(Filesystem):
    """Production implementation using pathlib."""

    def path_exists(self, path: Path) -> bool:
        return path.exists()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        path.write_text(content, encoding="utf-8")

    def ensure_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)
