"""Worker configuration."""

from dataclasses import dataclass
from pathlib import Path

from typings_worker.core.npm import resolve_npm_path


@dataclass(frozen=True)
class WorkerConfig:
    """Immutable worker configuration.

    Built once at the CLI entry point from command-line options and
    environment variables.
    """

    global_cache_location: Path
    log_file: Path | None
    npm_location: str | None

    @property
    def npm_path(self) -> str:
        """npm executable to invoke, quoted if its path contains spaces."""
        return resolve_npm_path(self.npm_location)
