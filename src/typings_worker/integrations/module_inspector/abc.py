"""Abstract module inspector."""

from abc import ABC, abstractmethod
from typing import Any


class ModuleInspector(ABC):
    """Describes the shape of a module's top-level values."""

    @abstractmethod
    def inspect(self, file_name: str) -> dict[str, Any]:
        """Load the module at file_name and describe its public members.

        The returned value is sent to the parent unchanged, so it must be
        JSON-serializable. Load failures are reported in the result, not raised.
        """
        ...
