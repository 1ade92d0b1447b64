"""Read-only access to per-file and global configuration values."""

from collections.abc import Mapping
from typing import Protocol


class OptionsProvider(Protocol):
    """Lookup capability supplied by the host."""

    def file_option(self, path: str, key: str) -> str | None:
        """Return the value of a per-file option, if set."""
        ...

    def global_option(self, key: str) -> str | None:
        """Return the value of a global option, if set."""
        ...


class MappingOptionsProvider:
    """Options backed by plain dictionaries."""

    def __init__(
        self,
        global_options: Mapping[str, str] | None = None,
        file_options: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        """Initialize with global options and per-path option maps."""
        self.global_options = dict(global_options or {})
        self.file_options = {p: dict(o) for p, o in (file_options or {}).items()}

    def file_option(self, path: str, key: str) -> str | None:
        """Return the value of a per-file option, if set."""
        return self.file_options.get(path, {}).get(key)

    def global_option(self, key: str) -> str | None:
        """Return the value of a global option, if set."""
        return self.global_options.get(key)
