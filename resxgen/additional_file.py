"""Data model for an input file supplied by the host."""

from collections.abc import Callable
from dataclasses import dataclass

from resxgen.cancellation_token import CancellationToken


@dataclass(frozen=True)
class AdditionalFile:
    """A host-provided file whose text is read on demand."""

    path: str
    loader: Callable[[], str | None]

    @classmethod
    def from_text(cls, path: str, text: str | None) -> "AdditionalFile":
        """Build a file whose content is already in memory."""
        return cls(path=path, loader=lambda: text)

    def get_text(self, cancellation: CancellationToken | None = None) -> str | None:
        """Return the file text, or None when the host has none to give."""
        if cancellation is not None:
            cancellation.raise_if_cancelled()
        return self.loader()
