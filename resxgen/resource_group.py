"""Data model for a set of culture variants of one resource."""

from dataclasses import dataclass

from resxgen.additional_file import AdditionalFile


@dataclass(frozen=True)
class ResourceGroup:
    """Culture variants sharing one culture-neutral key, ordered by path."""

    key: str
    files: tuple[AdditionalFile, ...]

    @property
    def paths(self) -> list[str]:
        """Return the paths of the files in the group."""
        return [f.path for f in self.files]
