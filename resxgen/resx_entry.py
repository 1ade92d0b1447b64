"""Data model for one named data record of a .resx file."""

import re
from dataclasses import dataclass

STRING_TYPE_PREFIX = "System.String,"
FILE_REF_TYPE_PREFIX = "System.Resources.ResXFileRef,"

PLACEHOLDER_RE = re.compile(r"\{(?P<num>[0-9]+)(:[^}]*)?\}")


@dataclass(frozen=True)
class ResxEntry:
    """A data record: name, inner value, comment and declared type."""

    name: str | None
    value: str | None = None
    comment: str | None = None
    type: str | None = None

    def _embedded_type(self) -> str | None:
        # File references carry "path;Type, Assembly[;encoding]" as value.
        if self.value is None:
            return None
        parts = self.value.split(";")
        if len(parts) > 1:
            return parts[1]
        return None

    @property
    def is_text(self) -> bool:
        """Check if the entry is a string resource."""
        if self.type is None:
            return True
        embedded = self._embedded_type()
        return embedded is not None and embedded.startswith(STRING_TYPE_PREFIX)

    @property
    def is_file_ref(self) -> bool:
        """Check if the entry points to an external file."""
        return self.type is not None and self.type.startswith(FILE_REF_TYPE_PREFIX)

    @property
    def full_type_name(self) -> str | None:
        """Return the C# type the accessor should expose."""
        if self.is_text:
            return "string"
        embedded = self._embedded_type()
        if embedded is None:
            return None
        return embedded.split(",")[0]

    def with_comment(self, comment: str | None) -> "ResxEntry":
        """Return a copy carrying the given comment."""
        return ResxEntry(
            name=self.name, value=self.value, comment=comment, type=self.type
        )


def infer_arity(value: str | None) -> int | None:
    """Return the highest positional placeholder index in a format string.

    ``"Hello {0}, you have {2} items"`` gives 2. Returns None when the value
    has no placeholders.
    """
    if value is None:
        return None
    indexes = [int(m.group("num")) for m in PLACEHOLDER_RE.finditer(value)]
    if not indexes:
        return None
    return max(indexes)
