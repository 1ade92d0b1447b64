"""Diagnostic descriptors and the diagnostic record reported to the host."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticDescriptor:
    """Static description of one kind of diagnostic."""

    id: str
    title: str
    message_format: str
    severity: str = "warning"


INVALID_DESCRIPTION_FILE = DiagnosticDescriptor(
    id="RESXG001",
    title="Couldn't parse Resx file",
    message_format="Couldn't parse Resx file '{0}'",
)
UNRESOLVED_NAMESPACE = DiagnosticDescriptor(
    id="RESXG002",
    title="Couldn't compute namespace",
    message_format="Couldn't compute namespace for file '{0}'",
)
UNRESOLVED_RESOURCE_NAME = DiagnosticDescriptor(
    id="RESXG003",
    title="Couldn't compute resource name",
    message_format="Couldn't compute resource name for file '{0}'",
)
INCONSISTENT_PROPERTY = DiagnosticDescriptor(
    id="RESXG004",
    title="Inconsistent properties",
    message_format="Property '{0}' values for '{1}' are inconsistent",
)


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem, located at an input file."""

    descriptor: DiagnosticDescriptor
    args: tuple[str, ...]
    path: str

    @property
    def id(self) -> str:
        """Return the descriptor id."""
        return self.descriptor.id

    @property
    def message(self) -> str:
        """Return the formatted message."""
        return self.descriptor.message_format.format(*self.args)

    def as_dict(self) -> dict[str, str]:
        """Return a JSON-friendly view of the diagnostic."""
        return {
            "id": self.id,
            "severity": self.descriptor.severity,
            "message": self.message,
            "path": self.path,
        }


def invalid_description_file(path: str) -> Diagnostic:
    """Create a diagnostic for a file that failed to parse."""
    return Diagnostic(INVALID_DESCRIPTION_FILE, (path,), path)


def unresolved_namespace(path: str) -> Diagnostic:
    """Create a diagnostic for a group whose namespace is unknown."""
    return Diagnostic(UNRESOLVED_NAMESPACE, (path,), path)


def unresolved_resource_name(path: str) -> Diagnostic:
    """Create a diagnostic for a group whose resource name is unknown."""
    return Diagnostic(UNRESOLVED_RESOURCE_NAME, (path,), path)


def inconsistent_property(property_name: str, path: str) -> Diagnostic:
    """Create a diagnostic for conflicting per-file option values."""
    return Diagnostic(INCONSISTENT_PROPERTY, (property_name, path), path)
