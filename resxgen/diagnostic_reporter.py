"""Logic for collecting diagnostics raised while generating code."""

import logging
from typing import Any

from resxgen.diagnostic import Diagnostic

logger = logging.getLogger(__name__)


class DiagnosticReporter:
    """Collects diagnostics in the order they are reported."""

    def __init__(self) -> None:
        """Initialize an empty reporter."""
        self.diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic."""
        logger.warning("%s: %s", diagnostic.id, diagnostic.message)
        self.diagnostics.append(diagnostic)

    def extend(self, diagnostics: list[Diagnostic]) -> None:
        """Record diagnostics already collected elsewhere, without logging."""
        self.diagnostics.extend(diagnostics)

    def counts(self) -> dict[str, int]:
        """Return the number of diagnostics per descriptor id."""
        counts: dict[str, int] = {}
        for d in self.diagnostics:
            counts[d.id] = counts.get(d.id, 0) + 1
        return counts

    def as_dicts(self) -> list[dict[str, Any]]:
        """Return all diagnostics as plain dicts."""
        return [d.as_dict() for d in self.diagnostics]
