"""Tests for diagnostics and the diagnostic reporter."""

import logging

import pytest

from resxgen.diagnostic import (
    inconsistent_property,
    invalid_description_file,
    unresolved_namespace,
)
from resxgen.diagnostic_reporter import DiagnosticReporter


def test_messages() -> None:
    """Verify that messages are formatted from the descriptor."""
    assert (
        invalid_description_file("a.resx").message == "Couldn't parse Resx file 'a.resx'"
    )
    assert (
        inconsistent_property("ClassName", "b.resx").message
        == "Property 'ClassName' values for 'b.resx' are inconsistent"
    )


def test_as_dict() -> None:
    """Verify the plain-dict view of a diagnostic."""
    assert unresolved_namespace("a.resx").as_dict() == {
        "id": "RESXG002",
        "severity": "warning",
        "message": "Couldn't compute namespace for file 'a.resx'",
        "path": "a.resx",
    }


def test_reporter_counts_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    """Verify that the reporter keeps order, counts by id and logs warnings."""
    reporter = DiagnosticReporter()
    with caplog.at_level(logging.WARNING):
        reporter.report(invalid_description_file("a.resx"))
        reporter.report(unresolved_namespace("b.resx"))
        reporter.report(invalid_description_file("c.resx"))

    expected_parse_failures = 2
    assert reporter.counts() == {
        "RESXG001": expected_parse_failures,
        "RESXG002": 1,
    }
    assert [d["path"] for d in reporter.as_dicts()] == ["a.resx", "b.resx", "c.resx"]
    assert "RESXG001" in caplog.text
