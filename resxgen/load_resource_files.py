"""Logic for parsing and merging the .resx files of a resource group."""

import logging
from collections.abc import Iterable

from lxml import etree

from resxgen.cancellation_token import CancellationToken, OperationCancelledError
from resxgen.diagnostic import invalid_description_file
from resxgen.diagnostic_reporter import DiagnosticReporter
from resxgen.resource_group import ResourceGroup
from resxgen.resource_key import file_order_key
from resxgen.resx_entry import ResxEntry

logger = logging.getLogger(__name__)


def _create_secure_parser() -> etree.XMLParser:
    """Return an XML parser that never resolves entities or touches the network.

    The text is already decoded, so the parser reads the UTF-8 bytes it is
    given and ignores any encoding the XML declaration names.
    """
    return etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        dtd_validation=False,
        load_dtd=False,
        remove_comments=True,
        remove_pis=True,
        recover=False,
    )


def parse_resx(text: str) -> list[ResxEntry]:
    """Parse the ``/root/data`` records of a .resx document, in file order."""
    root = etree.fromstring(text.encode("utf-8"), parser=_create_secure_parser())
    entries: list[ResxEntry] = []
    if root.tag != "root":
        return entries
    for element in root.iterchildren("data"):
        value_element = element.find("value")
        value = None
        if value_element is not None:
            value = "".join(value_element.itertext())
        entries.append(
            ResxEntry(
                name=element.get("name"),
                value=value,
                comment=element.get("comment"),
                type=element.get("type"),
            )
        )
    return entries


def merge_entries(
    merged: dict[str | None, ResxEntry], entries: Iterable[ResxEntry]
) -> dict[str | None, ResxEntry]:
    """Fold entries into an ordered name -> entry map.

    The first entry with a given name keeps its value and type. Later entries
    only supply a comment the first one lacks.
    """
    result = dict(merged)
    for entry in entries:
        existing = result.get(entry.name)
        if existing is None:
            result[entry.name] = entry
        elif existing.comment is None and entry.comment is not None:
            result[entry.name] = existing.with_comment(entry.comment)
    return result


def load_resource_files(
    group: ResourceGroup,
    reporter: DiagnosticReporter,
    cancellation: CancellationToken | None = None,
) -> list[ResxEntry] | None:
    """Parse every file of a group and merge the entries.

    Returns None, after reporting the offending file, if any file cannot be
    read or parsed, or the work is cancelled.
    """
    merged: dict[str | None, ResxEntry] = {}
    for f in sorted(group.files, key=lambda x: file_order_key(x.path)):
        try:
            text = f.get_text(cancellation)
            if text is None:
                continue
            merged = merge_entries(merged, parse_resx(text))
        except (
            etree.XMLSyntaxError,
            ValueError,
            OSError,
            OperationCancelledError,
        ):
            logger.debug("Couldn't parse %s", f.path, exc_info=True)
            reporter.report(invalid_description_file(f.path))
            return None
    return list(merged.values())
