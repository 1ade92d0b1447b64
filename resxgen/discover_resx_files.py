"""Logic for collecting .resx files from a directory tree."""

from collections.abc import Callable
from pathlib import Path

from resxgen.additional_file import AdditionalFile


def _reader(path: Path) -> Callable[[], str]:
    return lambda: path.read_text(encoding="utf-8-sig")


def discover_resx_files(root: Path) -> list[AdditionalFile]:
    """Return every .resx file under root, sorted, with lazily read content."""
    files = sorted(p for p in root.rglob("*") if p.suffix.lower() == ".resx")
    return [AdditionalFile(path=str(p), loader=_reader(p)) for p in files]
