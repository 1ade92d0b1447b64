"""Logic for partitioning input files into resource groups."""

from collections.abc import Iterable

from resxgen.additional_file import AdditionalFile
from resxgen.resource_group import ResourceGroup
from resxgen.resource_key import file_order_key, resource_key

RESX_EXTENSION = ".resx"


def is_resx_path(path: str) -> bool:
    """Check if the path names a .resx file (case-insensitive)."""
    return path.lower().endswith(RESX_EXTENSION)


def group_resources(files: Iterable[AdditionalFile]) -> list[ResourceGroup]:
    """Group .resx files by culture-neutral key.

    Keys compare case-insensitively. Files inside a group are ordered by
    path, neutral file first, and the group takes the key of its first file,
    so the result does not depend on input order. Groups are ordered by key.
    """
    buckets: dict[str, list[AdditionalFile]] = {}
    for f in files:
        if not is_resx_path(f.path):
            continue
        buckets.setdefault(resource_key(f.path).lower(), []).append(f)

    groups = []
    for members in buckets.values():
        ordered = sorted(members, key=lambda f: file_order_key(f.path))
        groups.append(
            ResourceGroup(key=resource_key(ordered[0].path), files=tuple(ordered))
        )
    groups.sort(key=lambda g: g.key)
    return groups
