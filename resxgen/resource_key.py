"""Logic for computing the culture-neutral key of a resource file."""

import os
import re

CULTURE_SEGMENT_RE = re.compile(r"^[a-zA-Z]{2}(-[a-zA-Z]{2})?$")


def resource_key(path: str) -> str:
    """Strip the extension and any trailing culture segment from a path.

    ``a.resx``, ``a.en.resx`` and ``a.en-us.resx`` all map to ``a``.
    """
    stem, _ext = os.path.splitext(os.path.basename(path))
    without_ext = os.path.join(os.path.dirname(path), stem)
    index = without_ext.rfind(".")
    if index < 0:
        return without_ext
    if CULTURE_SEGMENT_RE.match(without_ext[index + 1 :]):
        return without_ext[:index]
    return without_ext


def file_order_key(path: str) -> tuple[str, str]:
    """Sort key placing a neutral file before its culture variants.

    Paths compare ordinally with the extension stripped, so ``a.resx`` sorts
    before ``a.en.resx`` and ``a.fr.resx``; the full path breaks ties.
    """
    return os.path.splitext(path)[0], path
