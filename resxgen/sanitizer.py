"""Logic for turning resource names into C# identifiers."""

import unicodedata

# Categories that may appear anywhere in an identifier.
LETTER_CATEGORIES = {"Lu", "Ll", "Lt", "Lm", "Lo", "Nl"}
# Categories that may appear after the first character only.
PART_CATEGORIES = {"Nd", "Pc", "Cf"}


def sanitize_identifier(name: str) -> str:
    """Map an arbitrary resource name to a valid identifier.

    Letters are copied as-is. Digits, connector punctuation and format
    characters are copied too, but get an underscore in front when they would
    start the identifier. Anything else becomes an underscore.

    Distinct names may produce the same identifier; no deduplication happens.
    """
    out: list[str] = []
    for ch in name:
        category = unicodedata.category(ch)
        if category in LETTER_CATEGORIES:
            out.append(ch)
        elif category in PART_CATEGORIES:
            if not out:
                out.append("_")
            out.append(ch)
        else:
            out.append("_")
    return "".join(out)
