"""Logic for rendering the XML doc comment of a string accessor."""

from lxml import etree

from resxgen.resx_entry import ResxEntry

DOC_COMMENT_INDENT = "        /// "


def render_summary_comment(entry: ResxEntry) -> str:
    """Render the ``<summary>`` doc comment body for a text entry.

    The first line carries no ``///`` prefix; continuation lines do.
    """
    summary = etree.Element("summary")
    para = etree.SubElement(summary, "para")
    para.text = f'Looks up a localized string for "{entry.name}".'
    if entry.comment and entry.comment.strip():
        etree.SubElement(summary, "para").text = entry.comment
    if not entry.is_file_ref:
        etree.SubElement(summary, "para").text = f'Value: "{entry.value or ""}".'

    xml = etree.tostring(summary, encoding="unicode", pretty_print=True).rstrip("\n")
    return xml.replace("\n", "\n" + DOC_COMMENT_INDENT)
