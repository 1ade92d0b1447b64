"""Logic for resolving one option across the files of a group."""

from resxgen.diagnostic import inconsistent_property
from resxgen.diagnostic_reporter import DiagnosticReporter
from resxgen.options_provider import OptionsProvider
from resxgen.resource_group import ResourceGroup


def get_metadata_value(
    options: OptionsProvider,
    name: str,
    global_name: str | None,
    group: ResourceGroup,
    reporter: DiagnosticReporter,
) -> str | None:
    """Resolve an option from per-file values, falling back to a global value.

    Files that disagree produce one InconsistentProperty diagnostic naming the
    first file whose value differs; the per-file layer is then treated as unset.
    """
    result: str | None = None
    for f in group.files:
        value = options.file_option(f.path, name)
        if value is None:
            continue
        if result is not None and value != result:
            reporter.report(inconsistent_property(name, f.path))
            result = None
            break
        result = value

    if result:
        return result

    if global_name is not None:
        global_value = options.global_option(global_name)
        if global_value:
            return global_value

    return None
