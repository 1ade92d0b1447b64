"""Logic for resolving the configuration of a resource group."""

import os

from resxgen.compute_resource_name import compute_namespace, compute_resource_name
from resxgen.diagnostic import unresolved_namespace, unresolved_resource_name
from resxgen.diagnostic_reporter import DiagnosticReporter
from resxgen.get_metadata_value import get_metadata_value
from resxgen.options_provider import OptionsProvider
from resxgen.resolved_config import ResolvedConfig
from resxgen.resource_group import ResourceGroup
from resxgen.sanitizer import sanitize_identifier


def parse_bool(value: str | None) -> bool:
    """Parse "true"/"false" case-insensitively; anything else is False."""
    if value is None:
        return False
    return value.strip().lower() == "true"


def resolve_config(
    group: ResourceGroup,
    options: OptionsProvider,
    assembly_name: str | None,
    reporter: DiagnosticReporter,
) -> ResolvedConfig:
    """Resolve every option of a group and derive the defaults."""
    root_namespace_option = get_metadata_value(
        options, "RootNamespace", "RootNamespace", group, reporter
    )
    project_dir_option = get_metadata_value(
        options, "ProjectDir", "ProjectDir", group, reporter
    )
    namespace_option = get_metadata_value(
        options, "Namespace", "DefaultResourcesNamespace", group, reporter
    )
    resource_name_option = get_metadata_value(
        options, "ResourceName", None, group, reporter
    )
    class_name_option = get_metadata_value(options, "ClassName", None, group, reporter)
    use_instance_members_option = get_metadata_value(
        options, "UseInstanceMembers", None, group, reporter
    )

    root_namespace = root_namespace_option or assembly_name or ""
    project_dir = project_dir_option or assembly_name or ""
    default_resource_name = compute_resource_name(root_namespace, project_dir, group.key)
    default_namespace = compute_namespace(root_namespace, project_dir, group.key)

    namespace = namespace_option or default_namespace
    resource_name = resource_name_option or default_resource_name
    class_name = class_name_option or sanitize_identifier(
        os.path.splitext(os.path.basename(group.key))[0]
    )

    first_path = group.files[0].path
    if namespace is None:
        reporter.report(unresolved_namespace(first_path))
    if resource_name is None:
        reporter.report(unresolved_resource_name(first_path))

    return ResolvedConfig(
        root_namespace_option=root_namespace_option,
        project_dir_option=project_dir_option,
        namespace_option=namespace_option,
        resource_name_option=resource_name_option,
        class_name_option=class_name_option,
        use_instance_members_option=use_instance_members_option,
        assembly_name=assembly_name,
        root_namespace=root_namespace,
        project_dir=project_dir,
        default_namespace=default_namespace,
        default_resource_name=default_resource_name,
        namespace=namespace,
        resource_name=resource_name,
        class_name=class_name,
        use_instance_members=parse_bool(use_instance_members_option),
    )
