"""Logic for rendering the debug header of a generated file."""

from resxgen.resolved_config import ResolvedConfig
from resxgen.resource_group import ResourceGroup


def _text(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_debug_header(group: ResourceGroup, config: ResolvedConfig) -> str:
    """Render every resolution input and result as a comment block."""
    rows = [
        ("key", group.key),
        ("files", ", ".join(group.paths)),
        ("RootNamespace (metadata)", config.root_namespace_option),
        ("ProjectDir (metadata)", config.project_dir_option),
        (
            "Namespace / DefaultResourcesNamespace (metadata)",
            config.namespace_option,
        ),
        ("ResourceName (metadata)", config.resource_name_option),
        ("ClassName (metadata)", config.class_name_option),
        ("UseInstanceMembers (metadata)", config.use_instance_members_option),
        ("AssemblyName", config.assembly_name),
        ("RootNamespace (computed)", config.root_namespace),
        ("ProjectDir (computed)", config.project_dir),
        ("defaultNamespace", config.default_namespace),
        ("defaultResourceName", config.default_resource_name),
        ("Namespace", config.namespace),
        ("ResourceName", config.resource_name),
        ("ClassName", config.class_name),
        ("UseInstanceMembers", config.use_instance_members),
    ]
    lines = ["", "// Debug info:"]
    lines.extend(f"// {label}: {_text(value)}" for label, value in rows)
    return "\n".join(lines) + "\n"
