"""Data model for the settings resolved for one resource group."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedConfig:
    """Configuration inputs of a group and the values derived from them."""

    # Raw option values, as resolved from per-file and global configuration.
    root_namespace_option: str | None
    project_dir_option: str | None
    namespace_option: str | None
    resource_name_option: str | None
    class_name_option: str | None
    use_instance_members_option: str | None
    assembly_name: str | None
    # Computed values.
    root_namespace: str
    project_dir: str
    default_namespace: str | None
    default_resource_name: str | None
    namespace: str | None
    resource_name: str | None
    class_name: str
    use_instance_members: bool
