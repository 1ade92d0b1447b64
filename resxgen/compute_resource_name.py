"""Logic for deriving default resource names and namespaces from paths."""

import os


def ensure_end_separator(path: str) -> str:
    """Append a path separator unless the path already ends with one."""
    if path.endswith(os.sep):
        return path
    return path + os.sep


def _dotted(relative_path: str) -> str:
    return relative_path.replace("/", ".").replace("\\", ".")


def compute_resource_name(
    root_namespace: str, project_dir: str, resource_path: str
) -> str | None:
    """Compute the manifest resource name of a resource below the project dir."""
    full_project_dir = ensure_end_separator(os.path.abspath(project_dir))
    full_resource_path = os.path.abspath(resource_path)

    if full_project_dir == full_resource_path:
        return root_namespace
    if full_resource_path.startswith(full_project_dir):
        relative = full_resource_path[len(full_project_dir) :]
        return root_namespace + "." + _dotted(relative)
    return None


def compute_namespace(
    root_namespace: str, project_dir: str, resource_path: str
) -> str | None:
    """Compute the namespace of a resource from its containing directory."""
    full_project_dir = ensure_end_separator(os.path.abspath(project_dir))
    full_resource_dir = ensure_end_separator(
        os.path.dirname(os.path.abspath(resource_path))
    )

    if full_project_dir == full_resource_dir:
        return root_namespace
    if full_resource_dir.startswith(full_project_dir):
        relative = full_resource_dir[len(full_project_dir) :]
        return root_namespace + "." + _dotted(relative).rstrip(".")
    return None
