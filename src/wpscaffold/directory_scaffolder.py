"""Ensure a fixed set of subdirectories exists beneath a plugin directory."""

import os

PLUGIN_DIRECTORIES = (
    "assets",
    "assets/js",
    "assets/css",
    "assets/images",
    "inc/",
    "inc/classes",
    "inc/functions",
)


def ensure_directories(base_dir, relative_paths=PLUGIN_DIRECTORIES):
    """Create each of relative_paths beneath base_dir unless it already exists.

    Missing ancestors are created as well, like ``mkdir -p``. Directories
    that already exist are left untouched.

    Args:
        base_dir: Root directory of the plugin
        relative_paths: Paths relative to base_dir, created in order

    Returns:
        List of the directories that were created by this call

    Raises:
        ValueError: If base_dir is empty
        NotADirectoryError: If a target path exists but is not a directory
        OSError: If a directory cannot be created
    """
    if not base_dir:
        raise ValueError("base_dir must be a non-empty path")

    created = []
    for relative_path in relative_paths:
        directory = os.path.normpath(os.path.join(base_dir, relative_path))
        if os.path.isdir(directory):
            continue
        if os.path.exists(directory):
            raise NotADirectoryError(f"Path exists and is not a directory: {directory}")
        os.makedirs(directory)
        created.append(directory)
    return created
