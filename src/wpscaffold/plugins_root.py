"""Resolve the WordPress plugins directory (WP_PLUGIN_DIR) for new plugins."""

from wpscaffold.wp_cli import WpCli


class PluginsRootError(RuntimeError):
    """Raised when no plugins directory can be determined."""


def resolve_plugins_root(explicit: str | None, wp_cli: WpCli) -> str:
    """Return the directory new plugins are created in.

    An explicit path (from --plugins-root or WP_PLUGIN_DIR) wins. Otherwise
    WP-CLI is asked via ``wp plugin path``, which honours the surrounding
    WordPress install and any wp-cli.yml.

    Raises:
        PluginsRootError: If WP-CLI fails or reports an empty path
    """
    if explicit:
        return explicit

    result = wp_cli.capture(["plugin", "path"])
    plugins_root = (result.stdout or "").strip()
    if result.returncode != 0 or not plugins_root:
        detail = (result.stderr or "").strip()
        message = "Could not determine the WordPress plugins directory"
        if detail:
            message += f": {detail}"
        raise PluginsRootError(message + " (pass --plugins-root or set WP_PLUGIN_DIR)")
    return plugins_root
