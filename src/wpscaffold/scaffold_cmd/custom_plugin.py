"""Scaffold a custom plugin: generate base files, then create the standard directories."""

import os
import sys

import click

from wpscaffold.directory_scaffolder import PLUGIN_DIRECTORIES, ensure_directories
from wpscaffold.plugin_generator.base import PluginGenerationError
from wpscaffold.scaffold_cmd.custom_plugin_opts import CustomPluginOpts


def resolve_plugin_dir(opts: CustomPluginOpts, plugins_root_fn) -> str:
    """Return the directory the plugin lives in: <dir or plugins root>/<slug>.

    Args:
        opts: Command options
        plugins_root_fn: Callable returning the WordPress plugins directory;
            only called when --dir is not given

    Raises:
        SystemExit: If --dir is given but is not an existing directory
    """
    if opts.dir:
        if not os.path.isdir(opts.dir):
            print("Error: Cannot create plugin in directory that doesn't exist.", file=sys.stderr)
            sys.exit(1)
        return os.path.join(opts.dir, opts.slug)
    return os.path.join(plugins_root_fn(), opts.slug)


def scaffold_custom_plugin(opts: CustomPluginOpts, generator, plugins_root_fn) -> str:
    """Generate plugin files with *generator*, then ensure the plugin directory layout.

    Directory creation only starts once the generator has succeeded. Nothing
    is rolled back if a later step fails.

    Returns:
        The resolved plugin directory

    Raises:
        SystemExit: On an invalid --dir, a failed generator or a filesystem error
    """
    plugin_dir = resolve_plugin_dir(opts, plugins_root_fn)

    try:
        generator.generate(opts, plugin_dir)
    except PluginGenerationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(e.returncode if e.returncode > 0 else 1)
    except OSError as e:
        print(f"Error: Could not write plugin files in {plugin_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        ensure_directories(plugin_dir, PLUGIN_DIRECTORIES)
    except OSError as e:
        print(f"Error: Could not create directory in {plugin_dir}: {e}", file=sys.stderr)
        sys.exit(1)

    click.echo("Success: Created plugin directories.")
    return plugin_dir
