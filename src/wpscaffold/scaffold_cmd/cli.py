"""Click commands for the scaffold workflow."""

import sys

import click

from wpscaffold.plugin_generator.factory import create_generator
from wpscaffold.plugins_root import PluginsRootError, resolve_plugins_root
from wpscaffold.scaffold_cmd.custom_plugin import scaffold_custom_plugin
from wpscaffold.scaffold_cmd.custom_plugin_opts import (
    CI_PROVIDERS,
    DEFAULT_CI,
    DEFAULT_GENERATOR,
    GENERATORS,
    CustomPluginOpts,
)
from wpscaffold.wp_cli import WpCliNotFoundError


@click.group("scaffold")
def scaffold():
    """Generate code for WordPress plugins."""


@scaffold.command("custom_plugin")
@click.argument("slug")
@click.option("--dir", metavar="DIRNAME",
              help="Put the new plugin in some arbitrary directory path. "
                   "Plugin directory will be path plus supplied slug.")
@click.option("--plugin_name", metavar="TITLE",
              help="What to put in the 'Plugin Name:' header.")
@click.option("--plugin_description", metavar="DESCRIPTION",
              help="What to put in the 'Description:' header.")
@click.option("--plugin_author", metavar="AUTHOR",
              help="What to put in the 'Author:' header.")
@click.option("--plugin_author_uri", metavar="URL",
              help="What to put in the 'Author URI:' header.")
@click.option("--plugin_uri", metavar="URL",
              help="What to put in the 'Plugin URI:' header.")
@click.option("--skip-tests", is_flag=True,
              help="Don't generate files for unit testing.")
@click.option("--ci", type=click.Choice(CI_PROVIDERS), default=DEFAULT_CI, show_default=True,
              help="Choose a configuration file for a continuous integration provider.")
@click.option("--activate", is_flag=True,
              help="Activate the newly generated plugin.")
@click.option("--activate-network", is_flag=True,
              help="Network activate the newly generated plugin.")
@click.option("--force", is_flag=True,
              help="Overwrite files that already exist.")
@click.option("--plugins-root", envvar="WP_PLUGIN_DIR", metavar="PATH",
              help="WordPress plugins directory used when --dir is not given "
                   "(default: ask 'wp plugin path').")
@click.option("--generator", type=click.Choice(GENERATORS), default=DEFAULT_GENERATOR,
              show_default=True,
              help="How to generate plugin files: delegate to 'wp scaffold plugin' "
                   "or render bundled templates.")
@click.pass_obj
def custom_plugin_cmd(wp_cli, **kwargs):
    """Generate starter code for a plugin, plus assets/ and inc/ directories.

    The following folders are always created: assets/js, assets/css,
    assets/images, inc/classes and inc/functions.
    """
    opts = CustomPluginOpts(**kwargs)
    generator = create_generator(opts.generator, wp_cli)

    def plugins_root_fn():
        return resolve_plugins_root(opts.plugins_root, wp_cli)

    try:
        scaffold_custom_plugin(opts, generator, plugins_root_fn)
    except (PluginsRootError, WpCliNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
