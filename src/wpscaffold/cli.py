"""Top-level Click group for the wpscaffold CLI."""

import click

from wpscaffold.scaffold_cmd.cli import scaffold
from wpscaffold.wp_cli import WpCli


@click.group()
@click.option("--wp-cli", "wp_cli_path", envvar="WPSCAFFOLD_WP_CLI", default="wp",
              show_default=True, help="Path to the WP-CLI executable.")
@click.pass_context
def main(ctx, wp_cli_path):
    """wpscaffold - WordPress plugin scaffolding tools."""
    ctx.obj = WpCli(wp_cli_path)


main.add_command(scaffold)
