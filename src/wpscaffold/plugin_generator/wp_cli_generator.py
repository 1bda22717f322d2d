"""Generate plugin files by delegating to ``wp scaffold plugin``."""

import os

from wpscaffold.plugin_generator.base import PluginGenerationError
from wpscaffold.wp_cli import WpCli


class WpCliPluginFileGenerator:
    """Delegates file generation, activation and overwrite prompts to WP-CLI."""

    def __init__(self, wp_cli: WpCli):
        self.wp_cli = wp_cli

    def generate(self, opts, plugin_dir):
        args = ["scaffold", "plugin", opts.slug] + opts.wp_cli_args()
        if not opts.dir:
            # WP-CLI must write into the same root the directories are created under
            args.append(f"--dir={os.path.dirname(plugin_dir)}")
        result = self.wp_cli.run(args)
        if result.returncode != 0:
            raise PluginGenerationError(
                f"wp scaffold plugin failed with exit code {result.returncode}",
                returncode=result.returncode if result.returncode > 0 else 1,
            )
