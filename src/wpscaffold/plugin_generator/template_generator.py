"""Generate plugin files from bundled Jinja2 templates, without a WordPress install.

Produces the same file set as ``wp scaffold plugin``: the main plugin file,
readme, npm/Grunt build files and editor/VCS ignore files, plus PHPUnit,
PHPCS and CI configuration unless tests are skipped.
"""

import os

import click

from wpscaffold.plugin_generator.base import PluginGenerationError
from wpscaffold.template_renderer import render_template

PLUGIN_FILES = [
    ("{slug}.php", "plugin.php.j2"),
    ("readme.txt", "readme.txt.j2"),
    ("package.json", "package.json.j2"),
    ("Gruntfile.js", "Gruntfile.js.j2"),
    (".editorconfig", "editorconfig.j2"),
    (".gitignore", "gitignore.j2"),
    (".distignore", "distignore.j2"),
]

TEST_FILES = [
    ("phpunit.xml.dist", "phpunit.xml.dist.j2"),
    (".phpcs.xml.dist", "phpcs.xml.dist.j2"),
    ("bin/install-wp-tests.sh", "install-wp-tests.sh.j2"),
    ("tests/bootstrap.php", "bootstrap.php.j2"),
    ("tests/test-sample.php", "test-sample.php.j2"),
]

CI_FILES = {
    "travis": (".travis.yml", "travis.yml.j2"),
    "circle": (".circleci/config.yml", "circle.yml.j2"),
    "gitlab": (".gitlab-ci.yml", "gitlab-ci.yml.j2"),
}

EXECUTABLE_FILES = {"bin/install-wp-tests.sh"}


class TemplatePluginFileGenerator:
    """Renders plugin files locally; uses WP-CLI only for activation."""

    def __init__(self, wp_cli):
        self.wp_cli = wp_cli

    def generate(self, opts, plugin_dir):
        variables = opts.template_variables()

        plugin_files = [(path.format(slug=opts.slug), template) for path, template in PLUGIN_FILES]
        self._write_files(plugin_dir, plugin_files, variables, force=opts.force)
        click.echo("Success: Created plugin files.")

        if not opts.skip_tests:
            test_files = TEST_FILES + [CI_FILES[opts.ci]]
            self._write_files(plugin_dir, test_files, variables, force=opts.force)
            click.echo("Success: Created test files.")

        if opts.activate or opts.activate_network:
            self._activate(opts)

    def _write_files(self, plugin_dir, files, variables, *, force):
        for relative_path, template_name in files:
            path = os.path.join(plugin_dir, relative_path)
            if os.path.exists(path) and not force:
                click.echo(f"Skipping existing file: {path} (use --force to overwrite)")
                continue
            content = render_template(template_name, package=__package__, **variables)
            try:
                os.makedirs(os.path.dirname(path), exist_ok=True)
                with open(path, "w", encoding="utf-8") as f:
                    f.write(content)
                if relative_path in EXECUTABLE_FILES:
                    os.chmod(path, 0o755)
            except OSError as e:
                raise PluginGenerationError(f"Could not write {path}: {e}") from e

    def _activate(self, opts):
        args = ["plugin", "activate", opts.slug]
        if opts.activate_network:
            args.append("--network")
        result = self.wp_cli.run(args)
        if result.returncode != 0:
            raise PluginGenerationError(
                f"wp plugin activate failed with exit code {result.returncode}",
                returncode=result.returncode,
            )
