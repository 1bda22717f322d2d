"""Options dataclass for the scaffold custom_plugin command."""

import os
from dataclasses import dataclass

import click

CI_PROVIDERS = ["travis", "circle", "gitlab"]
DEFAULT_CI = "travis"
GENERATORS = ["wp-cli", "templates"]
DEFAULT_GENERATOR = "wp-cli"


def validate_slug(slug):
    """Reject slugs that would escape or collapse the plugin directory."""
    if not slug or slug in (".", "..") or "/" in slug or os.sep in slug:
        raise click.BadParameter("Invalid plugin slug specified.", param_hint="'SLUG'")
    return slug


@dataclass(frozen=True)
class CustomPluginOpts:
    """All options for the scaffold custom_plugin command."""

    slug: str
    dir: str | None = None
    plugin_name: str | None = None
    plugin_description: str | None = None
    plugin_author: str | None = None
    plugin_author_uri: str | None = None
    plugin_uri: str | None = None
    skip_tests: bool = False
    ci: str = DEFAULT_CI
    activate: bool = False
    activate_network: bool = False
    force: bool = False
    plugins_root: str | None = None
    generator: str = DEFAULT_GENERATOR

    _FORWARDED_VALUES = [
        ("dir", "--dir"),
        ("plugin_name", "--plugin_name"),
        ("plugin_description", "--plugin_description"),
        ("plugin_author", "--plugin_author"),
        ("plugin_author_uri", "--plugin_author_uri"),
        ("plugin_uri", "--plugin_uri"),
    ]

    _FORWARDED_FLAGS = [
        ("skip_tests", "--skip-tests"),
        ("activate", "--activate"),
        ("activate_network", "--activate-network"),
        ("force", "--force"),
    ]

    def __post_init__(self):
        validate_slug(self.slug)

    def wp_cli_args(self):
        """Build the option list forwarded to ``wp scaffold plugin``."""
        args = []
        for attr, flag in self._FORWARDED_VALUES:
            value = getattr(self, attr)
            if value:
                args.append(f"{flag}={value}")
        for attr, flag in self._FORWARDED_FLAGS:
            if getattr(self, attr):
                args.append(flag)
        if self.ci != DEFAULT_CI:
            args.append(f"--ci={self.ci}")
        return args

    def template_variables(self):
        """Header values for generated plugin files, with WP-CLI's placeholder defaults."""
        plugin_name = self.plugin_name or self.slug.replace("-", " ").title()
        return {
            "slug": self.slug,
            "plugin_name": plugin_name,
            "plugin_description": self.plugin_description or "PLUGIN DESCRIPTION HERE",
            "plugin_author": self.plugin_author or "YOUR NAME HERE",
            "plugin_author_uri": self.plugin_author_uri or "YOUR SITE HERE",
            "plugin_uri": self.plugin_uri or "PLUGIN SITE HERE",
            "textdomain": self.slug,
            "plugin_package": plugin_name.replace(" ", "_"),
        }
