"""Select a PluginFileGenerator by name."""

from wpscaffold.plugin_generator.template_generator import TemplatePluginFileGenerator
from wpscaffold.plugin_generator.wp_cli_generator import WpCliPluginFileGenerator


def create_generator(name, wp_cli):
    """Return the generator registered under *name* ("wp-cli" or "templates")."""
    if name == "wp-cli":
        return WpCliPluginFileGenerator(wp_cli)
    if name == "templates":
        return TemplatePluginFileGenerator(wp_cli)
    raise ValueError(f"Unknown plugin generator: {name}")
