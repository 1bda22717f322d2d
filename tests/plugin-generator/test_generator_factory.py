import pytest

from wpscaffold.plugin_generator.factory import create_generator
from wpscaffold.plugin_generator.template_generator import TemplatePluginFileGenerator
from wpscaffold.plugin_generator.wp_cli_generator import WpCliPluginFileGenerator


class TestCreateGenerator:

    def test_wp_cli(self, fake_wp_cli):
        generator = create_generator("wp-cli", fake_wp_cli)
        assert isinstance(generator, WpCliPluginFileGenerator)
        assert generator.wp_cli is fake_wp_cli

    def test_templates(self, fake_wp_cli):
        assert isinstance(create_generator("templates", fake_wp_cli), TemplatePluginFileGenerator)

    def test_unknown_name_raises(self, fake_wp_cli):
        with pytest.raises(ValueError, match="Unknown plugin generator"):
            create_generator("composer", fake_wp_cli)
