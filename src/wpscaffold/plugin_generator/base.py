"""PluginFileGenerator: the capability that writes a plugin's base files."""

from typing import Protocol


class PluginGenerationError(RuntimeError):
    """Raised when plugin files could not be generated.

    Carries the exit code of the failed step so the command can propagate it.
    """

    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode


class PluginFileGenerator(Protocol):
    """Writes the base plugin files into plugin_dir before directories are scaffolded."""

    def generate(self, opts, plugin_dir: str) -> None:
        ...
