"""WpCli: thin runner around the ``wp`` executable.

Commands are run synchronously. ``run`` inherits the terminal so WP-CLI
prompts (e.g. overwrite confirmations) reach the user; ``capture`` collects
stdout for query commands such as ``wp plugin path``.
"""

import subprocess
from typing import List, Optional


class WpCliNotFoundError(RuntimeError):
    """Raised when the wp executable cannot be found."""

    def __init__(self, executable: str):
        super().__init__(
            f"WP-CLI executable not found: {executable} "
            "(install WP-CLI or pass --wp-cli)"
        )
        self.executable = executable


class WpCli:
    """Runs ``wp`` subcommands."""

    def __init__(self, executable: str = "wp"):
        self.executable = executable

    def _command(self, args):
        return [self.executable] + list(args)

    def run(self, args: List[str], cwd: Optional[str] = None) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(self._command(args), cwd=cwd)
        except FileNotFoundError as e:
            raise WpCliNotFoundError(self.executable) from e

    def capture(self, args: List[str], cwd: Optional[str] = None) -> subprocess.CompletedProcess:
        try:
            return subprocess.run(
                self._command(args), cwd=cwd, capture_output=True, text=True,
            )
        except FileNotFoundError as e:
            raise WpCliNotFoundError(self.executable) from e
