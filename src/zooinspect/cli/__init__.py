"""zooinspect CLI Module.

- commands.py: Typer CLI commands
- display.py: Rich renderers for status lines, zoo actions and scenarios
"""

from .commands import app as cli_app

__all__ = ["cli_app"]
