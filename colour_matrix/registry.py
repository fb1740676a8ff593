"""Command lookup for the CLI.

Every module under colour_matrix/commands/ that defines a module-level
`command` (a Command) becomes a sub-command named after `command.name`.
"""

import importlib
import pkgutil

import colour_matrix.commands
from colour_matrix.core.types import Command

_commands: dict[str, Command] = {}


def discover() -> dict[str, Command]:
    """Import the command modules once and index them by command name."""
    if not _commands:
        for info in pkgutil.iter_modules(colour_matrix.commands.__path__):
            if info.name.startswith('_'):
                continue
            module = importlib.import_module(f'colour_matrix.commands.{info.name}')
            cmd = getattr(module, 'command', None)
            if isinstance(cmd, Command):
                _commands[cmd.name] = cmd
    return _commands


def get(name: str) -> Command:
    """Get a command by name."""
    commands = discover()
    if name not in commands:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}')
    return commands[name]


def all_commands() -> dict[str, Command]:
    return discover()
