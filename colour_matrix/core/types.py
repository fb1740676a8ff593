"""Shared types for colour-matrix: matrix constants, errors, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

MATRIX_SIZE = 20
ROW_LENGTH = 5

# Row-major 4x5: (R, G, B, A, 1) -> (R', G', B', A')
DEFAULT_MATRIX: tuple[float, ...] = (
    1.5, 0.1, 0.1, 0.0, 0.0,
    0.2, 1.2, 0.2, 0.0, 0.0,
    0.3, 0.3, 1.2, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0, 0.0,
)  # fmt: skip

IDENTITY_MATRIX: tuple[float, ...] = (
    1.0, 0.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 0.0, 1.0, 0.0,
)  # fmt: skip

CHANNELS = ('Red', 'Green', 'Blue', 'Alpha')

COEFFICIENT_LABELS: tuple[str, ...] = tuple(
    label
    for out in CHANNELS
    for label in (*(f'{out} from {src}' for src in CHANNELS), f'{out} Bias')
)


class MalformedMatrixText(ValueError):
    """Matrix text failed the grammar, field count, or numeric check."""

    def __init__(self, text: str, reason: str):
        super().__init__(reason)
        self.text = text
        self.reason = reason


class PreconditionViolation(ValueError):
    """A caller passed a buffer or matrix of the wrong shape into the transformer."""


class Command:
    """A self-registering CLI sub-command.

    Usage in a command module:

        command = Command(name='apply', help='Transform an image')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('image')

        @command.run
        def run(args):
            ...
            return 0
    """

    def __init__(self, name: str, help: str = '', uses_matrix: bool = True):
        self.name = name
        self.help = help
        self.uses_matrix = uses_matrix
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function adding command-specific arguments."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any) -> int:
        """Execute the command's run function, returning its exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        result = self._run_fn(args)
        return 0 if result is None else int(result)


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    matrix: list[float] = field(default_factory=list)
    image_path: str = ''
    image_width: int = 0
    image_height: int = 0
    outputs: dict[str, dict[str, Any]] = field(default_factory=dict)
    warnings: list[str] = field(default_factory=list)

    def add_output(self, name: str, path: str, width: int, height: int) -> None:
        """Record an image file written by the command."""
        self.outputs[name] = {'file': path, 'width': width, 'height': height}

    def warn(self, message: str) -> None:
        self.warnings.append(message)
