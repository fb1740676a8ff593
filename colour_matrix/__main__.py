"""colour-matrix — Preview a 4x5 colour matrix applied to an image.

Usage: colour-matrix <command> [options]

Commands are auto-discovered from colour_matrix/commands/.
Each command module's docstring is its documentation.
Run `colour-matrix help <command>` for full module docs.

The current matrix starts from the built-in default (or COLOUR_MATRIX),
is replaced by --matrix / --matrix-file when that text is valid, and is
then edited one coefficient at a time by each --set INDEX=VALUE.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-matrix looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import math
import sys

from colour_matrix import registry
from colour_matrix.core.editor import MatrixEditor
from colour_matrix.core.env import Settings, load_env
from colour_matrix.core.types import IDENTITY_MATRIX, MATRIX_SIZE


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'colour_matrix.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _coefficient_edit(text: str) -> tuple[int, float]:
    """argparse type for --set INDEX=VALUE."""
    index_text, sep, value_text = text.partition('=')
    if not sep:
        raise argparse.ArgumentTypeError(f'expected INDEX=VALUE, got {text!r}')
    try:
        index = int(index_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'coefficient index {index_text!r} is not an integer') from None
    if not 0 <= index < MATRIX_SIZE:
        raise argparse.ArgumentTypeError(f'coefficient index {index} out of range 0..{MATRIX_SIZE - 1}')
    try:
        value = float(value_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f'coefficient value {value_text!r} is not a number') from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f'coefficient value {value_text!r} is not finite')
    return index, value


def _add_matrix_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument('-m', '--matrix', metavar='TEXT', help='Custom matrix text, e.g. "[1, 0, 0, 0, 0, ...]"')
    p.add_argument('-f', '--matrix-file', metavar='PATH', help='Read the custom matrix text from a file')
    p.add_argument(
        '-s',
        '--set',
        dest='edits',
        action='append',
        type=_coefficient_edit,
        default=[],
        metavar='INDEX=VALUE',
        help='Set one coefficient (0-19). Repeatable; applied after --matrix.',
    )
    p.add_argument('--identity', action='store_true', help='Start from the identity matrix instead of the default')


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  colour-matrix apply photo.png out.png\n'
        '  colour-matrix apply photo.png out.png --matrix "[0.3,0.6,0.1,0,0, 0.3,0.6,0.1,0,0, ...]"\n'
        '  colour-matrix preview ./tmp photo.png --set 0=2.0 --set 4=-20\n'
        '  colour-matrix validate "[1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0]"\n'
        '  colour-matrix show --grid\n'
        '  colour-matrix help apply\n'
        '\n'
        'Config env vars (set in .env or environment):\n'
        '  COLOUR_MATRIX                 starting matrix text\n'
        '  COLOUR_MATRIX_PREVIEW_HEIGHT  preview height in pixels (default 300)\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-matrix',
        description='Preview a 4x5 colour matrix applied to an image.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log diagnostics to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        cmd.add_arguments(p)
        if cmd.uses_matrix:
            _add_matrix_arguments(p)
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: colour-matrix help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def _build_editor(args: argparse.Namespace, settings: Settings) -> MatrixEditor:
    """Resolve the current matrix from settings and the matrix options."""
    default = IDENTITY_MATRIX if args.identity else settings.default_matrix
    editor = MatrixEditor(default=default)

    text = args.matrix
    if args.matrix_file:
        try:
            with open(args.matrix_file, encoding='utf-8') as f:
                text = f.read()
        except OSError as e:
            print(f'Error: cannot read matrix file: {e}', file=sys.stderr)
            sys.exit(1)

    # Invalid custom text leaves the previous matrix in place
    if text is not None and not editor.apply_custom(text):
        print('colour-matrix: custom matrix is invalid, keeping current matrix', file=sys.stderr)

    for index, value in args.edits:
        editor.set_coefficient(index, value)
    return editor


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(name)s: %(message)s',
        stream=sys.stderr,
    )

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'colour-matrix: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    cmd = registry.get(args.command)
    args.settings = Settings.from_env()
    if cmd.uses_matrix:
        args.editor = _build_editor(args, args.settings)

    code = cmd.execute(args)
    if code:
        sys.exit(code)


if __name__ == '__main__':
    main()
