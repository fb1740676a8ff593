"""Check matrix text without applying it.

Reads TEXT, or --matrix-file, or stdin. Brackets and whitespace are
ignored; what remains must be exactly 20 comma-separated numbers.

Exit status 0 and the parsed matrix when valid; exit status 1 and the
rejection reason otherwise.

Example:
    colour-matrix validate "[1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 1, 0]"
    colour-matrix validate --matrix-file sepia.txt --json
"""

import json
import sys

from colour_matrix.core import matrix_parser
from colour_matrix.core.report import format_matrix
from colour_matrix.core.types import Command

command = Command(
    name='validate',
    help='Check matrix text and report why it is rejected.',
    uses_matrix=False,
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('text', nargs='?', help='Matrix text (default: read stdin)')
    parser.add_argument('-f', '--matrix-file', metavar='PATH', help='Read the matrix text from a file')


def _read_text(args) -> str | None:
    if args.text is not None:
        return args.text
    if args.matrix_file:
        try:
            with open(args.matrix_file, encoding='utf-8') as f:
                return f.read()
        except OSError as e:
            print(f'Error: cannot read matrix file: {e}', file=sys.stderr)
            return None
    return sys.stdin.read()


@command.run
def run(args) -> int:
    text = _read_text(args)
    if text is None:
        return 1

    reason = matrix_parser.rejection_reason(text)
    matrix = matrix_parser.parse(text) if reason is None else None

    if args.json:
        print(json.dumps({'valid': reason is None, 'reason': reason, 'matrix': matrix}, indent=2))
    elif reason is None:
        print(f'valid: {format_matrix(matrix)}')
    else:
        print(f'invalid: {reason}')

    return 0 if reason is None else 1
