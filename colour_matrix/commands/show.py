"""Print the current matrix.

Default output is the copy text: [v0, v1, ..., v19] with one decimal
place per value. Pasting it back into --matrix is lossy to 0.1.
--grid prints the 20 coefficients with their labels, one block per
output channel.

Example:
    colour-matrix show
    colour-matrix show --grid --set 4=12.5
"""

from colour_matrix.core.report import format_grid, render
from colour_matrix.core.types import Command, Report

command = Command(
    name='show',
    help='Print the current matrix as copy text or a labelled grid.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('-g', '--grid', action='store_true', help='Print labelled coefficients')


@command.run
def run(args) -> int:
    editor = args.editor
    if args.json:
        print(render(Report(matrix=editor.matrix), as_json=True))
    elif args.grid:
        print(format_grid(editor.matrix))
    else:
        print(editor.as_text())
    return 0
