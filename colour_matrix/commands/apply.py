"""Apply the current matrix to an image and save the result.

Loads <image>, converts it to RGBA, transforms every pixel at full size
and writes <output>. The format follows the output extension; JPEG output
drops the alpha channel.

Example:
    colour-matrix apply photo.png out.png
    colour-matrix apply photo.png out.png --matrix-file sepia.txt --set 19=0
"""

import os
import sys

from colour_matrix.core.imaging import load_rgba
from colour_matrix.core.report import render
from colour_matrix.core.transform import apply_to_image
from colour_matrix.core.types import Command, Report

command = Command(
    name='apply',
    help='Transform an image with the current matrix and save it.',
)

_NO_ALPHA = {'.jpg', '.jpeg', '.bmp'}


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('image', help='Path to source image')
    parser.add_argument('output', help='Path to write the transformed image')


@command.run
def run(args) -> int:
    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        return 1

    image = load_rgba(args.image)
    matrix = args.editor.matrix
    result = apply_to_image(image, matrix)

    report = Report(matrix=matrix, image_path=args.image, image_width=image.width, image_height=image.height)

    if os.path.splitext(args.output)[1].lower() in _NO_ALPHA:
        result = result.convert('RGB')
        report.warn('alpha channel dropped for output format')

    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    result.save(args.output)
    report.add_output('transformed', args.output, result.width, result.height)

    print(render(report, as_json=args.json))
    return 0
