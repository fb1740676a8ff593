"""Write side-by-side preview images: original and transformed.

Saves <tmp_dir>/original.png at the source size, and
<tmp_dir>/transformed.png scaled to the preview height (default 300 px,
or COLOUR_MATRIX_PREVIEW_HEIGHT) with the current matrix applied to the
scaled pixels.

Example:
    colour-matrix preview ./tmp photo.png
    colour-matrix preview ./tmp photo.png --max-height 480 --set 0=2.0
"""

import os
import sys

from colour_matrix.core.imaging import load_rgba, scale_to_height
from colour_matrix.core.report import render
from colour_matrix.core.transform import apply_to_image
from colour_matrix.core.types import Command, Report

command = Command(
    name='preview',
    help='Write original.png and a scaled transformed.png into a working directory.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('tmp_dir', help='Working directory for preview images')
    parser.add_argument('image', help='Path to source image')
    parser.add_argument('--max-height', type=int, default=None, metavar='N', help='Preview height in pixels')


@command.run
def run(args) -> int:
    if not os.path.isfile(args.image):
        print(f'Error: image not found: {args.image}', file=sys.stderr)
        return 1

    height = args.max_height if args.max_height is not None else args.settings.preview_height
    if height <= 0:
        print(f'Error: --max-height must be positive, got {height}', file=sys.stderr)
        return 1

    image = load_rgba(args.image)
    matrix = args.editor.matrix
    transformed = apply_to_image(scale_to_height(image, height), matrix)

    os.makedirs(args.tmp_dir, exist_ok=True)
    original_path = os.path.join(args.tmp_dir, 'original.png')
    transformed_path = os.path.join(args.tmp_dir, 'transformed.png')
    image.save(original_path)
    transformed.save(transformed_path)

    report = Report(matrix=matrix, image_path=args.image, image_width=image.width, image_height=image.height)
    report.add_output('original', original_path, image.width, image.height)
    report.add_output('transformed', transformed_path, transformed.width, transformed.height)

    print(render(report, as_json=args.json))
    return 0
