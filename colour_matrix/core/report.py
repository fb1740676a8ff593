"""Report builder — text and JSON output for colour-matrix results."""

import json
import os
from typing import Any

from colour_matrix.core.types import COEFFICIENT_LABELS, ROW_LENGTH, Report


def format_matrix(matrix) -> str:
    """Render coefficients as ``[v0, v1, ..., v19]`` with one decimal place.

    This is a display/copy projection: parsing it back only recovers the
    values rounded to 0.1.
    """
    return '[' + ', '.join(f'{float(v):.1f}' for v in matrix) + ']'


def format_grid(matrix) -> str:
    """Render the matrix as four labelled rows, one per output channel."""
    values = list(matrix)
    width = max(len(label) for label in COEFFICIENT_LABELS)
    lines = []
    for start in range(0, len(values), ROW_LENGTH):
        for label, value in zip(COEFFICIENT_LABELS[start : start + ROW_LENGTH], values[start : start + ROW_LENGTH]):
            lines.append(f'  {label:<{width}}  {value:8.3f}')
        lines.append('')
    return '\n'.join(lines).rstrip('\n')


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.image_path:
        dim = f'{report.image_width}×{report.image_height}'
        lines.append(f'colour-matrix: {report.image_path} ({dim})')
    lines.append(f'matrix: {format_matrix(report.matrix)}')

    for name, data in report.outputs.items():
        lines.append(f'  {name}: {os.path.basename(data["file"])} ({data["width"]}×{data["height"]})')

    for message in report.warnings:
        lines.append(f'warning: {message}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'matrix': [float(v) for v in report.matrix]}
    if report.image_path:
        obj['image'] = report.image_path
        obj['dimensions'] = {'width': report.image_width, 'height': report.image_height}
    obj['outputs'] = report.outputs
    if report.warnings:
        obj['warnings'] = list(report.warnings)
    return json.dumps(obj, indent=2)


def render(report: Report, as_json: bool = False) -> str:
    return format_json(report) if as_json else format_text(report)
