"""MatrixEditor — the current matrix owned by the presentation layer.

The transformer is stateless; whatever front end is in use keeps one of
these and hands ``editor.matrix`` (a copy) to ``apply_matrix`` whenever the
image or the coefficients change.
"""

from __future__ import annotations

import logging
import math

from colour_matrix.core import matrix_parser
from colour_matrix.core.report import format_matrix
from colour_matrix.core.types import COEFFICIENT_LABELS, DEFAULT_MATRIX, MATRIX_SIZE, ROW_LENGTH

logger = logging.getLogger(__name__)


def _field_value(value: float | str) -> float:
    """Read a numeric field the way a browser number input would: NaN when unreadable."""
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return math.nan
    return float(value)


class MatrixEditor:
    """Holds 20 coefficients and the edits allowed on them."""

    def __init__(self, coefficients=None, default=DEFAULT_MATRIX):
        self._default = tuple(float(v) for v in default)
        values = self._default if coefficients is None else coefficients
        values = [float(v) for v in values]
        if len(values) != MATRIX_SIZE or len(self._default) != MATRIX_SIZE:
            raise ValueError(f'a colour matrix needs exactly {MATRIX_SIZE} coefficients')
        self._coefficients = values

    @property
    def matrix(self) -> list[float]:
        return list(self._coefficients)

    def set_coefficient(self, index: int, value: float | str) -> None:
        """Replace one coefficient, as when a single field is edited."""
        if not 0 <= index < MATRIX_SIZE:
            raise IndexError(f'coefficient index {index} out of range 0..{MATRIX_SIZE - 1}')
        self._coefficients[index] = _field_value(value)

    def reset(self) -> None:
        self._coefficients = list(self._default)

    def apply_custom(self, text: str) -> bool:
        """Replace the whole matrix from text. Leaves it untouched if the text is invalid."""
        if not text or not matrix_parser.validate(text):
            logger.debug('custom matrix ignored; keeping current matrix')
            return False
        self._coefficients = matrix_parser.parse(text)
        return True

    def as_text(self) -> str:
        return format_matrix(self._coefficients)

    def rows(self) -> list[list[tuple[str, float]]]:
        """Four rows of (label, value), one per output channel."""
        pairs = list(zip(COEFFICIENT_LABELS, self._coefficients))
        return [pairs[i : i + ROW_LENGTH] for i in range(0, MATRIX_SIZE, ROW_LENGTH)]

    def __repr__(self) -> str:
        return f'MatrixEditor({self.as_text()})'
