"""Regex-based parser for free-form colour matrix text.

Accepts text such as ``[1.5, 0.1, 0.1, 0.0, 0.0, ...]`` with any amount of
whitespace and any number of square brackets. After normalisation the text
must be exactly 20 comma-separated decimal literals (no exponents).

Two-step contract: call ``validate`` first, then ``parse`` only on success.
``parse_checked`` combines both and raises MalformedMatrixText instead.
"""

import logging
import math
import re

from colour_matrix.core.types import MATRIX_SIZE, MalformedMatrixText

logger = logging.getLogger(__name__)

# Optional sign, then digits with an optional point (5, 5., 5.5) or a point with digits (.5)
_NUMBER = r'[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)'
_MATRIX_RE = re.compile(rf'{_NUMBER}(?:,{_NUMBER})*')
_BRACKETS_RE = re.compile(r'[\[\]]')
_WHITESPACE_RE = re.compile(r'\s+')


def normalize(text: str) -> str:
    """Strip brackets and all whitespace."""
    cleaned = _BRACKETS_RE.sub('', text)
    cleaned = _WHITESPACE_RE.sub('', cleaned)
    return cleaned.strip()


def rejection_reason(text: str) -> str | None:
    """Return why ``text`` is not a valid matrix, or None if it is."""
    cleaned = normalize(text)

    if not _MATRIX_RE.fullmatch(cleaned):
        return f'{cleaned!r} is not a comma-separated list of numbers'

    values = cleaned.split(',')
    if len(values) != MATRIX_SIZE:
        return f'matrix has {len(values)} values, expected exactly {MATRIX_SIZE}'

    # Independent of the regex: every field must still read as a finite float
    for value in values:
        try:
            number = float(value)
        except ValueError:
            return f'{value!r} is not a valid number'
        if not math.isfinite(number):
            return f'{value!r} is not a finite number'

    return None


def validate(text: str) -> bool:
    """True if ``text`` normalises to exactly 20 well-formed finite numbers."""
    reason = rejection_reason(text)
    if reason is not None:
        logger.debug('matrix rejected: %s', reason)
        return False
    return True


def _to_float(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        return math.nan


def parse(text: str) -> list[float]:
    """Convert matrix text to floats without validating it.

    Only meaningful for text that passed ``validate``. Anything else gives
    an unspecified result: unreadable fields become NaN and the length may
    differ from 20.
    """
    return [_to_float(value) for value in normalize(text).split(',')]


def parse_checked(text: str) -> list[float]:
    """Validate and parse in one step. Raises MalformedMatrixText on bad input."""
    reason = rejection_reason(text)
    if reason is not None:
        raise MalformedMatrixText(text, reason)
    return parse(text)
