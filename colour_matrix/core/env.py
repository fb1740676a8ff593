"""Environment variable loading and settings for colour-matrix.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  COLOUR_MATRIX                 matrix text to start from instead of the built-in default
  COLOUR_MATRIX_PREVIEW_HEIGHT  height in pixels of the transformed preview (default 300)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from colour_matrix.core import matrix_parser
from colour_matrix.core.imaging import PREVIEW_HEIGHT
from colour_matrix.core.types import DEFAULT_MATRIX

logger = logging.getLogger(__name__)


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        value = raw_value.strip().strip('"').strip("'")
        if key:
            result[key] = value
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        if key not in os.environ:
            os.environ[key] = value

    return path


@dataclass
class Settings:
    """Defaults for the CLI, resolved from the environment."""

    default_matrix: tuple[float, ...] = DEFAULT_MATRIX
    preview_height: int = PREVIEW_HEIGHT

    @classmethod
    def from_env(cls, environ=None) -> Settings:
        environ = os.environ if environ is None else environ
        settings = cls()

        text = environ.get('COLOUR_MATRIX')
        if text:
            if matrix_parser.validate(text):
                settings.default_matrix = tuple(matrix_parser.parse(text))
            else:
                logger.warning('COLOUR_MATRIX is not a valid matrix, using the built-in default')

        height = environ.get('COLOUR_MATRIX_PREVIEW_HEIGHT')
        if height:
            try:
                settings.preview_height = int(height)
            except ValueError:
                logger.warning('COLOUR_MATRIX_PREVIEW_HEIGHT=%r is not an integer, using %d', height, PREVIEW_HEIGHT)
            else:
                if settings.preview_height <= 0:
                    logger.warning('COLOUR_MATRIX_PREVIEW_HEIGHT must be positive, using %d', PREVIEW_HEIGHT)
                    settings.preview_height = PREVIEW_HEIGHT

        return settings
