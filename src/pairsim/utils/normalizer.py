import io
import logging
import re
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

# ASCII whitespace only: space, \t, \n, \r, \f, \v
_WHITESPACE_RUN = re.compile(r'\s+', re.ASCII)


def normalize_lines(lines: Iterable[str]) -> str:
    """Collapse whitespace runs in every line and join the lines with single spaces.

    Lines may still carry their trailing newline; it is dropped first so that a
    file ending with a newline does not produce a trailing separator.
    """
    return ' '.join(_WHITESPACE_RUN.sub(' ', line.removesuffix('\n')) for line in lines)


def normalize_text(text: str) -> str:
    # StringIO with newline=None translates \r\n and \r the same way open() does
    return normalize_lines(io.StringIO(text, newline=None))


def normalize_file(path: Path) -> str:
    """Read a UTF-8 text file and return its one-line normalized content.

    Raises:
        OSError: The file is missing, unreadable or vanished.
        UnicodeDecodeError: The content is not valid UTF-8.
    """
    logger.debug(f"Normalizing: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        return normalize_lines(f)
