"""Row-aligned glyph table builder"""
from typing import List, Tuple

from .const import NULL_CHAR, ROW_WIDTH, SPACE

__all__ = ["build_charset", "load_charset"]


def _align_up(pos: int, row_width: int) -> int:
    return ((pos + row_width - 1) // row_width) * row_width


def build_charset(
    text: str, row_width: int = ROW_WIDTH, null_char: str = NULL_CHAR
) -> Tuple[str, ...]:
    """Lay out *text* as a table indexed by game character code.

    Each source line starts a new row of *row_width* slots. Every extra line
    break in a run of blank lines skips a single slot rather than a whole row,
    which lets the source leave holes in a row without spelling out padding.

    Spaces are padding too, except at code 0 where the font may really have a
    space glyph. Unused slots hold *null_char* and the table is padded to a
    whole number of rows.
    """
    chars: List[str] = []
    pos = 0
    idx = 0
    num_chars = len(text)

    while idx < num_chars:
        if text[idx] == "\n":
            pos = _align_up(pos, row_width)
            idx += 1
            while idx < num_chars and text[idx] == "\n":
                pos += 1
                idx += 1

        if len(chars) < pos:
            chars.extend(null_char * (pos - len(chars)))

        if idx < num_chars:
            ch = text[idx]
            if (pos != 0) and (ch == SPACE):
                ch = null_char

            chars.append(ch)

        pos += 1
        idx += 1

    if len(chars) % row_width:
        chars.extend(null_char * (row_width - (len(chars) % row_width)))

    return tuple(chars)


def load_charset(text: str, row_width: int = ROW_WIDTH) -> Tuple[str, ...]:
    """Build a table from the contents of a charset.utf8 resource."""
    return build_charset(text.replace("\r", ""), row_width=row_width)
