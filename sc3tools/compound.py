"""Compound character declarations (compound_chars.map)

Each line of the resource maps a Private Use Area codepoint, or an inclusive
range of them, to the text that the game's ligature glyph stands for:

    [E01C]=meow
    [E01C-E01F]=¹⁸

Hex digits are case-insensitive and the text may be empty.
"""
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List

__all__ = [
    "CompoundMapSyntaxError",
    "PuaMapping",
    "expand_compound_map",
    "parse_compound_map",
]

_RE_DECLARATION = re.compile(
    r"\[(?P<start>[0-9A-Fa-f]+)(?:-(?P<end>[0-9A-Fa-f]+))?\]=(?P<text>[^\r\n]*)"
)

_SURROGATES = range(0xD800, 0xE000)
_MAX_CODEPOINT = 0x10FFFF


class CompoundMapSyntaxError(ValueError):
    """A line of a compound character resource does not parse."""

    def __init__(self, line: str, line_number: int = 1):
        super().__init__(
            f"Invalid compound character declaration on line {line_number}: {line!r}"
        )
        self.line = line
        self.line_number = line_number


def _codepoint(hex_str: str) -> str:
    value = int(hex_str, 16)
    if (value > _MAX_CODEPOINT) or (value in _SURROGATES):
        raise ValueError(f"Not a Unicode scalar value: {hex_str}")

    return chr(value)


@dataclass(frozen=True)
class PuaMapping:
    """Inclusive codepoint range and the text each codepoint expands to."""

    start: str
    end: str
    text: str

    def codepoints(self) -> Iterable[str]:
        """Codepoints of the range in ascending order (none if end < start)."""
        return (chr(c) for c in range(ord(self.start), ord(self.end) + 1))

    @staticmethod
    def parse(line: str, line_number: int = 1) -> "PuaMapping":
        """Parse a single [HEX]=TEXT or [HEX-HEX]=TEXT declaration."""
        match = _RE_DECLARATION.fullmatch(line)
        if match is None:
            raise CompoundMapSyntaxError(line, line_number)

        try:
            start = _codepoint(match.group("start"))
            end = start
            if match.group("end") is not None:
                end = _codepoint(match.group("end"))
        except ValueError as err:
            raise CompoundMapSyntaxError(line, line_number) from err

        return PuaMapping(start=start, end=end, text=match.group("text"))


def parse_compound_map(text: str) -> List[PuaMapping]:
    """Parse a whole resource, one declaration per line.

    Any bad line rejects the whole resource. A final line break ends the last
    declaration, so it does not count as an empty line.
    """
    if not text:
        return []

    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    mappings: List[PuaMapping] = []
    for line_idx, line in enumerate(lines):
        if line.endswith("\r"):
            line = line[:-1]

        mappings.append(PuaMapping.parse(line, line_number=line_idx + 1))

    return mappings


def expand_compound_map(mappings: Iterable[PuaMapping]) -> Dict[str, str]:
    """Flatten ranges into {codepoint: text}.

    Declarations are applied in order, so a codepoint covered twice keeps the
    text of the later one.
    """
    compound_chars: Dict[str, str] = {}
    for mapping in mappings:
        for codepoint in mapping.codepoints():
            compound_chars[codepoint] = mapping.text

    return compound_chars
