"""Lookup tables for the game text encoding"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

from .const import NULL_CHAR

__all__ = ["EncodingMaps", "MissingPuaCharsError"]


class MissingPuaCharsError(Exception):
    """Compound characters that have no glyph in the charset."""

    def __init__(self, missing_pua_chars: Sequence[str], full_name: str = ""):
        self.missing_pua_chars = list(missing_pua_chars)
        self.full_name = full_name

        chars_str = ", ".join(f"'{escape_char(c)}'" for c in self.missing_pua_chars)
        if full_name:
            message = (
                f"Error while constructing encoding maps for {full_name}. "
                "The following Private Use Area characters were not found "
                f"in the charset: [{chars_str}]"
            )
        else:
            message = (
                "Private Use Area characters not found in the charset: "
                f"[{chars_str}]"
            )

        super().__init__(message)


def escape_char(ch: str) -> str:
    """\\uXXXX form of a character"""
    return ch.encode("unicode_escape").decode("ascii")


@dataclass(frozen=True)
class EncodingMaps:
    """Code <-> character tables consumed by the encoder and decoder."""

    code_to_char: Mapping[int, str]
    char_to_code: Mapping[str, int]
    compound_to_char: Mapping[str, str]

    @staticmethod
    def new(
        charset: Sequence[str], compound_chars: Mapping[str, str]
    ) -> "EncodingMaps":
        code_to_char: Dict[int, str] = {}
        char_to_code: Dict[str, int] = {}

        for code, ch in enumerate(charset):
            if ch == NULL_CHAR:
                continue

            code_to_char[code] = ch

            # Some glyphs are drawn more than once; encode to the first
            char_to_code.setdefault(ch, code)

        missing_pua_chars: List[str] = sorted(
            ch for ch in compound_chars if ch not in char_to_code
        )
        if missing_pua_chars:
            raise MissingPuaCharsError(missing_pua_chars)

        compound_to_char: Dict[str, str] = {}
        for pua_char in sorted(compound_chars):
            if compound_chars[pua_char]:
                compound_to_char.setdefault(compound_chars[pua_char], pua_char)

        return EncodingMaps(
            code_to_char=MappingProxyType(code_to_char),
            char_to_code=MappingProxyType(char_to_code),
            compound_to_char=MappingProxyType(compound_to_char),
        )

    def decode_code(self, code: int) -> Optional[str]:
        return self.code_to_char.get(code)

    def encode_char(self, ch: str) -> Optional[int]:
        return self.char_to_code.get(ch)

    def compound_for(self, text: str) -> Optional[str]:
        """PUA character whose glyph stands for *text*, if any."""
        return self.compound_to_char.get(text)
