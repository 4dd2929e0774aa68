"""
Tests for compound character declarations
"""
import pytest

from sc3tools.compound import (
    CompoundMapSyntaxError,
    PuaMapping,
    expand_compound_map,
    parse_compound_map,
)


class TestPuaMappingParse:
    """Parsing of a single [HEX]=TEXT / [HEX-HEX]=TEXT line"""

    @pytest.mark.unit
    def test_single_codepoint(self):
        assert PuaMapping.parse("[E01C]=meow") == PuaMapping(
            "\ue01c", "\ue01c", "meow"
        )

    @pytest.mark.unit
    def test_codepoint_range(self):
        assert PuaMapping.parse("[E01C-E01F]=¹⁸") == PuaMapping(
            "\ue01c", "\ue01f", "¹⁸"
        )

    @pytest.mark.unit
    def test_hex_is_case_insensitive(self):
        assert PuaMapping.parse("[e01c-E01f]=x") == PuaMapping.parse("[E01C-E01F]=x")

    @pytest.mark.unit
    def test_empty_text(self):
        assert PuaMapping.parse("[E000]=").text == ""

    @pytest.mark.unit
    def test_text_is_rest_of_line(self):
        mapping = PuaMapping.parse("[E000]=a]=[b - c ")
        assert mapping.text == "a]=[b - c "

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "line",
        [
            "",
            "E000=x",
            "[E000]",
            "[E000] =x",
            "[]=x",
            "[E000-]=x",
            "[-E000]=x",
            "[E0G0]=x",
            "[0xE000]=x",
            "[ E000]=x",
            "[E000-E001-E002]=x",
            "[D800]=x",
            "[110000]=x",
            " [E000]=x",
        ],
    )
    def test_invalid_line(self, line):
        with pytest.raises(CompoundMapSyntaxError):
            PuaMapping.parse(line)

    @pytest.mark.unit
    def test_reversed_range_has_no_codepoints(self):
        mapping = PuaMapping.parse("[E001-E000]=x")
        assert list(mapping.codepoints()) == []


class TestParseCompoundMap:
    """Parsing of a whole compound_chars.map resource"""

    @pytest.mark.unit
    def test_declarations_in_file_order(self):
        mappings = parse_compound_map("[E000]=a\n[E001-E002]=b\n[E000]=c")

        assert [m.text for m in mappings] == ["a", "b", "c"]
        assert mappings[1].start == "\ue001"
        assert mappings[1].end == "\ue002"

    @pytest.mark.unit
    def test_trailing_line_break(self):
        assert len(parse_compound_map("[E000]=a\n[E001]=b\n")) == 2

    @pytest.mark.unit
    def test_crlf_line_endings(self):
        mappings = parse_compound_map("[E000]=a\r\n[E001]=b\r\n")
        assert [m.text for m in mappings] == ["a", "b"]

    @pytest.mark.unit
    def test_empty_resource(self):
        assert parse_compound_map("") == []

    @pytest.mark.unit
    def test_bad_line_rejects_whole_resource(self):
        with pytest.raises(CompoundMapSyntaxError) as exc_info:
            parse_compound_map("[E000]=a\n[E001=b\n[E002]=c")

        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "[E001=b"

    @pytest.mark.unit
    def test_blank_line_is_an_error(self):
        with pytest.raises(CompoundMapSyntaxError):
            parse_compound_map("[E000]=a\n\n[E001]=b")

    @pytest.mark.unit
    def test_syntax_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_compound_map("nonsense")


class TestExpandCompoundMap:
    """Flattening of declarations into {codepoint: text}"""

    @pytest.mark.unit
    def test_single_codepoint_gives_one_entry(self):
        compound_chars = expand_compound_map([PuaMapping.parse("[E01C]=meow")])
        assert compound_chars == {"\ue01c": "meow"}

    @pytest.mark.unit
    def test_range_covers_every_codepoint(self):
        compound_chars = expand_compound_map([PuaMapping.parse("[E01C-E01F]=¹⁸")])

        assert compound_chars == {
            "\ue01c": "¹⁸",
            "\ue01d": "¹⁸",
            "\ue01e": "¹⁸",
            "\ue01f": "¹⁸",
        }

    @pytest.mark.unit
    def test_later_declaration_wins(self):
        compound_chars = expand_compound_map(
            parse_compound_map("[E000-E003]=old\n[E002]=new")
        )

        assert compound_chars["\ue001"] == "old"
        assert compound_chars["\ue002"] == "new"
        assert compound_chars["\ue003"] == "old"

    @pytest.mark.unit
    def test_earlier_single_overwritten_by_range(self):
        compound_chars = expand_compound_map(
            parse_compound_map("[E002]=single\n[E000-E003]=range")
        )

        assert set(compound_chars.values()) == {"range"}
        assert len(compound_chars) == 4

    @pytest.mark.unit
    def test_no_declarations(self):
        assert expand_compound_map([]) == {}
