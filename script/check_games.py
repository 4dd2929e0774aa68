#!/usr/bin/env python3
"""Build every game definition and print a summary as Markdown.

Exits with an error if any resource is missing or inconsistent.
"""
import argparse
import logging
import sys

from sc3tools import Catalog, CompoundMapSyntaxError, MissingPuaCharsError
from sc3tools._resources import GAMES_PATH, RESOURCES_DIR, ResourceNotFoundError
from sc3tools.const import NULL_CHAR, ROW_WIDTH

_LOGGER = logging.getLogger()


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--games", default=str(GAMES_PATH), help="Path to games.json")
    parser.add_argument(
        "--resources",
        default=str(RESOURCES_DIR),
        help="Directory with a charset.utf8/compound_chars.map folder per game",
    )
    parser.add_argument(
        "--debug", action="store_true", help="Print DEBUG messages to console"
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    _LOGGER.debug(args)

    try:
        catalog = Catalog.load(args.games, resources_root=args.resources)
    except (ResourceNotFoundError, CompoundMapSyntaxError, MissingPuaCharsError) as err:
        _LOGGER.error("%s", err)
        return 1

    print("# Games")
    print("")

    for game_def in catalog:
        num_glyphs = sum(1 for ch in game_def.charset if ch != NULL_CHAR)
        print("*", game_def.full_name, f"(`{game_def.id}`)")
        print("    * aliases:", ", ".join(f"`{a}`" for a in game_def.aliases))
        print(
            "    * charset:",
            f"{len(game_def.charset) // ROW_WIDTH} row(s),",
            f"{num_glyphs} glyph(s)",
        )
        print("    * compound characters:", len(game_def.compound_chars))

        if game_def.reserved_codepoints is not None:
            first, last = game_def.reserved_codepoints
            print(f"    * reserved: U+{ord(first):04X}..U+{ord(last):04X}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
