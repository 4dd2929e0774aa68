"""Character tables for the text encoding of MAGES. visual novels"""
from ._resources import ResourceNotFoundError, __version__
from .charset import build_charset, load_charset
from .compound import (
    CompoundMapSyntaxError,
    PuaMapping,
    expand_compound_map,
    parse_compound_map,
)
from .config import GameConfig
from .gamedef import Catalog, GameDef, get, get_by_alias, get_catalog
from .text import EncodingMaps, MissingPuaCharsError

__all__ = [
    "__version__",
    "Catalog",
    "CompoundMapSyntaxError",
    "EncodingMaps",
    "GameConfig",
    "GameDef",
    "MissingPuaCharsError",
    "PuaMapping",
    "ResourceNotFoundError",
    "build_charset",
    "expand_compound_map",
    "get",
    "get_by_alias",
    "get_catalog",
    "load_charset",
    "parse_compound_map",
]
