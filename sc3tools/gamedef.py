"""Game definitions: per-title charset, compound characters and encoding maps"""
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import (
    FrozenSet,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from ._resources import GAMES_PATH, read_resource
from .charset import load_charset
from .compound import expand_compound_map, parse_compound_map
from .config import GameConfig, load_game_configs
from .const import CHARSET_FILE, COMPOUND_CHARS_FILE
from .text import EncodingMaps, MissingPuaCharsError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameDef:
    id: str
    full_name: str
    aliases: Tuple[str, ...]
    reserved_codepoints: Optional[Tuple[str, str]]
    charset: Tuple[str, ...]
    compound_chars: Mapping[str, str]
    encoding_maps: EncodingMaps
    fullwidth_blocklist: FrozenSet[str]

    @staticmethod
    def load(
        game_id: str,
        full_name: str,
        resource_dir: str,
        aliases: Sequence[str],
        reserved_codepoints: Optional[Tuple[str, str]] = None,
        fullwidth_blocklist: Iterable[str] = (),
        resources_root: Optional[Union[str, Path]] = None,
    ) -> "GameDef":
        """Build a game's tables from its resource folder.

        Raises ResourceNotFoundError, CompoundMapSyntaxError or
        MissingPuaCharsError. All of them mean the bundled data is broken.
        """
        charset = load_charset(
            read_resource(resource_dir, CHARSET_FILE, root=resources_root)
        )
        compound_chars = expand_compound_map(
            parse_compound_map(
                read_resource(resource_dir, COMPOUND_CHARS_FILE, root=resources_root)
            )
        )

        try:
            encoding_maps = EncodingMaps.new(charset, compound_chars)
        except MissingPuaCharsError as err:
            raise MissingPuaCharsError(err.missing_pua_chars, full_name) from err

        _LOGGER.debug(
            "Loaded %s: %s code(s), %s compound character(s)",
            full_name,
            len(charset),
            len(compound_chars),
        )

        return GameDef(
            id=game_id,
            full_name=full_name,
            aliases=tuple(aliases),
            reserved_codepoints=reserved_codepoints,
            charset=charset,
            compound_chars=MappingProxyType(compound_chars),
            encoding_maps=encoding_maps,
            fullwidth_blocklist=frozenset(fullwidth_blocklist),
        )

    @staticmethod
    def from_config(
        config: GameConfig, resources_root: Optional[Union[str, Path]] = None
    ) -> "GameDef":
        return GameDef.load(
            config.id,
            config.name,
            config.resource_dir,
            config.aliases,
            reserved_codepoints=config.reserved_codepoints,
            fullwidth_blocklist=config.fullwidth_blocklist,
            resources_root=resources_root,
        )


class Catalog:
    """Ordered, read-only list of game definitions."""

    def __init__(self, defs: Iterable[GameDef]):
        self._defs: Tuple[GameDef, ...] = tuple(defs)

    def __iter__(self) -> Iterator[GameDef]:
        return iter(self._defs)

    def __len__(self) -> int:
        return len(self._defs)

    def get(self, game_id: str) -> GameDef:
        for game_def in self._defs:
            if game_def.id == game_id:
                return game_def

        raise KeyError(game_id)

    def get_by_alias(self, alias: str) -> Optional[GameDef]:
        """First game listing *alias* (case-sensitive), or None."""
        for game_def in self._defs:
            if alias in game_def.aliases:
                return game_def

        return None

    @staticmethod
    def load(
        games_path: Union[str, Path] = GAMES_PATH,
        resources_root: Optional[Union[str, Path]] = None,
    ) -> "Catalog":
        return Catalog(
            GameDef.from_config(config, resources_root=resources_root)
            for config in load_game_configs(games_path)
        )


# -----------------------------------------------------------------------------

_CATALOG: Optional[Catalog] = None
_CATALOG_LOCK = threading.Lock()


def get_catalog() -> Catalog:
    """Bundled games, built on first use."""
    global _CATALOG
    if _CATALOG is None:
        with _CATALOG_LOCK:
            if _CATALOG is None:
                _LOGGER.debug("Loading game definitions from %s", GAMES_PATH)
                _CATALOG = Catalog.load()

    return _CATALOG


def get(game_id: str) -> GameDef:
    return get_catalog().get(game_id)


def get_by_alias(alias: str) -> Optional[GameDef]:
    return get_catalog().get_by_alias(alias)
