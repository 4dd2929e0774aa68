"""Game definition configuration"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class GameConfig:
    """Static metadata of one game, as listed in games.json"""

    id: str
    """Canonical id"""

    name: str
    """Display name"""

    resource_dir: str
    """Folder holding charset.utf8 and compound_chars.map"""

    aliases: Tuple[str, ...]

    reserved_codepoints: Optional[Tuple[str, str]]
    """Inclusive (first, last) codepoint range, informational only"""

    fullwidth_blocklist: Tuple[str, ...]
    """Characters the encoder must not widen"""

    @staticmethod
    def from_dict(config: Dict[str, Any]) -> "GameConfig":
        game_id = config["id"]

        return GameConfig(
            id=game_id,
            name=config["name"],
            resource_dir=config.get("resource_dir", game_id),
            aliases=tuple(config.get("aliases", [game_id])),
            reserved_codepoints=get_codepoint_range(
                config.get("reserved_codepoints")
            ),
            fullwidth_blocklist=tuple(config.get("fullwidth_blocklist", "")),
        )


def get_codepoint_range(
    config_value: Optional[List[str]],
) -> Optional[Tuple[str, str]]:
    """["E12F", "E2AF"] -> ("\\ue12f", "\\ue2af")"""
    if not config_value:
        return None

    first, last = config_value
    return chr(int(first, 16)), chr(int(last, 16))


def load_game_configs(games_path: Union[str, Path]) -> List[GameConfig]:
    with open(games_path, "r", encoding="utf-8") as games_file:
        games_dict = json.load(games_file)

    return [GameConfig.from_dict(game) for game in games_dict["games"]]
