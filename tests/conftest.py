"""
Pytest configuration for sc3tools tests
"""

import json
import sys
from pathlib import Path

import pytest

# Make `import sc3tools` work when tests run from a source checkout
_REPO_DIR = Path(__file__).resolve().parent.parent
if str(_REPO_DIR) not in sys.path:
    sys.path.insert(0, str(_REPO_DIR))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single function")
    config.addinivalue_line(
        "markers", "integration: tests that load the bundled game resources"
    )


@pytest.fixture
def resources_root(tmp_path):
    """Empty resource root for hand-written game folders"""
    root = tmp_path / "resources"
    root.mkdir()
    return root


@pytest.fixture
def make_game(resources_root):
    """Write charset.utf8 / compound_chars.map for a test game"""

    def _make_game(resource_dir, charset=None, compound_chars=None):
        game_dir = resources_root / resource_dir
        game_dir.mkdir(exist_ok=True)
        if charset is not None:
            (game_dir / "charset.utf8").write_text(charset, encoding="utf-8")

        if compound_chars is not None:
            (game_dir / "compound_chars.map").write_text(
                compound_chars, encoding="utf-8"
            )

        return game_dir

    return _make_game


@pytest.fixture
def games_path(tmp_path):
    """games.json with two test games sharing an alias"""
    path = tmp_path / "games.json"
    path.write_text(
        json.dumps(
            {
                "games": [
                    {
                        "id": "first",
                        "name": "First Game",
                        "aliases": ["first", "shared"],
                        "fullwidth_blocklist": "'",
                    },
                    {
                        "id": "second",
                        "name": "Second Game",
                        "resource_dir": "second_dir",
                        "aliases": ["second", "shared"],
                        "reserved_codepoints": ["E100", "E1FF"],
                    },
                ]
            }
        ),
        encoding="utf-8",
    )
    return path
