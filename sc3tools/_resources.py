"""Shared access to package resources"""
import logging
import os
import typing
from pathlib import Path
from typing import Optional, Union

try:
    import importlib.resources

    files = importlib.resources.files
except (ImportError, AttributeError):
    # Backport for Python < 3.9
    import importlib_resources  # type: ignore

    files = importlib_resources.files

_PACKAGE = "sc3tools"
_DIR = Path(typing.cast(os.PathLike, files(_PACKAGE)))
_LOGGER = logging.getLogger(__name__)

RESOURCES_DIR = _DIR / "resources"
GAMES_PATH = _DIR / "games.json"

__version__ = (_DIR / "VERSION").read_text(encoding="utf-8").strip()


class ResourceNotFoundError(FileNotFoundError):
    """A resource file for a declared game is missing from the package."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Missing resource file: {path}")
        self.path = Path(path)


def read_resource(
    resource_dir: str, name: str, root: Optional[Union[str, Path]] = None
) -> str:
    """Read <root>/<resource_dir>/<name> as UTF-8 text."""
    if root is None:
        root = RESOURCES_DIR

    path = Path(root) / resource_dir / name
    if not path.is_file():
        raise ResourceNotFoundError(path)

    _LOGGER.debug("Loading %s", path)
    return path.read_text(encoding="utf-8")
