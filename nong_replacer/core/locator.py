"""
Locates the game's songs directory for the running platform.
"""

import logging
import sys
from pathlib import Path

from nong_replacer.models.config import (
    LINUX_SONGS_SUBPATH,
    MACOS_SONGS_SUBPATH,
    WINDOWS_SONGS_SUBPATH,
    ReplacerConfig,
)

log = logging.getLogger(__name__)


def platform_identity(platform: str | None = None) -> str:
    """Maps sys.platform onto 'windows', 'linux' or 'macos' (anything else passes through)."""
    platform = sys.platform if platform is None else platform
    if platform.startswith("win"):
        return "windows"
    if platform.startswith("linux"):
        return "linux"
    if platform == "darwin":
        return "macos"
    return platform


def is_usable_songs_dir(path: Path) -> bool:
    """The directory must exist and hold at least one entry."""
    if not path.is_dir():
        return False
    try:
        return any(path.iterdir())
    except OSError:
        return False


class SongsDirLocator:
    """Base class: builds a candidate path and validates it."""

    def candidate(self, config: ReplacerConfig) -> Path | None:
        raise NotImplementedError

    def locate(self, config: ReplacerConfig) -> Path | None:
        path = self.candidate(config)
        if path is None:
            return None
        if not is_usable_songs_dir(path):
            log.debug(f"Songs directory candidate '{path}' is missing or empty")
            return None
        return path


class WindowsLocator(SongsDirLocator):
    def candidate(self, config: ReplacerConfig) -> Path | None:
        if config.local_app_data is None:
            return None
        return config.local_app_data / WINDOWS_SONGS_SUBPATH


class LinuxLocator(SongsDirLocator):
    """The game runs under Proton, inside Steam's simulated Windows profile."""

    def candidate(self, config: ReplacerConfig) -> Path | None:
        return config.home / LINUX_SONGS_SUBPATH


class MacOSLocator(SongsDirLocator):
    def candidate(self, config: ReplacerConfig) -> Path | None:
        return config.home / MACOS_SONGS_SUBPATH


class UnsupportedLocator(SongsDirLocator):
    def candidate(self, config: ReplacerConfig) -> Path | None:
        return None


_LOCATORS: dict[str, type[SongsDirLocator]] = {
    "windows": WindowsLocator,
    "linux": LinuxLocator,
    "macos": MacOSLocator,
}


def locator_for(identity: str) -> SongsDirLocator:
    return _LOCATORS.get(identity, UnsupportedLocator)()


def find_songs_dir(config: ReplacerConfig, identity: str | None = None) -> Path | None:
    """
    Returns the game's songs directory, or None if it cannot be found.

    None is not an error: the caller falls back to asking the user.
    """
    identity = identity or platform_identity()
    path = locator_for(identity).locate(config)
    if path:
        log.debug(f"Located songs directory for {identity}: '{path}'")
    return path
