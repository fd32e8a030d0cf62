"""
Value types describing where a song comes from and what it resolved to.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from nong_replacer.exceptions import SongIdError
from nong_replacer.utils.path import is_url

log = logging.getLogger(__name__)

MAX_SONG_ID = 2**32 - 1


def parse_song_id(token: str) -> int:
    """Parses the song ID token; it must be a positive integer."""
    if not (token.isascii() and token.isdigit()):
        raise SongIdError(f"invalid song ID '{token}': expected a positive number")
    song_id = int(token)
    if not 0 < song_id <= MAX_SONG_ID:
        raise SongIdError(f"song ID {song_id} is out of range")
    return song_id


class SourceKind(Enum):
    LOCAL_PATH = "local"
    REMOTE_URL = "url"
    INTERACTIVE = "interactive"


@dataclass(frozen=True)
class SourceReference:
    """What the user asked for, before anything is fetched or picked."""

    kind: SourceKind
    value: str | None = None

    @classmethod
    def from_token(cls, token: str | None) -> "SourceReference":
        if token is None:
            return cls(SourceKind.INTERACTIVE)
        if is_url(token):
            return cls(SourceKind.REMOTE_URL, token)
        return cls(SourceKind.LOCAL_PATH, token)


@dataclass
class ResolvedSource:
    """
    A local file ready to be copied or encoded.

    When ``owned`` is set the file is a temporary download and whoever holds
    this object is responsible for calling ``release()``.
    """

    path: Path
    owned: bool = False

    def release(self) -> None:
        """Deletes the file if it is an owned temporary. Safe to call twice."""
        if not self.owned:
            return
        try:
            os.remove(self.path)
            log.debug(f"Removed temporary file '{self.path}'")
        except FileNotFoundError:
            pass
        except OSError as e:
            log.warning(f"Could not remove temporary file '{self.path}': {e}")
        self.owned = False
