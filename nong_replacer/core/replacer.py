"""
Sequences a song replacement and owns the lifetime of any downloaded file.
"""

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from nong_replacer.core.locator import find_songs_dir
from nong_replacer.core.resolver import FilePicker, SourceResolver
from nong_replacer.exceptions import SongsDirectoryError
from nong_replacer.media.downloader import Downloader
from nong_replacer.media.transcoder import Transcoder
from nong_replacer.models.config import SONG_EXTENSION, ReplacerConfig
from nong_replacer.models.source import SourceReference

log = logging.getLogger(__name__)

DirectoryPicker = Callable[[], Optional[Path]]


@dataclass
class ReplaceResult:
    destination: Path
    transcoded: bool


def destination_for(songs_dir: Path, song_id: int) -> Path:
    return songs_dir / f"{song_id}.{SONG_EXTENSION}"


class SongReplacer:
    """
    Locates the songs directory, resolves the source and places the song.

    A downloaded source is removed when ``replace`` returns or raises.
    """

    def __init__(
        self,
        config: ReplacerConfig,
        pick_file: FilePicker,
        pick_directory: DirectoryPicker,
        downloader: Downloader | None = None,
        transcoder: Transcoder | None = None,
        platform: str | None = None,
    ):
        self.config = config
        self.pick_directory = pick_directory
        self.platform = platform
        self.resolver = SourceResolver(downloader or Downloader(), pick_file)
        self.transcoder = transcoder or Transcoder(config.ffmpeg_dir)

    def songs_dir(self) -> Path:
        """Returns the located songs directory, asking the user if it cannot be found."""
        located = find_songs_dir(self.config, self.platform)
        if located:
            return located

        log.warning("Songs directory could not be found, please pick manually.")
        picked = self.pick_directory()
        if not picked:
            raise SongsDirectoryError(
                "could not locate the GD songs directory and user didn't provide one."
            )
        return Path(picked)

    def replace(self, song_id: int, source_token: str | None) -> ReplaceResult:
        destination = destination_for(self.songs_dir(), song_id)
        reference = SourceReference.from_token(source_token)

        with ExitStack() as stack:
            source = self.resolver.resolve(reference)
            stack.callback(source.release)
            log.debug(f"Placing '{source.path}' at '{destination}'")
            transcoded = self.transcoder.place(source.path, destination)

        return ReplaceResult(destination=destination, transcoded=transcoded)
