"""
Turns the user's source token into a local file.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from nong_replacer.exceptions import SourceError
from nong_replacer.media.downloader import Downloader
from nong_replacer.models.source import ResolvedSource, SourceKind, SourceReference

log = logging.getLogger(__name__)

FilePicker = Callable[[], Optional[Path]]


class SourceResolver:
    """
    Resolves a SourceReference exactly once.

    URLs are downloaded into an owned temporary file, local paths are used as
    given, and a missing token opens the file picker.
    """

    def __init__(self, downloader: Downloader, pick_file: FilePicker):
        self.downloader = downloader
        self.pick_file = pick_file

    def resolve(self, reference: SourceReference) -> ResolvedSource:
        if reference.kind is SourceKind.REMOTE_URL:
            log.info(f"Downloading '{reference.value}'...")
            return self.downloader.download(reference.value)

        if reference.kind is SourceKind.INTERACTIVE:
            picked = self.pick_file()
            if not picked:
                raise SourceError("no song provided.")
            path = Path(picked)
        else:
            path = Path(reference.value)

        if not path.is_file():
            raise SourceError(f"song file '{path}' does not exist.")
        log.debug(f"Using local song file '{path}'")
        return ResolvedSource(path=path, owned=False)
