"""
Places a song file at its destination, converting it with ffmpeg only when the
source container differs from the destination's.
"""

import logging
import shutil
import subprocess
from pathlib import Path

from nong_replacer.exceptions import TranscodeError
from nong_replacer.models.config import ENCODER_SETTINGS
from nong_replacer.utils.path import file_extension

log = logging.getLogger(__name__)


def locate_ffmpeg(ffmpeg_dir: Path | None = None) -> str:
    """FFMPEG_PATH names a directory holding the binary; otherwise search PATH."""
    if ffmpeg_dir is not None:
        return str(Path(ffmpeg_dir) / "ffmpeg")
    return shutil.which("ffmpeg") or "ffmpeg"


class Transcoder:
    """Copies or encodes a source file onto the destination path."""

    def __init__(
        self,
        ffmpeg_dir: Path | None = None,
        settings: dict | None = None,
    ):
        self.ffmpeg_dir = ffmpeg_dir
        self.settings = settings or ENCODER_SETTINGS

    def build_command(self, source: Path, destination: Path) -> list[str]:
        """
        Builds the ffmpeg invocation: video/cover streams dropped, fixed sample
        rate, channel count and bitrate, existing output overwritten.
        """
        return [
            locate_ffmpeg(self.ffmpeg_dir),
            "-y",
            "-i",
            str(source),
            "-vn",
            "-ar",
            str(self.settings["sample_rate"]),
            "-ac",
            str(self.settings["channels"]),
            "-b:a",
            str(self.settings["bitrate"]),
            str(destination),
        ]

    def place(self, source: Path, destination: Path) -> bool:
        """
        Puts ``source`` at ``destination``.

        Returns:
            True if ffmpeg was run, False if the bytes were copied verbatim.

        Raises:
            TranscodeError: If either path lacks an extension, the copy fails,
            ffmpeg cannot be started, or ffmpeg exits non-zero.
        """
        source_ext = file_extension(source)
        dest_ext = file_extension(destination)
        if source_ext is None or dest_ext is None:
            missing = source if source_ext is None else destination
            raise TranscodeError(f"cannot determine the format of '{missing}': no extension")

        if source_ext == dest_ext:
            self._copy(source, destination)
            return False

        self._encode(source, destination)
        return True

    def _copy(self, source: Path, destination: Path) -> None:
        log.debug(f"Copying '{source}' to '{destination}'")
        try:
            shutil.copyfile(source, destination)
        except shutil.SameFileError:
            log.debug("Source is already the destination file, nothing to copy.")
        except OSError as e:
            raise TranscodeError(f"failed to copy '{source}' to '{destination}': {e}") from e

    def _encode(self, source: Path, destination: Path) -> None:
        cmd = self.build_command(source, destination)
        log.info(f"Converting with ffmpeg: {' '.join(cmd)}")
        try:
            completed = subprocess.run(
                cmd, capture_output=True, text=True, stdin=subprocess.DEVNULL
            )
        except OSError as e:
            raise TranscodeError(f"failed to run ffmpeg ('{cmd[0]}'): {e}") from e

        if completed.returncode != 0:
            stdout = completed.stdout or ""
            stderr = completed.stderr or ""
            raise TranscodeError(
                f"ffmpeg exited with code {completed.returncode}\n"
                f"stdout: {stdout.strip()}\n"
                f"stderr: {stderr.strip()}",
                stdout=stdout,
                stderr=stderr,
            )
