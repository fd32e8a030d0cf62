"""
Pydantic model for application configuration.
Settings come from the environment; the encoder parameters are fixed.
"""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# The game looks songs up as "<song id>.mp3"
SONG_EXTENSION = "mp3"
TEMP_PREFIX = "gd-nong-temp"

# Offered by the interactive file picker
AUDIO_EXTENSIONS = ("wav", "mp3", "ogg", "flac", "aac", "m4a", "opus")

# Parameters the game's audio engine reliably plays back
ENCODER_SETTINGS = {
    "sample_rate": 44100,
    "channels": 2,
    "bitrate": "192k",
}

# Songs directory relative to each platform's base directory
WINDOWS_SONGS_SUBPATH = Path("GeometryDash")
LINUX_SONGS_SUBPATH = Path(
    ".local/share/Steam/steamapps/compatdata/322170/pfx/drive_c/users/steamuser"
    "/AppData/Local/GeometryDash"
)
MACOS_SONGS_SUBPATH = Path("Library/Caches")


class ReplacerConfig(BaseModel):
    """A validated configuration model for the application."""

    ffmpeg_dir: Path | None = None
    local_app_data: Path | None = None
    home: Path = Field(default_factory=Path.home)

    class Config:
        """Pydantic model configuration."""

        str_strip_whitespace = True

    @field_validator("ffmpeg_dir", "local_app_data", mode="before")
    @classmethod
    def blank_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ReplacerConfig":
        """Builds the configuration from FFMPEG_PATH and LOCALAPPDATA."""
        env = os.environ if environ is None else environ
        return cls(
            ffmpeg_dir=env.get("FFMPEG_PATH"),
            local_app_data=env.get("LOCALAPPDATA"),
        )
