"""Song ID parsing, source classification and temporary-file ownership."""

from __future__ import annotations

from pathlib import Path

import pytest

from nong_replacer.exceptions import SongIdError
from nong_replacer.models.config import ReplacerConfig
from nong_replacer.models.source import (
    ResolvedSource,
    SourceKind,
    SourceReference,
    parse_song_id,
)
from nong_replacer.utils.path import file_extension, url_suffix


@pytest.mark.parametrize(("token", "expected"), [("12345", 12345), ("42", 42), ("4294967295", 4294967295)])
def test_parse_song_id(token: str, expected: int) -> None:
    assert parse_song_id(token) == expected


@pytest.mark.parametrize("token", ["abc", "12a", "-5", "+5", "1.5", "", "0", " 7 ", "99999999999", "4294967296", "²"])
def test_parse_song_id_rejects_bad_input(token: str) -> None:
    with pytest.raises(SongIdError):
        parse_song_id(token)


@pytest.mark.parametrize(
    ("token", "kind"),
    [
        ("https://example.com/audio.flac", SourceKind.REMOTE_URL),
        ("http://example.com/a.mp3", SourceKind.REMOTE_URL),
        ("httpfoo.mp3", SourceKind.REMOTE_URL),
        ("song.mp3", SourceKind.LOCAL_PATH),
        ("/music/http.mp3", SourceKind.LOCAL_PATH),
    ],
)
def test_source_reference_from_token(token: str, kind: SourceKind) -> None:
    reference = SourceReference.from_token(token)
    assert reference.kind is kind
    assert reference.value == token


def test_source_reference_without_token_is_interactive() -> None:
    assert SourceReference.from_token(None).kind is SourceKind.INTERACTIVE


@pytest.mark.parametrize(
    ("url", "suffix"),
    [
        ("https://example.com/audio.flac", ".flac"),
        ("http://host/track.ogg", ".ogg"),
        ("http://localhost/track", ""),
    ],
)
def test_url_suffix(url: str, suffix: str) -> None:
    assert url_suffix(url) == suffix


def test_url_suffix_drops_path_separators() -> None:
    assert "/" not in url_suffix("https://example.com/stream")


def test_file_extension() -> None:
    assert file_extension(Path("a/b/song.mp3")) == "mp3"
    assert file_extension(Path("song.MP3")) == "MP3"
    assert file_extension(Path("song")) is None


def test_release_removes_owned_file(tmp_path: Path) -> None:
    path = tmp_path / "gd-nong-temp123.ogg"
    path.write_bytes(b"data")
    source = ResolvedSource(path=path, owned=True)
    source.release()
    assert not path.exists()
    # second release is harmless
    source.release()


def test_release_keeps_user_file(tmp_path: Path) -> None:
    path = tmp_path / "mine.mp3"
    path.write_bytes(b"data")
    ResolvedSource(path=path, owned=False).release()
    assert path.exists()


def test_config_from_env_treats_blank_as_unset() -> None:
    config = ReplacerConfig.from_env({"FFMPEG_PATH": "  ", "LOCALAPPDATA": "C:/Users/me/AppData/Local"})
    assert config.ffmpeg_dir is None
    assert config.local_app_data == Path("C:/Users/me/AppData/Local")


def test_config_from_env_reads_ffmpeg_path() -> None:
    config = ReplacerConfig.from_env({"FFMPEG_PATH": "/opt/ffmpeg/bin"})
    assert config.ffmpeg_dir == Path("/opt/ffmpeg/bin")
    assert config.local_app_data is None
