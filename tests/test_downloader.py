"""Remote sources are streamed into owned temporary files."""

from __future__ import annotations

import socket
import threading
from pathlib import Path

import pytest

from nong_replacer.exceptions import DownloadError
from nong_replacer.media.downloader import Downloader


def test_download_writes_owned_temp_file(http_server, download_dir: Path) -> None:
    base_url, root = http_server
    payload = b"fLaC" + bytes(range(256)) * 1024
    (root / "audio.flac").write_bytes(payload)

    source = Downloader(temp_dir=download_dir).download(f"{base_url}/audio.flac")

    assert source.owned is True
    assert source.path.parent == download_dir
    assert source.path.name.startswith("gd-nong-temp")
    assert source.path.suffix == ".flac"
    assert source.path.read_bytes() == payload

    source.release()
    assert list(download_dir.iterdir()) == []


def test_non_200_status_is_reported_without_temp_file(http_server, download_dir: Path) -> None:
    base_url, _ = http_server

    with pytest.raises(DownloadError) as exc_info:
        Downloader(temp_dir=download_dir).download(f"{base_url}/missing.flac")

    assert exc_info.value.status == 404
    assert "URL request error" in str(exc_info.value)
    assert "404" in str(exc_info.value)
    assert list(download_dir.iterdir()) == []


def test_connection_failure_is_a_download_error(download_dir: Path) -> None:
    # Nothing listens on port 1
    with pytest.raises(DownloadError) as exc_info:
        Downloader(temp_dir=download_dir).download("http://127.0.0.1:1/song.mp3")

    assert exc_info.value.status is None
    assert "Failed to download" in str(exc_info.value)
    assert list(download_dir.iterdir()) == []


def test_temp_file_creation_failure(http_server, tmp_path: Path) -> None:
    base_url, root = http_server
    (root / "audio.ogg").write_bytes(b"OggS")

    with pytest.raises(DownloadError, match="temporary file"):
        Downloader(temp_dir=tmp_path / "does-not-exist").download(f"{base_url}/audio.ogg")


@pytest.fixture
def truncating_server():
    """Promises 100000 bytes, sends 5000, then hangs up. Yields the base URL."""
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)

    def serve() -> None:
        conn, _ = listener.accept()
        with conn:
            request = b""
            while b"\r\n\r\n" not in request:
                data = conn.recv(4096)
                if not data:
                    return
                request += data
            conn.sendall(
                b"HTTP/1.1 200 OK\r\n"
                b"Content-Type: audio/mpeg\r\n"
                b"Content-Length: 100000\r\n"
                b"Connection: close\r\n\r\n" + b"\xff" * 5000
            )

    thread = threading.Thread(target=serve, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{listener.getsockname()[1]}"
    finally:
        listener.close()
        thread.join(timeout=5)


def test_cut_off_download_removes_partial_file(truncating_server: str, download_dir: Path) -> None:
    with pytest.raises(DownloadError) as exc_info:
        Downloader(temp_dir=download_dir).download(f"{truncating_server}/song.mp3")

    assert exc_info.value.status is None
    assert list(download_dir.iterdir()) == []
