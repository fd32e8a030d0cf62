"""
Handles downloading a remote song over HTTP into a temporary file.
"""

import asyncio
import contextlib
import logging
import os
import tempfile
from pathlib import Path

import aiofiles
import aiohttp

from nong_replacer.exceptions import DownloadError
from nong_replacer.models.config import TEMP_PREFIX
from nong_replacer.models.source import ResolvedSource
from nong_replacer.utils.path import url_suffix

log = logging.getLogger(__name__)


class Downloader:
    """
    Streams a URL into a freshly created temporary file.

    The request blocks until it completes: there is no timeout and no retry.
    """

    CHUNK_SIZE = 131072  # 128 KB

    def __init__(self, prefix: str = TEMP_PREFIX, temp_dir: Path | None = None):
        self.prefix = prefix
        self.temp_dir = temp_dir

    def download(self, url: str) -> ResolvedSource:
        """
        Downloads the URL and returns it as an owned temporary source.

        Raises:
            DownloadError: On connection failure, a non-200 status, or an I/O
            error while creating or writing the temporary file.
        """
        path = asyncio.run(self.download_async(url))
        return ResolvedSource(path=path, owned=True)

    async def download_async(self, url: str) -> Path:
        timeout = aiohttp.ClientTimeout(total=None)
        try:
            async with (
                aiohttp.ClientSession(timeout=timeout) as session,
                session.get(url, allow_redirects=True) as response,
            ):
                if response.status != 200:
                    raise DownloadError(
                        f"URL request error: {response.status} {response.reason or ''}".rstrip(),
                        url,
                        status=response.status,
                    )
                path = self._create_temp_file(url)
                try:
                    await self._stream_to_file(response, path)
                except BaseException:
                    with contextlib.suppress(FileNotFoundError):
                        os.remove(path)
                    raise
        except aiohttp.ClientError as e:
            raise DownloadError(f"Failed to download '{url}': {e}", url) from e

        log.debug(f"Downloaded '{url}' to '{path}'")
        return path

    def _create_temp_file(self, url: str) -> Path:
        try:
            fd, name = tempfile.mkstemp(
                prefix=self.prefix, suffix=url_suffix(url), dir=self.temp_dir
            )
        except OSError as e:
            raise DownloadError(f"Could not create temporary file: {e}", url) from e
        os.close(fd)
        return Path(name)

    async def _stream_to_file(self, response: aiohttp.ClientResponse, path: Path) -> None:
        try:
            async with aiofiles.open(path, "wb") as f:
                async for chunk in response.content.iter_chunked(self.CHUNK_SIZE):
                    await f.write(chunk)
        except aiohttp.ClientError:
            # ClientOSError is also an OSError; let the caller wrap it as a network failure
            raise
        except OSError as e:
            raise DownloadError(
                f"Failed writing download to '{path}': {e}", str(response.url)
            ) from e
