"""
resolver.py - turn a caller-supplied media reference into base64.

A reference is one of three things, checked in this order:

* a path to a local file, which is read and encoded;
* an ``http(s)`` URL ending in a known media extension, which is downloaded
  into a scoped temp file, read back and encoded;
* anything else, which is assumed to be base64 already and returned as is.
"""

import asyncio
import base64
import os
import re
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, Iterable, Optional

import aiohttp

from ..errors import PayloadTooLarge, ResourceResolutionError
from ..utils.log_utils import get_logger
from .tempfiles import scoped_temp_file

logger = get_logger(__name__)

IMAGE_EXTENSIONS = ("jpg", "jpeg", "bmp", "png")
AUDIO_EXTENSIONS = ("wav", "pcm", "amr", "silk", "mp3")

Downloader = Callable[[str, str], Awaitable[None]]


class ReferenceKind(Enum):
    LOCAL_PATH = "local_path"
    REMOTE_URL = "remote_url"
    INLINE = "inline"


def url_pattern(extensions: Iterable[str]) -> "re.Pattern[str]":
    """Compile a matcher for ``http(s)`` URLs ending in one of ``extensions``."""
    alternation = "|".join(re.escape(ext) for ext in extensions)
    return re.compile(rf"^https?://\S+\.(?:{alternation})$", re.IGNORECASE)


def is_local_path(reference: str) -> bool:
    # os.path.exists swallows "name too long" and NUL errors from base64 blobs
    return os.path.exists(reference)


class ResourceResolver:
    """Resolves media references to base64 strings.

    Each call is independent; the only thing concurrent calls share is the temp
    directory, and temp names are unique per call.
    """

    def __init__(
        self,
        extensions: Iterable[str] = IMAGE_EXTENSIONS,
        temp_dir: Optional[str] = None,
        proxy: Optional[str] = None,
        timeout: float = 30.0,
        downloader: Optional[Downloader] = None,
    ) -> None:
        """
        Args:
            extensions: URL suffixes treated as downloadable.
            temp_dir: Scratch directory for downloads (system temp by default).
            proxy: Optional HTTP proxy used for downloads.
            timeout: Total download timeout in seconds.
            downloader: Coroutine ``(url, path)`` that stores ``url`` at ``path``.
                Defaults to an aiohttp GET.
        """
        self.extensions = tuple(extensions)
        self.temp_dir = temp_dir
        self.proxy = proxy
        self.timeout = timeout
        self._url_re = url_pattern(self.extensions)
        self._download = downloader or self._http_download

    def with_extensions(self, extensions: Iterable[str]) -> "ResourceResolver":
        """Copy of this resolver that recognises a different set of URL suffixes."""
        return ResourceResolver(
            extensions=extensions,
            temp_dir=self.temp_dir,
            proxy=self.proxy,
            timeout=self.timeout,
            downloader=self._download,
        )

    def is_remote_url(self, reference: str) -> bool:
        return bool(reference) and self._url_re.match(reference) is not None

    def classify(self, reference: str) -> ReferenceKind:
        if is_local_path(reference):
            return ReferenceKind.LOCAL_PATH
        if self.is_remote_url(reference):
            return ReferenceKind.REMOTE_URL
        return ReferenceKind.INLINE

    async def resolve(self, reference: str, size_limit: Optional[int] = None) -> str:
        """Return the base64 payload for ``reference``.

        Args:
            reference: Local path, media URL, or base64 text.
            size_limit: Reject files/downloads whose raw size is ``>=`` this.

        Returns:
            Base64 text. Inline references are returned unchanged.

        Raises:
            PayloadTooLarge: If the resolved bytes reach ``size_limit``.
            ResourceResolutionError: If the file cannot be read or the download fails.
        """
        kind = self.classify(reference)
        if kind is ReferenceKind.INLINE:
            return reference

        if kind is ReferenceKind.LOCAL_PATH:
            logger.debug("Reading local file %s", reference)
            data = await self._read(reference)
        else:
            data = await self._fetch(reference)

        if size_limit is not None and len(data) >= size_limit:
            raise PayloadTooLarge(len(data), size_limit, reference)
        return base64.b64encode(data).decode("ascii")

    async def _fetch(self, url: str) -> bytes:
        suffix = "." + url.rsplit(".", 1)[-1].lower()
        async with scoped_temp_file(self.temp_dir, suffix) as path:
            logger.debug("Downloading %s to %s", url, path)
            try:
                await self._download(url, path)
            except ResourceResolutionError:
                raise
            except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as err:
                raise ResourceResolutionError(f"Failed to download {url}: {err}") from err
            return await self._read(path)

    async def _read(self, path: str) -> bytes:
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, Path(path).read_bytes)
        except OSError as err:
            raise ResourceResolutionError(f"Failed to read {path}: {err}") from err

    async def _http_download(self, url: str, path: str) -> None:
        async with aiohttp.ClientSession() as session:
            async with session.get(
                url,
                proxy=self.proxy,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if response.status != 200:
                    raise ResourceResolutionError(
                        f"Failed to download {url}: HTTP {response.status}"
                    )
                payload = await response.read()

        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, Path(path).write_bytes, payload)
        logger.debug("Downloaded %d bytes from %s", len(payload), url)
