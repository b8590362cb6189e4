"""Request dispatch: pick landing page, listing or download for a URL path."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from dataclasses import dataclass, field
from typing import BinaryIO, Union

from worldbanc.schemas.files import ErrorResponse, Listing
from worldbanc.services.directory import DirectoryLister, DirectoryReadError
from worldbanc.services.path_translator import PathTranslator
from worldbanc.services.platform import PlatformPathing
from worldbanc.services.volumes import VolumeEnumerationError, VolumeEnumerator

logger = logging.getLogger(__name__)

DIRECTORY_DOWNLOAD_ERROR = "The Path Is A Directory, Cannot Download"


class LandingPage:
    """Marker result: serve the static landing page."""


@dataclass(frozen=True)
class DownloadTarget:
    """A file already opened for sending; the receiver closes ``stream``."""
    path: str
    filename: str
    size: int
    stream: BinaryIO = field(compare=False, repr=False)


DispatchResult = Union[LandingPage, Listing, ErrorResponse, DownloadTarget]


class DownloadTargetIsDirectory(Exception):
    """Directories cannot be downloaded."""


def attachment_name(path: str) -> str:
    """Offered filename; dotfiles become ``_name`` so clients keep them."""
    base = os.path.basename(path.replace("\\", "/").rstrip("/"))
    if base.startswith("."):
        return "_" + base[1:]
    return base


class RequestDispatcher:
    """Routes one decoded URL path to the right filesystem operation."""

    def __init__(
        self,
        platform: PlatformPathing,
        host_name: str,
        translator: PathTranslator | None = None,
        volumes: VolumeEnumerator | None = None,
        lister: DirectoryLister | None = None,
    ):
        self._platform = platform
        self._host_name = host_name
        self._translator = translator or PathTranslator(platform)
        self._volumes = volumes or VolumeEnumerator()
        self._lister = lister or DirectoryLister(platform)

    async def dispatch(self, url_path: str, *, authenticated: bool, download: bool) -> DispatchResult:
        if not authenticated:
            logger.info("[%s] Not Authorized, Return Landing Page", url_path)
            return LandingPage()

        native_path = self._translator.to_native(url_path)
        if download:
            logger.info("[%s] [%s] Download File", url_path, native_path)
            return await self.download(native_path)

        logger.info("[%s] [%s] List Files", url_path, native_path)
        return await self.listing(url_path, native_path)

    async def listing(self, url_path: str, native_path: str) -> Listing | ErrorResponse:
        try:
            if self._platform.is_volume_root(native_path):
                files = await self._volumes.list_volumes()
            else:
                files = await self._lister.list(native_path)
        except VolumeEnumerationError as exc:
            logger.error("List Volumes [%s] : Error %s", native_path, exc)
            return ErrorResponse(error=f"Failed To List Volumes : {exc}")
        except DirectoryReadError as exc:
            logger.error("List Files [%s] : Error %s", native_path, exc.cause)
            return ErrorResponse(error=f"Failed To List Directory : {exc.cause}")

        return Listing(
            files=files,
            parent_path=self._translator.get_parent_path(url_path),
            host_name=self._host_name,
        )

    async def download(self, native_path: str) -> DownloadTarget | ErrorResponse:
        try:
            target = await asyncio.to_thread(_download_target, native_path)
        except DownloadTargetIsDirectory:
            return ErrorResponse(error=DIRECTORY_DOWNLOAD_ERROR)
        except (OSError, ValueError) as exc:
            logger.error("Download File [%s] : Error %s", native_path, exc)
            return ErrorResponse(error=f"Failed To Download File : {exc}")
        return target


def _download_target(native_path: str) -> DownloadTarget:
    if stat.S_ISDIR(os.stat(native_path).st_mode):
        raise DownloadTargetIsDirectory(native_path)
    # Opened here so a file removed before sending still streams its bytes
    stream = open(native_path, "rb")
    try:
        size = os.fstat(stream.fileno()).st_size
    except OSError:
        stream.close()
        raise
    return DownloadTarget(
        path=native_path,
        filename=attachment_name(native_path),
        size=size,
        stream=stream,
    )
