"""Volume enumeration for the logical root on drive-letter hosts."""

from __future__ import annotations

import asyncio
import logging
import re

import psutil

from worldbanc.schemas.files import FileEntry
from worldbanc.utils.formatting import PLACEHOLDER, UNKNOWN_SIZE, format_readable_bytes

logger = logging.getLogger(__name__)

_DRIVE_SUFFIX = re.compile(r":\\$")


class VolumeEnumerationError(Exception):
    """The platform refused to list mounted volumes."""


class VolumeEnumerator:
    """Lists mounted volumes as directory-like entries, sorted A to Z."""

    async def list_volumes(self) -> list[FileEntry]:
        return await asyncio.to_thread(self._list_volumes)

    def _list_volumes(self) -> list[FileEntry]:
        try:
            partitions = psutil.disk_partitions(all=False)
        except (psutil.Error, OSError) as exc:
            raise VolumeEnumerationError(str(exc)) from exc

        volumes: dict[str, FileEntry] = {}
        for part in partitions:
            name = _DRIVE_SUFFIX.sub("", part.mountpoint)  # C:\ -> C
            if name in volumes:
                continue
            volumes[name] = FileEntry(
                name=name,
                is_directory=True,
                size=format_readable_bytes(_capacity(part.mountpoint)),
                updated=PLACEHOLDER,
            )
        return sorted(volumes.values(), key=lambda entry: entry.name)


def _capacity(mountpoint: str) -> int | str:
    """Total bytes of a volume; removable drives without media report unknown."""
    try:
        return psutil.disk_usage(mountpoint).total
    except (psutil.Error, OSError) as exc:
        logger.debug("No capacity for volume %s: %s", mountpoint, exc)
        return UNKNOWN_SIZE
