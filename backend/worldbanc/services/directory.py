"""Directory listing with per-entry size and mtime."""

from __future__ import annotations

import asyncio
import logging
import os
from dataclasses import dataclass

from worldbanc.schemas.files import FileEntry
from worldbanc.services.platform import PlatformPathing
from worldbanc.utils.formatting import PLACEHOLDER, format_jst, format_readable_bytes

logger = logging.getLogger(__name__)


class DirectoryReadError(Exception):
    """The directory itself could not be opened or read."""

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


@dataclass(frozen=True)
class MetadataLookup:
    """Outcome of one per-entry stat: either ``stat`` or ``error`` is set."""
    stat: os.stat_result | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.stat is not None


class DirectoryLister:
    """Reads one directory level and annotates each child."""

    def __init__(self, platform: PlatformPathing):
        self._platform = platform

    async def list(self, native_path: str) -> list[FileEntry]:
        directory = self._platform.readable_directory(native_path)
        try:
            children = await asyncio.to_thread(_scan, directory)
        except (OSError, ValueError) as exc:
            # ValueError: embedded NUL from a %00 in the URL
            raise DirectoryReadError(directory, exc) from exc

        # Directories first, then by name; stats below never reorder
        children.sort(key=lambda child: (not child[1], child[0]))

        lookups = await asyncio.gather(
            *(asyncio.to_thread(_lookup, os.path.join(directory, name)) for name, _ in children)
        )
        return [
            _to_entry(name, is_dir, lookup)
            for (name, is_dir), lookup in zip(children, lookups)
        ]


def _scan(directory: str) -> list[tuple[str, bool]]:
    with os.scandir(directory) as it:
        return [(entry.name, _is_dir(entry)) for entry in it]


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _lookup(path: str) -> MetadataLookup:
    try:
        return MetadataLookup(stat=os.stat(path))
    except (OSError, ValueError) as exc:
        return MetadataLookup(error=exc)


def _to_entry(name: str, is_dir: bool, lookup: MetadataLookup) -> FileEntry:
    if not lookup.ok:
        logger.debug("Metadata unavailable for %s: %s", name, lookup.error)
        return FileEntry(name=name, is_directory=is_dir, size=PLACEHOLDER, updated=PLACEHOLDER)
    return FileEntry(
        name=name,
        is_directory=is_dir,
        size=format_readable_bytes(lookup.stat.st_size),
        updated=format_jst(lookup.stat.st_mtime),
    )
