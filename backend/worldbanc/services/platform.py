"""Platform pathing for drive-letter hosts and plain POSIX-style hosts.

URL paths always look like ``/C/Users/me`` or ``/home/me``. A platform knows
how to turn those into native paths and back, and whether the logical root
``/`` stands for "all volumes" instead of a real directory.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import re
from typing import Protocol

_DRIVE_SEGMENT = re.compile(r"^/([A-Za-z])(?=/|$)")
_BARE_DRIVE = re.compile(r"^[A-Za-z]:[\\/]?$")
_DRIVE_PREFIX = re.compile(r"^([A-Za-z]):(?:/(.*))?$")


class PlatformPathing(Protocol):
    name: str

    def to_native(self, url_path: str) -> str: ...

    def to_url(self, native_path: str) -> str: ...

    def native_parent(self, native_path: str) -> str: ...

    def is_drive_root(self, native_path: str) -> bool: ...

    def is_volume_root(self, native_path: str) -> bool: ...

    def readable_directory(self, native_path: str) -> str: ...


class PassthroughPlatform:
    """Hosts with a single filesystem tree: URL path == native path."""

    name = "passthrough"

    def to_native(self, url_path: str) -> str:
        return url_path

    def to_url(self, native_path: str) -> str:
        return native_path

    def native_parent(self, native_path: str) -> str:
        return "/" + posixpath.normpath(posixpath.join("/", native_path, "..")).lstrip("/")

    def is_drive_root(self, native_path: str) -> bool:
        return False

    def is_volume_root(self, native_path: str) -> bool:
        return False

    def readable_directory(self, native_path: str) -> str:
        return native_path


class DriveLetterPlatform:
    """Hosts addressed by drive letters (``C:``), volumes listed under ``/``."""

    name = "drive-letter"

    def to_native(self, url_path: str) -> str:
        # /C -> C:, /C/Users -> C:/Users; drive existence is not checked
        return _DRIVE_SEGMENT.sub(r"\1:", url_path, count=1)

    def to_url(self, native_path: str) -> str:
        path = native_path.replace("\\", "/")
        match = _DRIVE_PREFIX.match(path)
        if match:
            letter, rest = match.group(1), (match.group(2) or "").rstrip("/")
            return f"/{letter}/{rest}" if rest else f"/{letter}"
        return "/" + path.lstrip("/")

    def native_parent(self, native_path: str) -> str:
        return ntpath.normpath(ntpath.join(native_path, ".."))

    def is_drive_root(self, native_path: str) -> bool:
        return bool(_BARE_DRIVE.match(native_path))

    def is_volume_root(self, native_path: str) -> bool:
        return native_path == "/"

    def readable_directory(self, native_path: str) -> str:
        # Some hosts refuse to enumerate "E:" without the trailing separator
        return f"{native_path}/" if native_path.endswith(":") else native_path


def get_platform(kind: str = "auto") -> PlatformPathing:
    """Select the platform once at startup; ``auto`` follows the host OS."""
    if kind == "auto":
        kind = "drive-letter" if os.name == "nt" else "passthrough"
    if kind == "drive-letter":
        return DriveLetterPlatform()
    if kind == "passthrough":
        return PassthroughPlatform()
    raise ValueError(f"Unknown platform pathing: {kind}")
