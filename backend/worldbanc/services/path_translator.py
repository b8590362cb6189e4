"""URL path <-> native path translation and parent navigation."""

from __future__ import annotations

from worldbanc.services.platform import PlatformPathing

ROOT = "/"


class PathTranslator:
    """Pure string transforms; nothing here touches the filesystem."""

    def __init__(self, platform: PlatformPathing):
        self._platform = platform

    def to_native(self, url_path: str) -> str:
        return self._platform.to_native(url_path)

    def get_parent_path(self, url_path: str) -> str:
        """URL-form parent of ``url_path``.

        ``/`` is its own parent, and on drive-letter hosts a drive root
        (``/C`` i.e. ``C:`` or ``C:/``) goes straight back to ``/`` where the
        volumes are listed. Repeated calls always converge on ``/``.
        """
        if url_path == ROOT:
            return ROOT
        native = self.to_native(url_path)
        if self._platform.is_drive_root(native):
            return ROOT
        parent = self._platform.native_parent(native)
        return self._platform.to_url(parent)
