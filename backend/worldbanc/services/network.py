"""Address discovery for the startup banner."""

from __future__ import annotations

import logging
import socket

import httpx
import psutil

from worldbanc.config import settings

logger = logging.getLogger(__name__)


def get_local_ip(preferred: list[str] | None = None) -> str:
    """First IPv4 address of a preferred interface, else any non-loopback one."""
    preferred = settings.local_interfaces if preferred is None else preferred
    try:
        interfaces = psutil.net_if_addrs()
    except (psutil.Error, OSError) as exc:
        logger.warning("Get Local IP : Error %s", exc)
        return "UNKNOWN"

    def _ipv4(name: str) -> str | None:
        for addr in interfaces.get(name, []):
            if addr.family == socket.AF_INET:
                return addr.address
        return None

    for name in preferred:
        address = _ipv4(name)
        if address:
            return address
    for name in interfaces:
        address = _ipv4(name)
        if address and not address.startswith("127."):
            return address
    return "UNKNOWN"


async def get_global_ip(url: str | None = None, timeout: float | None = None) -> str:
    """Public IPv4 as reported by an echo service; ``ERROR`` if unreachable."""
    try:
        async with httpx.AsyncClient(timeout=timeout or settings.global_ip_timeout) as client:
            resp = await client.get(url or settings.global_ip_url)
            resp.raise_for_status()
        return resp.text.replace("\r", "").replace("\n", "") or "UNKNOWN"
    except httpx.HTTPError as exc:
        logger.warning("Get Global IP : Error %s", exc)
        return "ERROR"
