"""Tests for startup address discovery."""

import socket
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from worldbanc.services.network import get_global_ip, get_local_ip


def _addr(family, address):
    return SimpleNamespace(family=family, address=address, netmask=None, broadcast=None, ptp=None)


INTERFACES = {
    "lo": [_addr(socket.AF_INET, "127.0.0.1")],
    "en0": [_addr(socket.AF_INET6, "fe80::1"), _addr(socket.AF_INET, "192.168.1.20")],
    "wlan0": [_addr(socket.AF_INET, "10.0.0.7")],
}


class TestLocalIp:
    @patch("worldbanc.services.network.psutil.net_if_addrs", return_value=INTERFACES)
    def test_preferred_interface(self, _mock):
        assert get_local_ip(["wlan0", "en0"]) == "10.0.0.7"

    @patch("worldbanc.services.network.psutil.net_if_addrs", return_value=INTERFACES)
    def test_skips_ipv6(self, _mock):
        assert get_local_ip(["en0"]) == "192.168.1.20"

    @patch("worldbanc.services.network.psutil.net_if_addrs", return_value=INTERFACES)
    def test_falls_back_to_non_loopback(self, _mock):
        assert get_local_ip(["eth9"]) == "192.168.1.20"

    @patch("worldbanc.services.network.psutil.net_if_addrs", return_value={"lo": INTERFACES["lo"]})
    def test_only_loopback(self, _mock):
        assert get_local_ip([]) == "UNKNOWN"

    @patch("worldbanc.services.network.psutil.net_if_addrs", side_effect=OSError("denied"))
    def test_error(self, _mock):
        assert get_local_ip(["en0"]) == "UNKNOWN"


def _mock_http(mock_client_cls, **get_kwargs):
    mock_http = AsyncMock()
    mock_http.get = AsyncMock(**get_kwargs)
    mock_http.__aenter__ = AsyncMock(return_value=mock_http)
    mock_http.__aexit__ = AsyncMock(return_value=False)
    mock_client_cls.return_value = mock_http
    return mock_http


class TestGlobalIp:
    @pytest.mark.asyncio
    @patch("worldbanc.services.network.httpx.AsyncClient")
    async def test_strips_newlines(self, mock_client_cls):
        resp = MagicMock(text="203.0.113.5\r\n")
        http = _mock_http(mock_client_cls, return_value=resp)

        assert await get_global_ip("https://echo.test/ip", timeout=1.0) == "203.0.113.5"
        http.get.assert_awaited_once_with("https://echo.test/ip")

    @pytest.mark.asyncio
    @patch("worldbanc.services.network.httpx.AsyncClient")
    async def test_empty_body(self, mock_client_cls):
        _mock_http(mock_client_cls, return_value=MagicMock(text="\n"))

        assert await get_global_ip("https://echo.test/ip") == "UNKNOWN"

    @pytest.mark.asyncio
    @patch("worldbanc.services.network.httpx.AsyncClient")
    async def test_unreachable(self, mock_client_cls):
        _mock_http(mock_client_cls, side_effect=httpx.ConnectError("no route"))

        assert await get_global_ip("https://echo.test/ip") == "ERROR"
