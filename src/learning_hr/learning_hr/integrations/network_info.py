from __future__ import annotations

import logging
from typing import Protocol

import requests
from flask import has_request_context, request

from ..core.exceptions import NetworkUnavailable

logger = logging.getLogger(__name__)

IPIFY_URL = "https://api.ipify.org?format=json"


class NetworkInfo(Protocol):
    def current_address(self) -> str:
        """Public address of the caller; ``NetworkUnavailable`` if unknown."""

        raise NotImplementedError


class IpifyNetworkInfo(NetworkInfo):
    """Ask an echo service for our public address (what the office router shows)."""

    def __init__(self, url: str = IPIFY_URL, *, timeout: float = 5):
        self._url = url
        self._timeout = timeout

    def current_address(self) -> str:
        try:
            response = requests.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            address = str(response.json().get("ip") or "").strip()
        except (requests.RequestException, ValueError) as exc:
            logger.warning("[network] address lookup failed: %s", exc)
            raise NetworkUnavailable("Không xác định được địa chỉ mạng") from exc
        if not address:
            raise NetworkUnavailable("Không xác định được địa chỉ mạng")
        return address


class RequestNetworkInfo(NetworkInfo):
    """Address of the client behind the current Flask request.

    Only ``remote_addr`` is read. Behind a reverse proxy, ``create_app`` wraps
    the app in ``ProxyFix`` (``TRUSTED_PROXY_COUNT``) so that value is the
    address the trusted proxy saw, never a client-supplied header.
    """

    def current_address(self) -> str:
        if not has_request_context():
            raise NetworkUnavailable("Không có request hiện tại")
        address = (request.remote_addr or "").strip()
        if not address:
            raise NetworkUnavailable("Không xác định được địa chỉ mạng")
        return address


class StaticNetworkInfo(NetworkInfo):
    def __init__(self, address: str = ""):
        self.address = address

    def current_address(self) -> str:
        if not self.address:
            raise NetworkUnavailable("Không xác định được địa chỉ mạng")
        return self.address
