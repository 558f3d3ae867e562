import pytest
import requests
from flask import Flask

from src.learning_hr.learning_hr.core.exceptions import NetworkUnavailable
from src.learning_hr.learning_hr.integrations import network_info
from src.learning_hr.learning_hr.integrations.network_info import IpifyNetworkInfo, RequestNetworkInfo


class FakeResponse:
    def __init__(self, payload):
        self._payload = payload

    def raise_for_status(self):
        return None

    def json(self):
        return self._payload


def test_ipify_returns_address(monkeypatch):
    monkeypatch.setattr(network_info.requests, "get", lambda url, timeout: FakeResponse({"ip": "203.0.113.10"}))

    assert IpifyNetworkInfo().current_address() == "203.0.113.10"


def test_ipify_failure_is_network_unavailable(monkeypatch):
    def boom(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(network_info.requests, "get", boom)
    with pytest.raises(NetworkUnavailable):
        IpifyNetworkInfo().current_address()


def test_request_address_ignores_forwarded_header():
    app = Flask(__name__)
    with app.test_request_context(
        "/",
        headers={"X-Forwarded-For": "203.0.113.10"},
        environ_base={"REMOTE_ADDR": "198.51.100.4"},
    ):
        assert RequestNetworkInfo().current_address() == "198.51.100.4"


def test_request_address_outside_request_is_unavailable():
    with pytest.raises(NetworkUnavailable):
        RequestNetworkInfo().current_address()
