"""Shared fixtures for the bbb_vm test suite."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from bbb_vm.config import Settings
from bbb_vm.transport.client import VmClient
from bbb_vm.transport.http import RawResponse, TransportFailure

BASE_URL = "https://api.test/api/v1"
CUSTOMER_ID = "cust42"
API_TOKEN = "token-xyz"

INSTANCE_ID = "a1b2c3d4e5f6g7h8i9j0"  # 20 chars
RECORDING_ID = "0123456789abcdef" * 3 + "012345"  # 54 chars


@dataclass
class SentRequest:
    method: str
    url: str
    headers: dict[str, str]
    json_body: dict[str, Any] | None


@dataclass
class FakeTransport:
    """Records every request and replays queued responses in order."""

    responses: list[RawResponse | TransportFailure] = field(default_factory=list)
    calls: list[SentRequest] = field(default_factory=list)
    closed: bool = False

    def queue_json(self, payload: Any, status_code: int = 200) -> None:
        self.responses.append(RawResponse(status_code, json.dumps(payload).encode()))

    def queue(self, response: RawResponse | TransportFailure) -> None:
        self.responses.append(response)

    def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        json_body: Mapping[str, Any] | None = None,
    ) -> RawResponse | TransportFailure:
        self.calls.append(
            SentRequest(method, url, dict(headers), dict(json_body) if json_body is not None else None)
        )
        if not self.responses:
            return RawResponse(200, b'{"status": "success", "data": null}')
        return self.responses.pop(0)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> Settings:
    return Settings(customer_id=CUSTOMER_ID, api_token=API_TOKEN, base_url=BASE_URL)


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(config: Settings, fake_transport: FakeTransport) -> VmClient:
    return VmClient(config, transport=fake_transport)
