"""Tests for bbb_vm.config.Settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bbb_vm.config import DEFAULT_BASE_URL, Settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CUSTOMER_ID", "API_TOKEN", "BASE_URL", "TIMEOUT"):
        monkeypatch.delenv(f"BBB_VM_{name}", raising=False)


def test_defaults() -> None:
    cfg = Settings(_env_file=None)

    assert cfg.base_url == DEFAULT_BASE_URL
    assert cfg.timeout == 30.0


def test_reads_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BBB_VM_CUSTOMER_ID", "cust1")
    monkeypatch.setenv("BBB_VM_API_TOKEN", "tok")
    monkeypatch.setenv("BBB_VM_BASE_URL", "https://staging.example/api/v1/")
    monkeypatch.setenv("BBB_VM_TIMEOUT", "5")

    cfg = Settings(_env_file=None)

    assert cfg.customer_id == "cust1"
    assert cfg.api_token == "tok"
    assert cfg.base_url == "https://staging.example/api/v1"
    assert cfg.timeout == 5.0


def test_is_frozen() -> None:
    cfg = Settings(customer_id="c", api_token="t", _env_file=None)

    with pytest.raises(ValidationError):
        cfg.customer_id = "other"  # type: ignore[misc]


def test_repr_hides_token() -> None:
    cfg = Settings(customer_id="c", api_token="super-secret", _env_file=None)

    assert "super-secret" not in repr(cfg)
    assert "super-secret" not in str(cfg)
