"""Pydantic models matching the VM API wire format."""

from __future__ import annotations

import json
import re
from enum import StrEnum
from typing import Any, Literal, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..errors import ErrorKind

_ERR_PREFIX = re.compile(r"^\[ERR:(\d+)\]")


class InstanceStatus(StrEnum):
    STARTING = "STARTING"
    AVAILABLE = "AVAILABLE"
    STOPPING = "STOPPING"
    STOPPED = "STOPPED"
    DELETED = "DELETED"


class MachineSize(StrEnum):
    SMALL = "small"
    STANDARD = "standard"
    LARGE = "large"
    XLARGE = "xlarge"


class ResultEnvelope(BaseModel):
    """Canonical ``{status, data, message?}`` shape returned by every call.

    ``message`` is set exactly when ``status == "error"``. Keys the server
    adds beyond these three are kept as extras, so
    ``model_dump(exclude_unset=True)`` reproduces a well-formed payload.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    status: Literal["success", "error"]
    data: Any = None
    message: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _message_only_on_error(cls, payload: Any) -> Any:
        if not isinstance(payload, dict):
            return payload
        if payload.get("status") == "success" and "message" in payload:
            payload = {k: v for k, v in payload.items() if k != "message"}
        elif payload.get("status") == "error":
            message = payload.get("message")
            if message is None:
                # Some endpoints report the reason in ``data`` instead.
                data = payload.get("data")
                payload = {**payload, "message": data if isinstance(data, str) else ""}
            elif not isinstance(message, str):
                # Structured reason: keep it as ``message_detail``, render it as text.
                payload = {**payload, "message": json.dumps(message, default=str), "message_detail": message}
        return payload

    @classmethod
    def failure(cls, kind: ErrorKind, text: str) -> ResultEnvelope:
        return cls(status="error", data=None, message=kind.format(text))

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @property
    def error_kind(self) -> ErrorKind | None:
        """Client-side error classification, ``None`` for success and remote errors."""
        if self.message is None:
            return None
        match = _ERR_PREFIX.match(self.message)
        if not match:
            return None
        try:
            return ErrorKind(int(match.group(1)))
        except ValueError:
            return None


class ApiResult(NamedTuple):
    envelope: ResultEnvelope
    status_code: int | None  # None when no response was received

    @property
    def ok(self) -> bool:
        return self.envelope.ok

    @property
    def data(self) -> Any:
        return self.envelope.data


class CreateInstanceRequest(BaseModel):
    """Body of ``POST instances``; unknown keys (``Region``, ``Tags``, ...) pass through."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    machine_size: str = Field(default=MachineSize.SMALL.value, alias="MachineSize")

    @field_validator("machine_size", mode="before")
    @classmethod
    def _lower(cls, value: Any) -> str:
        if value is None:
            return MachineSize.SMALL.value
        return str(value).lower()


class InstanceActionRequest(BaseModel):
    instance_id: str = Field(alias="instanceID")


class RecordingActionRequest(BaseModel):
    recording_id: str = Field(alias="recordingID")
