"""Error taxonomy shared by the client layers."""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """Codes embedded as ``[ERR:<code>]`` in error envelope messages."""

    UNKNOWN = 1
    INVALID_RESPONSE_SHAPE = 2
    INTERNAL_TRANSPORT = 3
    INVALID_REQUEST = 4

    def format(self, text: str) -> str:
        return f"[ERR:{self.value}] {text}"


class ClientValidationError(ValueError):
    """A caller-supplied identifier is malformed. Raised before any request is sent."""


class InstanceStatusTimeoutError(RuntimeError):
    def __init__(self, instance_id: str, expected: str, last_status: str | None, waited: float) -> None:
        super().__init__(
            f"Instance '{instance_id}' did not reach status '{expected}' "
            f"(last seen: {last_status!r}, waited {waited:g}s)"
        )
        self.instance_id = instance_id
        self.expected = expected
        self.last_status = last_status
