"""Client-side checks for server-assigned identifiers.

Run before any request is built so malformed ids never reach the network.
The service is case-sensitive, hence the lower-case rule.
"""

from __future__ import annotations

import re

from .errors import ClientValidationError

_UPPERCASE = re.compile(r"[A-Z]")

INSTANCE_ID_MIN_LENGTH = 19
INSTANCE_ID_MAX_LENGTH = 22
RECORDING_ID_LENGTH = 54


def _check_common(kind: str, value: str | None) -> str:
    if value is None or not str(value).strip():
        raise ClientValidationError(f"{kind} can't be blank")
    value = str(value)
    if _UPPERCASE.search(value):
        raise ClientValidationError(f"invalid {kind}: it must be all lower case")
    return value


def check_instance_id(instance_id: str | None) -> None:
    value = _check_common("instance ID", instance_id)
    if not INSTANCE_ID_MIN_LENGTH <= len(value) <= INSTANCE_ID_MAX_LENGTH:
        raise ClientValidationError(
            f"invalid instance ID: the length must be between "
            f"{INSTANCE_ID_MIN_LENGTH} and {INSTANCE_ID_MAX_LENGTH}"
        )


def check_recording_id(recording_id: str | None) -> None:
    value = _check_common("recording ID", recording_id)
    if len(value) != RECORDING_ID_LENGTH:
        raise ClientValidationError(
            f"invalid recording ID: the length must be exactly {RECORDING_ID_LENGTH}"
        )
