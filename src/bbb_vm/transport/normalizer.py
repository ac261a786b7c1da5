"""Turns raw HTTP outcomes into :class:`ResultEnvelope` values.

Decision order matters: transport failure, empty body, undecodable 403,
invalid ``status`` field, then pass-through of the server's own envelope.
Nothing in here raises for a bad response.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ..errors import ErrorKind
from .http import RawResponse, TransportFailure
from .models import ResultEnvelope

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_TEXT = "Unknown error"
FORBIDDEN_TEXT = "Forbidden"
INVALID_STATUS_TEXT = "The 'status' field either empty or has invalid value"

_VALID_STATUSES = ("success", "error")
_UNDECODABLE = object()


def _decode(body: bytes) -> object:
    try:
        return json.loads(body)
    except (UnicodeDecodeError, ValueError):
        return _UNDECODABLE


def interpret(raw: RawResponse | TransportFailure) -> ResultEnvelope:
    if isinstance(raw, TransportFailure):
        return ResultEnvelope.failure(ErrorKind.INTERNAL_TRANSPORT, raw.description)

    if not raw.body.strip():
        logger.warning("VM API returned an empty body (HTTP %d)", raw.status_code)
        return ResultEnvelope.failure(ErrorKind.UNKNOWN, UNKNOWN_ERROR_TEXT)

    payload = _decode(raw.body)
    if payload is _UNDECODABLE and raw.status_code == 403:
        return ResultEnvelope.failure(ErrorKind.INVALID_REQUEST, FORBIDDEN_TEXT)

    if not isinstance(payload, dict) or payload.get("status") not in _VALID_STATUSES:
        logger.warning(
            "VM API response without a valid status field (HTTP %d): %.200r",
            raw.status_code,
            raw.body,
        )
        return ResultEnvelope.failure(ErrorKind.INVALID_RESPONSE_SHAPE, INVALID_STATUS_TEXT)

    try:
        return ResultEnvelope.model_validate(payload)
    except ValidationError as exc:
        logger.warning("VM API envelope rejected: %s", exc)
        return ResultEnvelope.failure(ErrorKind.INVALID_RESPONSE_SHAPE, INVALID_STATUS_TEXT)


def normalize_result(
    envelope: ResultEnvelope,
    collection: type[list] | type[dict] | None = None,
) -> ResultEnvelope:
    """Apply the per-operation ``data`` rule to a successful envelope.

    Collection operations get an empty ``collection()`` instead of ``None``;
    single-resource operations (``collection=None``) map ``""`` to ``None``.
    Error envelopes are returned as they are.
    """
    if not envelope.ok:
        return envelope
    if collection is not None:
        if envelope.data is None:
            return envelope.model_copy(update={"data": collection()})
        return envelope
    if envelope.data == "":
        return envelope.model_copy(update={"data": None})
    return envelope
