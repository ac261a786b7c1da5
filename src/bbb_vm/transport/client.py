"""Blocking HTTP client wrapping the BBB On Demand VM REST API."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import urlencode

from ..config import Settings, settings
from ..errors import InstanceStatusTimeoutError
from ..routes import Endpoint, UrlBuilder
from ..validation import check_instance_id, check_recording_id
from .http import HttpxTransport, RawResponse, Transport
from .models import (
    ApiResult,
    CreateInstanceRequest,
    InstanceActionRequest,
    InstanceStatus,
    RecordingActionRequest,
)
from .normalizer import interpret, normalize_result

logger = logging.getLogger(__name__)

_WAIT_INTERVAL = 10.0
_WAIT_MAX_ATTEMPTS = 300


class VmClient:
    """One method per remote operation.

    Malformed instance / recording ids raise :class:`ClientValidationError`
    before anything is sent. Every other outcome, including transport
    failures and unusable responses, comes back as an :class:`ApiResult`
    whose envelope says ``status="error"``.
    """

    def __init__(self, config: Settings | None = None, transport: Transport | None = None) -> None:
        self._config = config or settings
        self._urls = UrlBuilder(self._config.customer_id, self._config.base_url)
        self._transport = transport or HttpxTransport(timeout=self._config.timeout)

    @property
    def config(self) -> Settings:
        return self._config

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> VmClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<VmClient customer_id={self._config.customer_id!r} base_url={self._config.base_url!r}>"

    def _headers(self) -> dict[str, str]:
        return {"APITOKEN": self._config.api_token}

    def _call(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, str] | None = None,
        query: Mapping[str, Any] | None = None,
        json: Mapping[str, Any] | None = None,
        collection: type[list] | type[dict] | None = None,
    ) -> ApiResult:
        url = self._urls.build(endpoint.template, path_params, urlencode(query) if query else None)
        logger.debug("VM API %s %s", endpoint.method, url)
        raw = self._transport.send(endpoint.method.value, url, self._headers(), json)
        envelope = normalize_result(interpret(raw), collection)
        status_code = raw.status_code if isinstance(raw, RawResponse) else None
        if not envelope.ok:
            logger.info("VM API %s %s -> %s: %s", endpoint.method, url, status_code, envelope.message)
        return ApiResult(envelope, status_code)

    # ── Billing ────────────────────────────────────────────────

    def billing_summary(self) -> ApiResult:
        return self._call(Endpoint.BILLING_SUMMARY)

    # ── Instances ──────────────────────────────────────────────

    def list_instances(self, filters: Mapping[str, Any] | None = None) -> ApiResult:
        return self._call(Endpoint.LIST_INSTANCES, query=filters, collection=list)

    def create_instance(self, params: Mapping[str, Any] | CreateInstanceRequest | None = None) -> ApiResult:
        """Create an instance; ``MachineSize`` defaults to ``small``.

        Any other keys (``Region``, ``ManageRecordings``, ``Tags``, ...) are
        sent as given.
        """
        if not isinstance(params, CreateInstanceRequest):
            params = CreateInstanceRequest.model_validate(dict(params or {}))
        return self._call(Endpoint.CREATE_INSTANCE, json=params.model_dump(by_alias=True, exclude_none=True))

    def get_instance(self, instance_id: str) -> ApiResult:
        check_instance_id(instance_id)
        return self._call(Endpoint.GET_INSTANCE, path_params={"instanceID": instance_id})

    def delete_instance(self, instance_id: str) -> ApiResult:
        check_instance_id(instance_id)
        return self._call(Endpoint.DELETE_INSTANCE, path_params={"instanceID": instance_id})

    def start_instance(self, instance_id: str) -> ApiResult:
        check_instance_id(instance_id)
        body = InstanceActionRequest(instanceID=instance_id)
        return self._call(Endpoint.START_INSTANCE, json=body.model_dump(by_alias=True))

    def stop_instance(self, instance_id: str) -> ApiResult:
        check_instance_id(instance_id)
        body = InstanceActionRequest(instanceID=instance_id)
        return self._call(Endpoint.STOP_INSTANCE, json=body.model_dump(by_alias=True))

    def instance_history(self, instance_id: str) -> ApiResult:
        check_instance_id(instance_id)
        return self._call(Endpoint.INSTANCE_HISTORY, path_params={"instanceID": instance_id}, collection=list)

    def wait_for_instance_status(
        self,
        instance_id: str,
        expected: InstanceStatus | str,
        *,
        interval: float = _WAIT_INTERVAL,
        max_attempts: int = _WAIT_MAX_ATTEMPTS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> ApiResult:
        """Poll ``get_instance`` until the remote ``Status`` equals ``expected``.

        Returns the matching result, or the first error result seen.
        Raises :class:`InstanceStatusTimeoutError` after ``max_attempts`` polls
        and ``ValueError`` when ``max_attempts`` is below 1.
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        expected = str(expected)
        current: str | None = None
        for attempt in range(1, max_attempts + 1):
            result = self.get_instance(instance_id)
            if not result.ok:
                return result
            current = result.data.get("Status") if isinstance(result.data, dict) else None
            if current == expected:
                logger.info("Instance %s reached %s", instance_id, expected)
                return result
            if attempt < max_attempts:
                logger.debug(
                    "Instance %s is %s, waiting for %s (%d/%d)",
                    instance_id, current, expected, attempt, max_attempts,
                )
                sleep(interval)
        raise InstanceStatusTimeoutError(instance_id, expected, current, interval * (max_attempts - 1))

    # ── Meetings ───────────────────────────────────────────────

    def list_meetings(self) -> ApiResult:
        return self._call(Endpoint.LIST_MEETINGS, collection=list)

    def get_meeting(self, meeting_id: str) -> ApiResult:
        return self._call(Endpoint.GET_MEETING, path_params={"meetingID": meeting_id})

    # ── Recordings ─────────────────────────────────────────────

    def list_recordings(self) -> ApiResult:
        return self._call(Endpoint.LIST_RECORDINGS, collection=list)

    def get_recording(self, recording_id: str) -> ApiResult:
        check_recording_id(recording_id)
        return self._call(Endpoint.GET_RECORDING, path_params={"recordingID": recording_id})

    def publish_recording(self, recording_id: str) -> ApiResult:
        check_recording_id(recording_id)
        body = RecordingActionRequest(recordingID=recording_id)
        return self._call(Endpoint.PUBLISH_RECORDING, json=body.model_dump(by_alias=True))

    def unpublish_recording(self, recording_id: str) -> ApiResult:
        check_recording_id(recording_id)
        body = RecordingActionRequest(recordingID=recording_id)
        return self._call(Endpoint.UNPUBLISH_RECORDING, json=body.model_dump(by_alias=True))

    def delete_recording(self, recording_id: str) -> ApiResult:
        check_recording_id(recording_id)
        return self._call(Endpoint.DELETE_RECORDING, path_params={"recordingID": recording_id})

    # ── Regions ────────────────────────────────────────────────

    def list_regions(self) -> ApiResult:
        return self._call(Endpoint.LIST_REGIONS, collection=dict)
