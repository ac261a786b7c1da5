"""Route table of the VM REST API and the URL builder that renders it."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum, StrEnum

_PLACEHOLDER = re.compile(r"\{(.*?)\}")


class HttpMethod(StrEnum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Endpoint(Enum):
    """Every remote operation as a ``(method, template)`` pair.

    Templates carry at most one ``{name}`` placeholder.
    """

    # ── Billing ────────────────────────────────────────────────
    BILLING_SUMMARY = (HttpMethod.GET, "billing/activity")

    # ── Instances ──────────────────────────────────────────────
    LIST_INSTANCES = (HttpMethod.GET, "instances")
    CREATE_INSTANCE = (HttpMethod.POST, "instances")
    GET_INSTANCE = (HttpMethod.GET, "instances/{instanceID}")
    DELETE_INSTANCE = (HttpMethod.DELETE, "instances/{instanceID}")
    START_INSTANCE = (HttpMethod.POST, "instances/start")
    STOP_INSTANCE = (HttpMethod.POST, "instances/stop")
    INSTANCE_HISTORY = (HttpMethod.GET, "instances/{instanceID}/history")

    # ── Meetings ───────────────────────────────────────────────
    LIST_MEETINGS = (HttpMethod.GET, "meetings")
    GET_MEETING = (HttpMethod.GET, "meetings/{meetingID}")

    # ── Recordings ─────────────────────────────────────────────
    LIST_RECORDINGS = (HttpMethod.GET, "recordings")
    GET_RECORDING = (HttpMethod.GET, "recordings/{recordingID}")
    PUBLISH_RECORDING = (HttpMethod.POST, "recordings/publish")
    UNPUBLISH_RECORDING = (HttpMethod.POST, "recordings/unpublish")
    DELETE_RECORDING = (HttpMethod.DELETE, "recordings/{recordingID}")

    # ── Regions ────────────────────────────────────────────────
    LIST_REGIONS = (HttpMethod.GET, "regions")

    def __init__(self, method: HttpMethod, template: str) -> None:
        self.method = method
        self.template = template


class UrlBuilder:
    """Renders ``<base_url>/<customer_id>/vm/<route>[?<query>]``.

    Only the first placeholder of a template is substituted; the route table
    never needs more than one path variable. Nothing is escaped, callers
    pass path values and query strings already encoded.
    """

    def __init__(self, customer_id: str, base_url: str) -> None:
        self.customer_id = customer_id
        self.base_url = base_url.rstrip("/")

    def build(
        self,
        route: str,
        path_params: Mapping[str, str] | None = None,
        query_string: str | None = None,
    ) -> str:
        match = _PLACEHOLDER.search(route)
        if match and path_params and match.group(1) in path_params:
            route = route.replace(match.group(0), str(path_params[match.group(1)]), 1)
        query = f"?{query_string}" if query_string else ""
        return f"{self.base_url}/{self.customer_id}/vm/{route}{query}"
