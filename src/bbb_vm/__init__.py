"""Client library for the BBB On Demand virtual-machine REST API."""

from .config import Settings
from .errors import ClientValidationError, ErrorKind, InstanceStatusTimeoutError
from .routes import Endpoint, HttpMethod, UrlBuilder
from .transport import (
    ApiResult,
    CreateInstanceRequest,
    HttpxTransport,
    InstanceStatus,
    MachineSize,
    RawResponse,
    ResultEnvelope,
    Transport,
    TransportFailure,
    VmClient,
)
from .validation import check_instance_id, check_recording_id

__version__ = "0.1.0"

__all__ = [
    "ApiResult",
    "ClientValidationError",
    "CreateInstanceRequest",
    "Endpoint",
    "ErrorKind",
    "HttpMethod",
    "HttpxTransport",
    "InstanceStatus",
    "InstanceStatusTimeoutError",
    "MachineSize",
    "RawResponse",
    "ResultEnvelope",
    "Settings",
    "Transport",
    "TransportFailure",
    "UrlBuilder",
    "VmClient",
    "check_instance_id",
    "check_recording_id",
]
