"""Transport layer — BBB On Demand VM REST API."""

from .client import VmClient
from .http import HttpxTransport, RawResponse, Transport, TransportFailure
from .models import (
    ApiResult,
    CreateInstanceRequest,
    InstanceStatus,
    MachineSize,
    ResultEnvelope,
)
from .normalizer import interpret, normalize_result

__all__ = [
    "ApiResult",
    "CreateInstanceRequest",
    "HttpxTransport",
    "InstanceStatus",
    "MachineSize",
    "RawResponse",
    "ResultEnvelope",
    "Transport",
    "TransportFailure",
    "VmClient",
    "interpret",
    "normalize_result",
]
