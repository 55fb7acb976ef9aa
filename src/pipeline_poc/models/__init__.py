"""Models package."""

from .errors import ErrorResponse
from .responses import (
    AppInfoResponse,
    HealthResponse,
    HealthStatus,
    HostnameResponse,
    LivenessResponse,
    PipelineInfoResponse,
    ServiceHealthResponse,
    TimeResponse,
    VulnerabilityList,
)

__all__ = [
    "AppInfoResponse",
    "ErrorResponse",
    "HealthResponse",
    "HealthStatus",
    "HostnameResponse",
    "LivenessResponse",
    "PipelineInfoResponse",
    "ServiceHealthResponse",
    "TimeResponse",
    "VulnerabilityList",
]
