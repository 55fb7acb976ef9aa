"""API response models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class HealthStatus(str, Enum):
    """Liveness states."""
    UP = "UP"
    DOWN = "DOWN"


class HealthResponse(BaseModel):
    """Health check response keyed by `service`."""

    status: HealthStatus = HealthStatus.UP
    timestamp: str
    service: str
    version: str


class ServiceHealthResponse(BaseModel):
    """Health check response keyed by `serviceName`."""

    model_config = ConfigDict(populate_by_name=True)

    status: HealthStatus = HealthStatus.UP
    timestamp: str
    service_name: str = Field(alias="serviceName")
    version: str


class LivenessResponse(BaseModel):
    """Actuator-style liveness response."""

    status: HealthStatus = HealthStatus.UP


class VulnerabilityList(BaseModel):
    """Mock vulnerabilities grouped by severity."""

    critical: str
    high: str
    medium: str


class PipelineInfoResponse(BaseModel):
    """Application info with the declared mock vulnerabilities."""

    application: str
    description: str
    vulnerabilities: VulnerabilityList


class AppInfoResponse(BaseModel):
    """Application build and runtime info."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    version: str
    framework: str
    runtime_version: str = Field(alias="runtimeVersion")


class TimeResponse(BaseModel):
    """Current server time."""

    time: str = Field(description="Wall-clock time as HH:MM:SS")
    timestamp: str = Field(description="ISO-8601 local date-time")
    timezone: str


class HostnameResponse(BaseModel):
    """Host name of the serving process."""

    model_config = ConfigDict(populate_by_name=True)

    hostname: str
    flag: str = Field(default="V2", alias="Flag")
