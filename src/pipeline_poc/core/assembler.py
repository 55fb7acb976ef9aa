"""Response assembly for the health, info, status and time endpoints.

Every operation is a pure function of the clock reading and the static
service configuration. Nothing here inspects the request.
"""

import platform
import socket
from datetime import datetime, tzinfo
from typing import Callable, Optional

import fastapi

from pipeline_poc.config import Settings
from pipeline_poc.core.clock import SystemClock, resolve_zone, system_clock, zone_id
from pipeline_poc.models.responses import (
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

PIPELINE_APPLICATION_NAME = "CI/CD Pipeline PoC"
PIPELINE_DESCRIPTION = "Mock application with intentional vulnerabilities for testing CI/CD pipeline gates"
E2E_DESCRIPTION = "Test application for OPAL CI/CD pipeline end-to-end testing"
HELLO_MESSAGE = "Hello from OPAL E2E Test Application!"
STATUS_MESSAGE = "Service is running smoothly."
# "smoothy" is asserted verbatim by existing pipeline checks
HEALTH_STATUS_PREFIX = "Service is running smoothy. Date: "
HOSTNAME_FLAG = "V2"

MOCK_VULNERABILITIES = VulnerabilityList(
    critical="log4j 2.14.1 (CVE-2021-44228)",
    high="commons-collections 3.2.1 (CVE-2015-6420)",
    medium="jackson-databind 2.9.10.1",
)


class HostnameLookupError(RuntimeError):
    """Raised when the local host name cannot be resolved."""


def format_local_timestamp(moment: datetime) -> str:
    """ISO-8601 local date-time, without offset."""
    return moment.replace(tzinfo=None).isoformat()


class ResponseAssembler:
    """Builds endpoint payloads from the clock and service settings."""

    def __init__(
        self,
        settings: Settings,
        clock: SystemClock = system_clock,
        hostname_source: Callable[[], str] = socket.gethostname,
    ):
        """Initialize assembler.

        Args:
            settings: Service settings supplying name, version and zone
            clock: Time source shared with the error payload builder
            hostname_source: Callable returning the local host name

        Raises:
            zoneinfo.ZoneInfoNotFoundError: If the configured zone is unknown
        """
        self.settings = settings
        self.clock = clock
        self.zone: Optional[tzinfo] = resolve_zone(settings.timezone)
        self._hostname_source = hostname_source

    @property
    def service_name(self) -> str:
        return self.settings.resolved_service_name

    @property
    def version(self) -> str:
        return self.settings.service_version

    def _now(self) -> datetime:
        return self.clock.now(self.zone)

    def health(self) -> HealthResponse:
        """Liveness payload; no dependency checks are performed."""
        return HealthResponse(
            status=HealthStatus.UP,
            timestamp=format_local_timestamp(self._now()),
            service=self.service_name,
            version=self.version,
        )

    def service_health(self) -> ServiceHealthResponse:
        return ServiceHealthResponse(
            status=HealthStatus.UP,
            timestamp=format_local_timestamp(self._now()),
            service_name=self.service_name,
            version=self.version,
        )

    def liveness(self) -> LivenessResponse:
        return LivenessResponse(status=HealthStatus.UP)

    def info(self) -> PipelineInfoResponse:
        return PipelineInfoResponse(
            application=PIPELINE_APPLICATION_NAME,
            description=PIPELINE_DESCRIPTION,
            vulnerabilities=MOCK_VULNERABILITIES,
        )

    def app_info(self) -> AppInfoResponse:
        return AppInfoResponse(
            name=self.service_name,
            description=E2E_DESCRIPTION,
            version=self.version,
            framework=f"FastAPI {fastapi.__version__}",
            runtime_version=f"Python {platform.python_version()}",
        )

    def hello(self) -> str:
        return HELLO_MESSAGE

    def status(self) -> str:
        return STATUS_MESSAGE

    def timestamped_status(self) -> str:
        """Status sentence followed by `DD/MM/YYYY HH:MM:SS`."""
        stamp = self._now().strftime("%d/%m/%Y %H:%M:%S")
        return f"Service is running smoothly. Timestamp: {stamp}"

    def health_status(self) -> str:
        """Status sentence followed by today's date as `DD/MM/YYYY`."""
        return HEALTH_STATUS_PREFIX + self._now().strftime("%d/%m/%Y")

    def time(self) -> TimeResponse:
        now = self._now()
        return TimeResponse(
            time=now.strftime("%H:%M:%S"),
            timestamp=format_local_timestamp(now),
            timezone=zone_id(now),
        )

    def hostname(self) -> HostnameResponse:
        """Resolve the local host name.

        Raises:
            HostnameLookupError: If the host name cannot be determined
        """
        try:
            hostname = self._hostname_source()
        except OSError as e:
            raise HostnameLookupError(f"Could not resolve local host name: {e}") from e

        if not hostname:
            raise HostnameLookupError("Local host name is empty")

        return HostnameResponse(hostname=hostname, flag=HOSTNAME_FLAG)

    def echo(self, name: str) -> str:
        return name
