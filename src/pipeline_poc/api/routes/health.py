"""Health, info, status and time routes of the pipeline PoC service."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from pipeline_poc.api.dependencies import get_assembler
from pipeline_poc.core.assembler import ResponseAssembler
from pipeline_poc.models import HealthResponse, PipelineInfoResponse, TimeResponse

router = APIRouter(prefix="/api", tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service liveness",
    description="""
Returns the liveness state of the service. No dependency checks are performed.

**Response Example**:
```json
{
  "status": "UP",
  "timestamp": "2025-10-15T10:30:00.123456",
  "service": "cicd-pipeline-poc-app",
  "version": "1.0.0"
}
```
    """,
    responses={200: {"description": "Service is running"}},
)
async def health(assembler: ResponseAssembler = Depends(get_assembler)):
    """Health check endpoint."""
    return assembler.health()


@router.get(
    "/info",
    response_model=PipelineInfoResponse,
    summary="Application info and declared mock vulnerabilities",
    description="""
Returns the application name, its purpose, and the intentionally outdated
dependencies that the security scan stage is expected to flag.

**Response Example**:
```json
{
  "application": "CI/CD Pipeline PoC",
  "description": "Mock application with intentional vulnerabilities for testing CI/CD pipeline gates",
  "vulnerabilities": {
    "critical": "log4j 2.14.1 (CVE-2021-44228)",
    "high": "commons-collections 3.2.1 (CVE-2015-6420)",
    "medium": "jackson-databind 2.9.10.1"
  }
}
```
    """,
)
async def info(assembler: ResponseAssembler = Depends(get_assembler)):
    return assembler.info()


@router.get("/status", response_class=PlainTextResponse, summary="Basic service status")
async def status(assembler: ResponseAssembler = Depends(get_assembler)) -> str:
    return assembler.status()


@router.get(
    "/health/status",
    response_class=PlainTextResponse,
    summary="Service status with today's date",
    description='Plain text, e.g. `Service is running smoothy. Date: 15/10/2025`.',
)
async def health_status(assembler: ResponseAssembler = Depends(get_assembler)) -> str:
    return assembler.health_status()


@router.get(
    "/time",
    response_model=TimeResponse,
    summary="Current server time",
    description="""
**Response Example**:
```json
{
  "time": "10:30:00",
  "timestamp": "2025-10-15T10:30:00.123456",
  "timezone": "Europe/Madrid"
}
```
    """,
)
async def current_time(assembler: ResponseAssembler = Depends(get_assembler)):
    return assembler.time()
