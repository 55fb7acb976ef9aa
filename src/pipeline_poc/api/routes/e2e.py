"""Routes of the end-to-end test application."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from pipeline_poc.api.dependencies import get_assembler
from pipeline_poc.core.assembler import ResponseAssembler
from pipeline_poc.models import AppInfoResponse, LivenessResponse, ServiceHealthResponse

router = APIRouter(prefix="/api", tags=["e2e"])

actuator_router = APIRouter(prefix="/actuator", tags=["actuator"])


@router.get("/hello", response_class=PlainTextResponse, summary="Greeting")
async def hello(assembler: ResponseAssembler = Depends(get_assembler)) -> str:
    return assembler.hello()


@router.get(
    "/status",
    response_class=PlainTextResponse,
    summary="Service status with timestamp",
    description="Plain text, e.g. `Service is running smoothly. Timestamp: 15/10/2025 10:30:00`.",
)
async def status(assembler: ResponseAssembler = Depends(get_assembler)) -> str:
    return assembler.timestamped_status()


@router.get(
    "/health",
    response_model=ServiceHealthResponse,
    summary="Service liveness",
    description="""
**Response Example**:
```json
{
  "status": "UP",
  "timestamp": "2025-10-15T10:30:00.123456",
  "serviceName": "opal-e2e-test-app",
  "version": "1.0.0"
}
```
    """,
)
async def health(assembler: ResponseAssembler = Depends(get_assembler)):
    return assembler.service_health()


@router.get("/info", response_model=AppInfoResponse, summary="Build and runtime info")
async def info(assembler: ResponseAssembler = Depends(get_assembler)):
    return assembler.app_info()


@actuator_router.get("/health", response_model=LivenessResponse, summary="Actuator-style liveness")
async def actuator_health(assembler: ResponseAssembler = Depends(get_assembler)):
    return assembler.liveness()
