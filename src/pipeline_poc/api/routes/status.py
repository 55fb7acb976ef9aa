"""Status routes: host name, echo probes and fixed error responses."""

import logging
from typing import Callable

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse, PlainTextResponse

from pipeline_poc.api.dependencies import get_assembler
from pipeline_poc.core.assembler import HostnameLookupError, ResponseAssembler
from pipeline_poc.models import ErrorResponse, HostnameResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/status", tags=["status"])

_ERROR_RESPONSE_DOC = {"model": ErrorResponse, "description": "Error payload"}


def _error_response(
    factory: Callable[..., ErrorResponse],
    message: str,
    assembler: ResponseAssembler,
) -> JSONResponse:
    error = factory(message, timestamp=assembler.clock.epoch_millis())
    return JSONResponse(status_code=error.error_code, content=error.to_payload())


@router.get(
    "/hostname",
    response_model=HostnameResponse,
    summary="Host name of the serving instance",
    description="""
**Response Example**:
```json
{
  "hostname": "pipeline-poc-7d9f8c",
  "Flag": "V2"
}
```

Returns a bare 500 when the host name cannot be resolved.
    """,
    responses={500: {"description": "Host name lookup failed (empty body)"}},
)
async def get_hostname(assembler: ResponseAssembler = Depends(get_assembler)):
    try:
        return assembler.hostname()
    except HostnameLookupError as e:
        logger.error(f"Hostname lookup failed: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/ping", response_class=PlainTextResponse)
async def ping(assembler: ResponseAssembler = Depends(get_assembler)) -> str:
    return assembler.echo("ping")


@router.get("/pong", response_class=PlainTextResponse)
async def pong(assembler: ResponseAssembler = Depends(get_assembler)) -> str:
    return assembler.echo("pong")


@router.get("/track", response_class=PlainTextResponse)
async def track(assembler: ResponseAssembler = Depends(get_assembler)) -> str:
    return assembler.echo("track")


# =============================================================================
# Fixed error responses
# =============================================================================

@router.get("/badrequest", responses={400: _ERROR_RESPONSE_DOC})
async def bad_request(assembler: ResponseAssembler = Depends(get_assembler)):
    """400"""
    return _error_response(ErrorResponse.bad_request, "Request is not proper build", assembler)


# Path spelling is part of the wire contract
@router.get("/forbiden", responses={403: _ERROR_RESPONSE_DOC})
async def forbidden(assembler: ResponseAssembler = Depends(get_assembler)):
    """403"""
    return _error_response(ErrorResponse.forbidden, "Not allow to this resource", assembler)


@router.get("/voidnotfoud", responses={404: {"description": "Not found (empty body)"}})
async def empty_not_found():
    """404 without a body"""
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@router.get("/notFound", responses={404: _ERROR_RESPONSE_DOC})
async def not_found(assembler: ResponseAssembler = Depends(get_assembler)):
    """404"""
    return _error_response(ErrorResponse.not_found, "Resource not Found", assembler)


@router.get("/internalError", responses={500: _ERROR_RESPONSE_DOC})
async def internal_error(assembler: ResponseAssembler = Depends(get_assembler)):
    """500"""
    return _error_response(ErrorResponse.internal_error, "Something went wrong", assembler)


@router.get("/unavailableservice", responses={503: _ERROR_RESPONSE_DOC})
async def service_unavailable(assembler: ResponseAssembler = Depends(get_assembler)):
    """503"""
    return _error_response(ErrorResponse.service_unavailable, "Service is not available", assembler)
