"""Uniform error payload returned by the status error endpoints."""

from typing import Optional

from fastapi import status
from pydantic import BaseModel, ConfigDict, Field

from pipeline_poc.core.clock import system_clock


class ErrorResponse(BaseModel):
    """Error payload whose `errorCode` matches the HTTP status it is sent with.

    Build instances through the factory classmethods; each stamps the
    current epoch milliseconds unless an explicit timestamp is given.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str
    error_code: int = Field(alias="errorCode")
    timestamp: int = Field(description="Epoch milliseconds")

    @classmethod
    def _build(cls, message: str, error_code: int, timestamp: Optional[int]) -> "ErrorResponse":
        if timestamp is None:
            timestamp = system_clock.epoch_millis()
        return cls(message=message, error_code=error_code, timestamp=timestamp)

    @classmethod
    def bad_request(cls, message: str, timestamp: Optional[int] = None) -> "ErrorResponse":
        """400"""
        return cls._build(message, status.HTTP_400_BAD_REQUEST, timestamp)

    @classmethod
    def forbidden(cls, message: str, timestamp: Optional[int] = None) -> "ErrorResponse":
        """403"""
        return cls._build(message, status.HTTP_403_FORBIDDEN, timestamp)

    @classmethod
    def not_found(cls, message: str, timestamp: Optional[int] = None) -> "ErrorResponse":
        """404"""
        return cls._build(message, status.HTTP_404_NOT_FOUND, timestamp)

    @classmethod
    def internal_error(cls, message: str, timestamp: Optional[int] = None) -> "ErrorResponse":
        """500"""
        return cls._build(message, status.HTTP_500_INTERNAL_SERVER_ERROR, timestamp)

    @classmethod
    def service_unavailable(cls, message: str, timestamp: Optional[int] = None) -> "ErrorResponse":
        """503"""
        return cls._build(message, status.HTTP_503_SERVICE_UNAVAILABLE, timestamp)

    def to_payload(self) -> dict:
        """Serialize with wire field names."""
        return self.model_dump(by_alias=True)
