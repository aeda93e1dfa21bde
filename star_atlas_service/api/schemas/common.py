"""
Common Pydantic schemas for API responses.
Provides the response envelope shared by all endpoints.
"""

from typing import Any, Generic, Optional, TypeVar
from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, model_serializer


T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """
    Response envelope.

    Exactly one of ``data`` and ``error`` is populated; the other one is
    left out of the serialized payload instead of being sent as null.
    """
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None

    @model_serializer(mode="wrap")
    def _omit_absent_fields(self, handler):
        payload = handler(self)
        for key in ("data", "error"):
            if payload.get(key) is None:
                payload.pop(key, None)
        return payload


class HealthCheckResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    service: str
    version: str


def create_success_response(data: Any) -> ApiResponse:
    """Create a success envelope."""
    return ApiResponse(success=True, data=data)


def create_error_response(error: str) -> ApiResponse:
    """Create an error envelope."""
    return ApiResponse(success=False, error=error)


def to_json_response(
    response: ApiResponse,
    status_code: int = status.HTTP_200_OK
) -> JSONResponse:
    """Serialize an envelope with field aliases applied."""
    return JSONResponse(
        status_code=status_code,
        content=response.model_dump(mode="json", by_alias=True)
    )
