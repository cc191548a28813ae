"""Exceptions raised or delivered by resource transports."""

from typing import Any, Dict, Optional

import requests


class ResourceKitError(Exception):
    """Base exception for all resource-kit errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "RESOURCE_KIT_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(ResourceKitError):
    """Raised when a ResourceKit endpoint or factory is unusable."""

    def __init__(self, message: str, endpoint: Any = None):
        super().__init__(
            message,
            error_code="CONFIG_ERROR",
            details={"endpoint_type": type(endpoint).__name__} if endpoint is not None else {}
        )


class PreconditionError(ResourceKitError):
    """Raised immediately when an operation is called with unusable arguments."""

    def __init__(self, message: str, operation: str, item: Any = None):
        super().__init__(
            message,
            error_code="PRECONDITION_FAILED",
            details={"operation": operation, "item": item}
        )
        self.operation = operation
        self.item = item


class UnsupportedOperationError(ResourceKitError, NotImplementedError):
    """Raised when a transport does not implement an operation."""

    def __init__(self, transport: str, operation: str):
        super().__init__(
            f"{transport} does not support '{operation}'",
            error_code="UNSUPPORTED_OPERATION",
            details={"transport": transport, "operation": operation}
        )
        self.operation = operation


class DataNotFoundError(ResourceKitError):
    """Raised when requested data is not found."""

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            error_code="DATA_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class RemoteTransportError(ResourceKitError):
    """Raised when a remote request does not complete successfully."""

    def __init__(
        self,
        message: str,
        method: str,
        url: str,
        response: Optional[requests.Response] = None,
        error_code: str = "REMOTE_ERROR"
    ):
        status_code = response.status_code if response is not None else None
        super().__init__(
            message,
            error_code=error_code,
            details={"method": method, "url": url, "status_code": status_code}
        )
        self.method = method
        self.url = url
        self.response = response
        self.status_code = status_code


class RequestTimeoutError(RemoteTransportError):
    """Raised when a remote request is aborted by its timeout."""

    def __init__(self, method: str, url: str, timeout_ms: int):
        super().__init__(
            f"{method} {url} timed out after {timeout_ms} ms",
            method,
            url,
            error_code="REQUEST_TIMEOUT"
        )
        self.timeout_ms = timeout_ms
