"""Domain errors raised by the object store and the operation layer.

Each error carries a stable ``error_code`` so request logs and the HTTP layer
can classify it without string matching:

- ObjectNotFoundError: missing id, or archived state not matching the filter
- UnsupportedResourceError: a resource name outside the closed set
- WebhookDeliveryError: the notification endpoint failed or was unreachable
"""

from __future__ import annotations

from typing import Any


class CrmError(Exception):
    """Base class for CRM stand-in errors."""

    error_code = "CRM_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error_code": self.error_code, "message": self.message}


class ObjectNotFoundError(CrmError):
    """Raised when an object does not exist or is masked by the archived filter."""

    error_code = "OBJECT_NOT_FOUND"

    def __init__(self, resource: str, object_id: Any):
        super().__init__(f"{resource} {object_id} not found")
        self.resource = resource
        self.object_id = object_id

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(resource=self.resource, object_id=self.object_id)
        return data


class UnsupportedResourceError(CrmError, NotImplementedError):
    """Raised when a resource name has no mapping in the closed resource set."""

    error_code = "RESOURCE_NOT_IMPLEMENTED"

    def __init__(self, resource: str):
        super().__init__(f"NotImplemented: no mapping for resource '{resource}'")
        self.resource = resource


class WebhookDeliveryError(CrmError):
    """Raised when a notification batch could not be delivered."""

    error_code = "WEBHOOK_DELIVERY_FAILED"

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(url=self.url, status_code=self.status_code)
        return data
