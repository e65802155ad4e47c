"""Models package for the CRM API server."""

from hubspot_mock.server.models.requests import (
    AssociationSpec,
    FormField,
    FormSubmissionRequest,
    ObjectCreateRequest,
    ObjectUpdateRequest,
    SearchRequest,
)

__all__ = [
    "AssociationSpec",
    "FormField",
    "FormSubmissionRequest",
    "ObjectCreateRequest",
    "ObjectUpdateRequest",
    "SearchRequest",
]
