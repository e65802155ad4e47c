"""Forms API: secure submissions upsert contacts."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter

from hubspot_mock.server.dependencies import CrmServiceDep
from hubspot_mock.server.models.requests import FormSubmissionRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/submissions/v3/integration", tags=["forms"])

INLINE_MESSAGE = "Thanks for submitting the form."


@router.post("/secure/submit/{portal_id}/{form_guid}")
@router.post("/submit/{portal_id}/{form_guid}")
async def submit_form(
    portal_id: str,
    form_guid: str,
    payload: FormSubmissionRequest,
    crm: CrmServiceDep,
) -> dict[str, Any]:
    """Create a contact from the submitted fields, or update the one with the same email."""
    logger.debug("Form submission portal=%s form=%s fields=%d", portal_id, form_guid, len(payload.fields))
    await crm.submit_form(payload.as_properties())
    return {"inlineMessage": INLINE_MESSAGE}
