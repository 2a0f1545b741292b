"""
Contact form routes - status check and form submission
"""
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from contact_api.models.submission import BODY_INVALID, SUBMISSION_ACCEPTED
from contact_api.services.submission_service import SubmissionService
from contact_api.utils.exceptions import ValidationError

router = APIRouter(tags=["Contact"])

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_submission_service(request: Request) -> SubmissionService:
    """Service instance created by create_app()"""
    return request.app.state.submission_service


async def read_payload(request: Request) -> Any:
    """Decoded request body: JSON document or HTML form fields"""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    try:
        return await request.json()
    except (ValueError, RecursionError):
        raise ValidationError("body", BODY_INVALID)


@router.get("/status")
async def get_status(service: SubmissionService = Depends(get_submission_service)):
    """Liveness check"""
    return service.status()


@router.post("/submit")
async def submit_contact_form(
    request: Request,
    service: SubmissionService = Depends(get_submission_service),
):
    """Validate and store a contact form submission"""
    payload = await read_payload(request)
    await run_in_threadpool(service.submit, payload)
    return {"success": True, "message": SUBMISSION_ACCEPTED}
