"""
Read-only listing of stored submissions, for testing the form end to end.
Unauthenticated: only mounted when EXPOSE_SUBMISSIONS is enabled.
"""
from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from contact_api.routes.contact import get_submission_service
from contact_api.services.submission_service import SubmissionService

router = APIRouter(tags=["Debug"])


@router.get("/submissions")
async def list_submissions(service: SubmissionService = Depends(get_submission_service)):
    return await run_in_threadpool(service.list_submissions)
