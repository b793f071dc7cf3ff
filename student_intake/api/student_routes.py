# student_intake/api/student_routes.py
from typing import List

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from student_intake.core.config import Settings
from student_intake.core.errors import MethodNotAllowed
from student_intake.db.session import get_db
from student_intake.schemas.student import StudentOut, SubmitResponse
from student_intake.services.listing import fetch_submissions
from student_intake.services.storage import UploadStorage, get_storage
from student_intake.services.submission import (
    parse_form,
    persist_submission,
    read_resume,
    submission_from_form,
)

router = APIRouter(prefix="/api", tags=["Students"])

# Every verb is routed here so a wrong one gets our 405 body, not the framework's.
# CORS preflights are answered by the middleware before routing.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.api_route(
    "/submit",
    methods=ALL_METHODS,
    response_model=SubmitResponse,
    response_model_exclude_none=True,
    summary="Submit a student profile (multipart)",
)
async def submit(
    request: Request,
    db: Session = Depends(get_db),
    storage: UploadStorage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    if request.method != "POST":
        raise MethodNotAllowed()

    form = await parse_form(request)
    try:
        submission = submission_from_form(form, strict_lists=settings.STRICT_LIST_FIELDS)
        resume = await read_resume(form, settings.MAX_RESUME_BYTES)
    finally:
        await form.close()

    await run_in_threadpool(persist_submission, db, storage, submission, resume)
    return SubmitResponse(
        success=True,
        message="Form submitted successfully",
        redirect_url=settings.SUCCESS_REDIRECT_URL,
    )


@router.api_route(
    "/submissions",
    methods=ALL_METHODS,
    response_model=List[StudentOut],
    summary="List submissions (newest first)",
)
def list_submissions(request: Request, db: Session = Depends(get_db)):
    if request.method != "GET":
        raise MethodNotAllowed()
    return fetch_submissions(db)
