# student_intake/services/submission.py
"""Parse -> extract -> store file -> insert, for one intake request."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from fastapi import Request
from starlette.datastructures import FormData, UploadFile
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException
from sqlalchemy.orm import Session

from student_intake.categories import CATEGORIES
from student_intake.core.errors import (
    BadRequest,
    DuplicateEmail,
    InternalError,
    StoreError,
    UniqueViolation,
)
from student_intake.models.student import Student
from student_intake.services.extract import decode_label_list, first_upload, first_value
from student_intake.services.repository import create_student
from student_intake.services.storage import UploadStorage

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
RESUME_FIELD = "resume"


@dataclass
class ResumeUpload:
    filename: Optional[str]
    data: bytes


@dataclass
class StudentSubmission:
    full_name: str = ""
    email: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    short_bio: str = ""
    available_for_work: bool = False
    # relationship name -> labels, in submitted order
    labels: Dict[str, List[str]] = field(default_factory=dict)

    def profile_columns(self, resume_url: str) -> dict:
        return {
            "full_name": self.full_name,
            "email": self.email,
            "linkedin_url": self.linkedin_url,
            "github_url": self.github_url,
            "short_bio": self.short_bio,
            "resume_url": resume_url,
            "available_for_work": self.available_for_work,
        }


async def parse_form(request: Request) -> FormData:
    try:
        return await request.form()
    except (MultiPartException, StarletteHTTPException) as exc:
        logger.warning("Rejecting unparseable upload: %s", getattr(exc, "detail", exc))
        raise BadRequest() from exc


def submission_from_form(form: FormData, strict_lists: bool = False) -> StudentSubmission:
    return StudentSubmission(
        full_name=first_value(form, "fullName", ""),
        email=first_value(form, "email", ""),
        linkedin_url=first_value(form, "linkedinUrl", ""),
        github_url=first_value(form, "githubUrl", ""),
        short_bio=first_value(form, "shortBio", ""),
        available_for_work=first_value(form, "availableForWork", "") == "yes",
        labels={
            c.attr: decode_label_list(form, c.field, strict=strict_lists)
            for c in CATEGORIES
        },
    )


def _media_type(content_type: Optional[str]) -> str:
    return (content_type or "").split(";")[0].strip().lower()


def _is_pdf(value: object) -> bool:
    return isinstance(value, UploadFile) and _media_type(value.content_type) == PDF_MEDIA_TYPE


def check_upload_sizes(form: FormData, max_bytes: int) -> None:
    """Reject the request if any accepted (PDF) file part is over the limit."""
    for name, value in form.multi_items():
        if _is_pdf(value) and value.size is not None and value.size > max_bytes:
            logger.warning("Rejecting %s part of %d bytes", name, value.size)
            raise BadRequest()


async def read_resume(form: FormData, max_bytes: int) -> Optional[ResumeUpload]:
    """The first PDF part named ``resume``; other media types are dropped.

    Every PDF part in the form counts against ``max_bytes``, not only the
    one kept.
    """
    check_upload_sizes(form, max_bytes)
    upload = first_upload(form, RESUME_FIELD)
    if upload is None:
        return None
    if not _is_pdf(upload):
        logger.info("Dropping resume part with media type %r", upload.content_type)
        return None
    data = await upload.read()
    if len(data) > max_bytes:
        raise BadRequest()
    return ResumeUpload(filename=upload.filename, data=data)


def persist_submission(
    db: Session,
    storage: UploadStorage,
    submission: StudentSubmission,
    resume: Optional[ResumeUpload],
) -> Student:
    """Write the resume, then insert the profile graph.

    A file written before a failed insert is left in place.
    """
    try:
        resume_url = storage.save(resume.filename, resume.data) if resume else ""
        student = create_student(db, submission.profile_columns(resume_url), submission.labels)
    except UniqueViolation as exc:
        if exc.field == "email":
            logger.warning("Duplicate submission for %s", submission.email)
            raise DuplicateEmail() from exc
        logger.exception("Error submitting form")
        raise InternalError() from exc
    except (StoreError, OSError) as exc:
        logger.exception("Error submitting form")
        raise InternalError() from exc

    logger.info("Stored submission %s (%s)", student.id, student.email)
    return student
