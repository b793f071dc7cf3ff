# student_intake/services/listing.py
import logging
from typing import List

from sqlalchemy.orm import Session

from student_intake.core.errors import InternalError, StoreError
from student_intake.models.student import Student
from student_intake.services.repository import list_students

logger = logging.getLogger(__name__)


def fetch_submissions(db: Session) -> List[Student]:
    try:
        return list_students(db)
    except StoreError as exc:
        logger.exception("Error fetching submissions")
        raise InternalError("Error fetching submissions") from exc
