# student_intake/services/repository.py
"""Record store access. SQLAlchemy errors stop here."""
from typing import List, Mapping, Sequence

from sqlalchemy import select, desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from student_intake.core.errors import StoreError, UniqueViolation
from student_intake.models.student import Student, ENTRY_MODELS, UNIQUE_CONSTRAINTS


def _violated_unique_field(exc: IntegrityError) -> str | None:
    # PostgreSQL names the constraint, SQLite names "<table>.<column>"
    message = str(exc.orig)
    for constraint, column in UNIQUE_CONSTRAINTS.items():
        if constraint in message or f"{Student.__tablename__}.{column}" in message:
            return column
    return None


def create_student(
    db: Session,
    profile: Mapping[str, object],
    entries: Mapping[str, Sequence[str]],
) -> Student:
    """Insert a student and its label collections in one transaction.

    ``entries`` maps a relationship name (``technical_skills`` ...) to labels.
    """
    student = Student(**profile)
    for attr, labels in entries.items():
        model = ENTRY_MODELS[attr]
        getattr(student, attr).extend(model(name=label) for label in labels)

    db.add(student)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        field = _violated_unique_field(exc)
        if field is not None:
            raise UniqueViolation(field) from exc
        raise StoreError(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise StoreError(str(exc)) from exc
    except ValueError as exc:
        # driver-level encoding failures (e.g. lone surrogates) during flush
        db.rollback()
        raise StoreError(str(exc)) from exc
    return student


def list_students(db: Session) -> List[Student]:
    """All students with their collections loaded, newest first."""
    stmt = (
        select(Student)
        .options(*(selectinload(getattr(Student, attr)) for attr in ENTRY_MODELS))
        .order_by(desc(Student.created_at))
    )
    try:
        return list(db.execute(stmt).scalars().all())
    except SQLAlchemyError as exc:
        raise StoreError(str(exc)) from exc
