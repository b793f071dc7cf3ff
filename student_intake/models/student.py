import uuid
from datetime import datetime, timezone
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, Integer, Text, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from student_intake.db.base import Base

# constraint name -> column, used to report which field a duplicate insert hit
UNIQUE_CONSTRAINTS = {"uq_students_email": "email"}


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Student(Base):
    __tablename__ = "students"
    __table_args__ = (UniqueConstraint("email", name="uq_students_email"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=_new_id)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    linkedin_url: Mapped[str | None] = mapped_column(String(512))
    github_url: Mapped[str | None] = mapped_column(String(512))
    short_bio: Mapped[str] = mapped_column(Text, nullable=False)
    resume_url: Mapped[str] = mapped_column(String(512), nullable=False, default="")
    available_for_work: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    # Python-side default keeps sub-second ordering on SQLite
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, server_default=func.now(), index=True
    )

    technical_skills = relationship(
        "TechnicalSkill",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TechnicalSkill.id",
    )
    certifications = relationship(
        "Certification",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Certification.id",
    )
    career_interests = relationship(
        "CareerInterest",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="CareerInterest.id",
    )
    work_experience = relationship(
        "WorkExperience",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="WorkExperience.id",
    )


class CategoryEntry:
    """Columns shared by the four per-student label tables."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    student_id: Mapped[str] = mapped_column(
        String(32),
        ForeignKey("students.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)


class TechnicalSkill(CategoryEntry, Base):
    __tablename__ = "technical_skills"


class Certification(CategoryEntry, Base):
    __tablename__ = "certifications"


class CareerInterest(CategoryEntry, Base):
    __tablename__ = "career_interests"


class WorkExperience(CategoryEntry, Base):
    __tablename__ = "work_experiences"


# relationship attribute on Student -> entry model
ENTRY_MODELS = {
    "technical_skills": TechnicalSkill,
    "certifications": Certification,
    "career_interests": CareerInterest,
    "work_experience": WorkExperience,
}
