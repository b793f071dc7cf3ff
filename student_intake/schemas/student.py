# student_intake/schemas/student.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # wire format is camelCase, attributes stay snake_case
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CategoryEntryOut(CamelModel):
    name: str


class StudentOut(CamelModel):
    id: str
    full_name: str
    email: str
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    short_bio: str
    resume_url: str
    available_for_work: bool
    technical_skills: List[CategoryEntryOut] = []
    certifications: List[CategoryEntryOut] = []
    career_interests: List[CategoryEntryOut] = []
    work_experience: List[CategoryEntryOut] = []
    created_at: datetime


class SubmitResponse(CamelModel):
    success: bool
    message: str
    redirect_url: Optional[str] = None
