# student_intake/categories.py
"""The four self-reported attribute collections a profile carries.

``field`` is the multipart / JSON name, ``attr`` the ORM relationship on
``Student``. Order matters: validation walks the categories in this order.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Category:
    field: str
    attr: str
    noun: str
    presets: tuple[str, ...]


TECHNICAL_SKILLS = Category(
    field="technicalSkills",
    attr="technical_skills",
    noun="technical skill",
    presets=("HTML", "CSS", "JavaScript", "Python", "Java", "React", "Node.js", "SQL"),
)
CERTIFICATIONS = Category(
    field="certifications",
    attr="certifications",
    noun="certification",
    presets=("Scrum", "AWS", "Google IT", "CompTIA", "None"),
)
CAREER_INTERESTS = Category(
    field="careerInterests",
    attr="career_interests",
    noun="career interest",
    presets=("Frontend", "Backend", "Full Stack", "Cybersecurity", "UI/UX", "QA", "DevOps"),
)
WORK_EXPERIENCE = Category(
    field="workExperience",
    attr="work_experience",
    noun="work experience",
    presets=(
        "Marketing",
        "Retail",
        "Customer Service",
        "Education",
        "Healthcare",
        "Military",
        "Tech Support",
        "Freelance",
    ),
)

CATEGORIES: tuple[Category, ...] = (
    TECHNICAL_SKILLS,
    CERTIFICATIONS,
    CAREER_INTERESTS,
    WORK_EXPERIENCE,
)
