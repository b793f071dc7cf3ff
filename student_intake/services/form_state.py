# student_intake/services/form_state.py
"""In-memory state of the intake form, independent of any UI toolkit."""
import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from student_intake.categories import CATEGORIES, Category
from student_intake.services.validator import ValidationFailed, validate_categories


@dataclass
class CategorySelection:
    category: Category
    selected: List[str] = field(default_factory=list)

    @property
    def presets(self) -> Tuple[str, ...]:
        return self.category.presets

    @property
    def custom(self) -> List[str]:
        """Selected labels that are not preset checkboxes."""
        return [s for s in self.selected if s not in self.category.presets]

    def is_selected(self, label: str) -> bool:
        return label in self.selected

    def toggle(self, label: str, checked: bool) -> None:
        if checked:
            if label not in self.selected:
                self.selected.append(label)
        else:
            self.remove(label)

    def add_custom(self, text: str) -> bool:
        """Add a typed-in label. Returns False when nothing was added."""
        value = (text or "").strip()
        if not value or value in self.selected:
            return False
        self.selected.append(value)
        return True

    def remove(self, label: str) -> None:
        self.selected = [s for s in self.selected if s != label]


@dataclass
class ResumeFile:
    filename: str
    data: bytes
    content_type: str = "application/pdf"


@dataclass
class IntakeForm:
    full_name: str = ""
    email: str = ""
    linkedin_url: str = ""
    github_url: str = ""
    short_bio: str = ""
    resume: Optional[ResumeFile] = None
    available_for_work: str = ""  # "yes" | "no" | "" (unanswered)
    selections: Dict[str, CategorySelection] = field(
        default_factory=lambda: {c.field: CategorySelection(c) for c in CATEGORIES}
    )

    def category(self, field_name: str) -> CategorySelection:
        return self.selections[field_name]

    def missing_required(self) -> List[str]:
        missing = []
        for name, value in (
            ("fullName", self.full_name),
            ("email", self.email),
            ("shortBio", self.short_bio),
        ):
            if not value.strip():
                missing.append(name)
        if self.resume is None:
            missing.append("resume")
        if self.available_for_work not in ("yes", "no"):
            missing.append("availableForWork")
        return missing

    def errors(self) -> Dict[str, str]:
        """Category errors first (at most one), then missing required fields."""
        errors = validate_categories({k: v.selected for k, v in self.selections.items()})
        for name in self.missing_required():
            errors[name] = "This field is required."
        return errors

    def ensure_valid(self) -> None:
        errors = self.errors()
        if errors:
            raise ValidationFailed(errors)

    def to_multipart(self) -> Tuple[Dict[str, str], Optional[Dict[str, tuple]]]:
        """Field mapping and ``files`` argument for a multipart POST."""
        data = {
            "fullName": self.full_name,
            "email": self.email,
            "linkedinUrl": self.linkedin_url,
            "githubUrl": self.github_url,
            "shortBio": self.short_bio,
            "availableForWork": self.available_for_work,
        }
        for name, selection in self.selections.items():
            data[name] = json.dumps(selection.selected)
        files = None
        if self.resume is not None:
            files = {"resume": (self.resume.filename, self.resume.data, self.resume.content_type)}
        return data, files
