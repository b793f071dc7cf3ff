# student_intake/services/validator.py
from typing import Collection, Mapping

from student_intake.categories import CATEGORIES


class ValidationFailed(Exception):
    """Raised by clients that gate submission; never sent over the wire."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("; ".join(errors.values()))
        self.errors = errors


def validate_categories(selections: Mapping[str, Collection[str]]) -> dict[str, str]:
    """Return ``{}`` when every category has a selection, otherwise one error.

    ``selections`` is keyed by wire field name (``technicalSkills`` ...).
    Only the first empty category, in declaration order, is reported.
    """
    for category in CATEGORIES:
        if not selections.get(category.field):
            return {category.field: f"Please select at least one {category.noun}."}
    return {}
