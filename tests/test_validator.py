"""Tests for the intake validator."""

import itertools

import pytest

from student_intake.services.validator import ValidationFailed, validate_categories

FIELDS = ["technicalSkills", "certifications", "careerInterests", "workExperience"]

MESSAGES = {
    "technicalSkills": "Please select at least one technical skill.",
    "certifications": "Please select at least one certification.",
    "careerInterests": "Please select at least one career interest.",
    "workExperience": "Please select at least one work experience.",
}


def full_selection():
    return {
        "technicalSkills": ["Python"],
        "certifications": ["AWS"],
        "careerInterests": ["Backend"],
        "workExperience": ["Freelance"],
    }


class TestValidateCategories:

    def test_all_present_is_valid(self):
        assert validate_categories(full_selection()) == {}

    @pytest.mark.parametrize("field", FIELDS)
    def test_single_missing_category(self, field):
        selection = full_selection()
        selection[field] = []

        assert validate_categories(selection) == {field: MESSAGES[field]}

    @pytest.mark.parametrize(
        "missing",
        [set(c) for r in range(1, 5) for c in itertools.combinations(FIELDS, r)],
    )
    def test_only_first_missing_category_is_reported(self, missing):
        selection = full_selection()
        for field in missing:
            selection[field] = []

        errors = validate_categories(selection)

        first = next(f for f in FIELDS if f in missing)
        assert errors == {first: MESSAGES[first]}

    def test_absent_key_counts_as_empty(self):
        selection = full_selection()
        del selection["careerInterests"]

        assert validate_categories(selection) == {"careerInterests": MESSAGES["careerInterests"]}

    def test_accepts_sets(self):
        selection = {k: set(v) for k, v in full_selection().items()}

        assert validate_categories(selection) == {}


class TestValidationFailed:

    def test_carries_errors(self):
        exc = ValidationFailed({"technicalSkills": MESSAGES["technicalSkills"]})

        assert exc.errors == {"technicalSkills": MESSAGES["technicalSkills"]}
        assert str(exc) == MESSAGES["technicalSkills"]
