"""Tests for the client-side form state bookkeeping."""

import json

import pytest

from student_intake.categories import CATEGORIES, TECHNICAL_SKILLS
from student_intake.services.form_state import (
    CategorySelection,
    IntakeForm,
    ResumeFile,
)
from student_intake.services.validator import ValidationFailed


@pytest.fixture
def skills():
    return CategorySelection(TECHNICAL_SKILLS)


def filled_form():
    form = IntakeForm(
        full_name="Ada Lovelace",
        email="ada@example.com",
        short_bio="Analytical Engine programmer",
        resume=ResumeFile("cv.pdf", b"%PDF"),
        available_for_work="yes",
    )
    for field, label in (
        ("technicalSkills", "Python"),
        ("certifications", "AWS"),
        ("careerInterests", "Backend"),
        ("workExperience", "Freelance"),
    ):
        form.category(field).toggle(label, True)
    return form


class TestCategorySelection:

    def test_toggle_checks_and_unchecks(self, skills):
        skills.toggle("Python", True)
        skills.toggle("SQL", True)
        skills.toggle("Python", False)

        assert skills.selected == ["SQL"]

    def test_toggle_is_idempotent(self, skills):
        skills.toggle("Python", True)
        skills.toggle("Python", True)

        assert skills.selected == ["Python"]

    def test_add_custom_trims(self, skills):
        assert skills.add_custom("  Rust  ") is True

        assert skills.selected == ["Rust"]

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_add_custom_ignores_blank(self, skills, text):
        assert skills.add_custom(text) is False
        assert skills.selected == []

    def test_add_custom_ignores_already_selected(self, skills):
        skills.toggle("Python", True)

        assert skills.add_custom("Python") is False
        assert skills.selected == ["Python"]

    def test_add_custom_is_case_sensitive(self, skills):
        skills.add_custom("rust")

        assert skills.add_custom("Rust") is True
        assert skills.selected == ["rust", "Rust"]

    def test_remove_tag(self, skills):
        skills.add_custom("Rust")
        skills.toggle("HTML", True)

        skills.remove("Rust")

        assert skills.selected == ["HTML"]

    def test_custom_excludes_presets(self, skills):
        skills.toggle("HTML", True)
        skills.add_custom("Go")

        assert skills.custom == ["Go"]
        assert skills.presets == TECHNICAL_SKILLS.presets


class TestIntakeForm:

    def test_has_every_category(self):
        form = IntakeForm()

        assert list(form.selections) == [c.field for c in CATEGORIES]

    def test_filled_form_is_valid(self):
        form = filled_form()

        assert form.errors() == {}
        form.ensure_valid()

    def test_category_error_reports_first_missing_only(self):
        form = filled_form()
        form.category("certifications").remove("AWS")
        form.category("workExperience").remove("Freelance")

        assert form.errors() == {
            "certifications": "Please select at least one certification."
        }

    def test_missing_scalars_are_reported(self):
        form = filled_form()
        form.full_name = "   "
        form.resume = None
        form.available_for_work = ""

        assert set(form.errors()) == {"fullName", "resume", "availableForWork"}

    def test_ensure_valid_raises(self):
        form = IntakeForm()

        with pytest.raises(ValidationFailed) as excinfo:
            form.ensure_valid()
        assert "technicalSkills" in excinfo.value.errors
        assert "certifications" not in excinfo.value.errors

    def test_to_multipart(self):
        form = filled_form()
        form.category("technicalSkills").add_custom("Rust")

        data, files = form.to_multipart()

        assert data["fullName"] == "Ada Lovelace"
        assert data["availableForWork"] == "yes"
        assert json.loads(data["technicalSkills"]) == ["Python", "Rust"]
        assert json.loads(data["workExperience"]) == ["Freelance"]
        assert files == {"resume": ("cv.pdf", b"%PDF", "application/pdf")}

    def test_to_multipart_without_resume(self):
        data, files = IntakeForm().to_multipart()

        assert files is None
        assert data["certifications"] == "[]"
