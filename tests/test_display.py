"""Tests for the submissions list formatting helpers."""

import pytest

from student_intake.services.display import profile_links, submitted_on


class TestSubmittedOn:

    @pytest.mark.parametrize(
        "created_at",
        ["2026-03-04T10:11:12.123456", "2026-03-04T10:11:12", "2026-03-04"],
    )
    def test_iso_timestamp(self, created_at):
        assert submitted_on(created_at) == "Mar 4, 2026"

    @pytest.mark.parametrize("created_at", [None, ""])
    def test_missing(self, created_at):
        assert submitted_on(created_at) == "unknown date"

    def test_unparseable_is_shown_as_is(self):
        assert submitted_on("last tuesday") == "last tuesday"


class TestProfileLinks:

    def test_all_links(self):
        submission = {
            "linkedinUrl": "https://linkedin.com/in/ada",
            "githubUrl": "https://github.com/ada",
            "resumeUrl": "/uploads/abc.pdf",
        }

        assert profile_links(submission, "http://127.0.0.1:8000") == [
            "[LinkedIn](https://linkedin.com/in/ada)",
            "[GitHub](https://github.com/ada)",
            "[Resume](http://127.0.0.1:8000/uploads/abc.pdf)",
        ]

    def test_empty_urls_are_omitted(self):
        submission = {"linkedinUrl": "", "githubUrl": "https://github.com/ada", "resumeUrl": ""}

        assert profile_links(submission) == ["[GitHub](https://github.com/ada)"]

    def test_no_links(self):
        assert profile_links({}) == []
