# student_intake/services/display.py
"""Formatting for the submissions list, independent of any UI toolkit."""
from datetime import datetime
from typing import List, Mapping


def submitted_on(created_at: str | None) -> str:
    """ISO timestamp from the API -> "Mar 4, 2026"."""
    if not created_at:
        return "unknown date"
    try:
        dt = datetime.fromisoformat(created_at)
    except ValueError:
        return created_at
    return f"{dt:%b} {dt.day}, {dt.year}"


def profile_links(submission: Mapping[str, object], base_url: str = "") -> List[str]:
    """Markdown links for the optional profile URLs and the stored resume."""
    links = []
    if submission.get("linkedinUrl"):
        links.append(f"[LinkedIn]({submission['linkedinUrl']})")
    if submission.get("githubUrl"):
        links.append(f"[GitHub]({submission['githubUrl']})")
    if submission.get("resumeUrl"):
        links.append(f"[Resume]({base_url}{submission['resumeUrl']})")
    return links
