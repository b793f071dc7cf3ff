"""Request builders shared by the API tests."""

import json

PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\ntrailer\n<< /Root 1 0 R >>\n%%EOF\n"

LIST_FIELDS = ("technicalSkills", "certifications", "careerInterests", "workExperience")


def make_form(**overrides):
    """Multipart fields for a complete, valid submission.

    List fields are JSON-encoded the way the form client sends them; pass
    ``None`` to leave a field out, or a list for a scalar to repeat it.
    """
    fields = {
        "fullName": "Ada Lovelace",
        "email": "ada@example.com",
        "linkedinUrl": "https://www.linkedin.com/in/ada",
        "githubUrl": "https://github.com/ada",
        "shortBio": "Writes programs for the Analytical Engine.",
        "availableForWork": "yes",
        "technicalSkills": ["Python"],
        "certifications": ["AWS"],
        "careerInterests": ["Backend"],
        "workExperience": ["Freelance"],
    }
    fields.update(overrides)
    form = {}
    for key, value in fields.items():
        if value is None:
            continue
        if key in LIST_FIELDS and isinstance(value, list):
            value = json.dumps(value)
        form[key] = value
    return form


def pdf_file(name="resume.pdf", data=PDF_BYTES, content_type="application/pdf"):
    return {"resume": (name, data, content_type)}
