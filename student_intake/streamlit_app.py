import os
import requests
import streamlit as st

from student_intake.services.display import profile_links, submitted_on
from student_intake.services.form_state import IntakeForm, ResumeFile
from student_intake.services.validator import ValidationFailed

# ---------- Config ----------
BASE_URL = os.getenv("INTAKE_API_BASE", "http://127.0.0.1:8000")

# ---------- API Helpers ----------
def api_get(path):
    r = requests.get(f"{BASE_URL}{path}", timeout=20)
    if not r.ok:
        raise RuntimeError(f"{r.status_code}: {r.text}")
    return r.json()

def api_post_multipart(path, data=None, files=None):
    """
    data: dict of form fields
    files: {"resume": (filename, bytes, mime)} or None
    Returns the JSON body; the intake API reports failures as {success: false, message}.
    """
    r = requests.post(
        f"{BASE_URL}{path}",
        data=data or {},
        files=files,
        timeout=60,
    )
    try:
        return r.json()
    except ValueError:
        raise RuntimeError(f"{r.status_code}: {r.text}")

# ---------- Category widgets ----------
def category_section(form: IntakeForm, field_name: str, label: str):
    selection = form.category(field_name)
    st.markdown(f"**{label} (Select at least one)**")
    for option in selection.presets:
        checked = st.checkbox(
            option,
            value=selection.is_selected(option),
            key=f"{field_name}_{option}",
        )
        selection.toggle(option, checked)

    other = st.text_input(
        f"Other {selection.category.noun}s (press Enter to add)",
        key=f"{field_name}_other",
    )
    if other and selection.add_custom(other):
        st.session_state[f"{field_name}_pending_clear"] = True

    custom = selection.custom
    if custom:
        st.caption("Added:")
        cols = st.columns(min(len(custom), 4))
        for i, value in enumerate(custom):
            if cols[i % len(cols)].button(f"✕ {value}", key=f"{field_name}_rm_{value}"):
                selection.remove(value)
                st.rerun()

    error = st.session_state.form_errors.get(field_name)
    if error:
        st.error(error)

# ---------- Streamlit UI Setup ----------
st.set_page_config(page_title="Student Intake", page_icon="🎓", layout="wide")
st.title("Student Profile 🎓")
st.caption("Tell us about yourself, upload your resume and share your skills.")

# session state
if "intake_form" not in st.session_state:
    st.session_state.intake_form = IntakeForm()
if "form_errors" not in st.session_state:
    st.session_state.form_errors = {}
if "submitted" not in st.session_state:
    st.session_state.submitted = False

# text inputs with Enter-to-add are cleared on the run after the label was taken
for key in [k for k in st.session_state if k.endswith("_pending_clear")]:
    del st.session_state[key]
    st.session_state[key.replace("_pending_clear", "_other")] = ""

form: IntakeForm = st.session_state.intake_form

if st.session_state.submitted:
    st.success("Thank you for submitting your profile!")
    if st.button("Submit another profile"):
        # widget keys hold the old checkbox/text values too
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()
    st.stop()

# ---------- Personal Information ----------
with st.expander("Personal Information", expanded=True):
    form.full_name = st.text_input("Full Name *", value=form.full_name)
    form.email = st.text_input("Email Address *", value=form.email, placeholder="you@example.com")
    form.linkedin_url = st.text_input("LinkedIn URL", value=form.linkedin_url)
    form.github_url = st.text_input("GitHub URL", value=form.github_url)
    form.short_bio = st.text_area("Short Bio *", value=form.short_bio, height=120)

# ---------- Resume Upload ----------
with st.expander("Resume Upload", expanded=True):
    uploaded = st.file_uploader("Upload your resume (PDF) *", type=["pdf"])
    if uploaded is not None:
        form.resume = ResumeFile(filename=uploaded.name, data=uploaded.getvalue())
        st.caption(f"Selected: {uploaded.name}")

# ---------- Skills & Certifications ----------
with st.expander("Technical Skills & Certifications", expanded=True):
    left, right = st.columns(2)
    with left:
        category_section(form, "technicalSkills", "Technical Skills")
    with right:
        category_section(form, "certifications", "Certifications")

# ---------- Career Information ----------
with st.expander("Career Information", expanded=True):
    left, right = st.columns(2)
    with left:
        category_section(form, "careerInterests", "Career Interests")
    with right:
        category_section(form, "workExperience", "Past Work Experience")

    choice = st.radio(
        "Available for work? *",
        ["yes", "no"],
        index=None if form.available_for_work not in ("yes", "no") else ["yes", "no"].index(form.available_for_work),
        format_func=str.capitalize,
        horizontal=True,
    )
    form.available_for_work = choice or ""

if st.button("Submit Profile", type="primary"):
    try:
        form.ensure_valid()
        st.session_state.form_errors = {}
        data, files = form.to_multipart()
        out = api_post_multipart("/api/submit", data=data, files=files)
        if not out.get("success"):
            raise RuntimeError(out.get("message") or "Something went wrong. Please try again.")
        st.session_state.submitted = True
        st.rerun()
    except ValidationFailed as e:
        st.session_state.form_errors = e.errors
        st.error(str(e))
    except (RuntimeError, requests.RequestException) as e:
        st.error(str(e))

st.divider()

# ---------- Submissions from DB ----------
with st.expander("Submissions"):
    try:
        for s in api_get("/api/submissions"):
            st.markdown(f"#### {s['fullName']}")
            st.caption(s["email"] + (" · Available for work" if s["availableForWork"] else ""))
            if s.get("shortBio"):
                st.write(s["shortBio"])
            for key, label in (
                ("technicalSkills", "Skills"),
                ("certifications", "Certifications"),
                ("careerInterests", "Career interests"),
                ("workExperience", "Work experience"),
            ):
                names = ", ".join(e["name"] for e in s.get(key, []))
                if names:
                    st.write(f"**{label}:** {names}")
            links = profile_links(s, BASE_URL)
            if links:
                st.markdown(" · ".join(links))
            st.caption(f"Submitted {submitted_on(s.get('createdAt'))}")
    except (RuntimeError, requests.RequestException) as e:
        st.info("Start the backend first.")
        st.caption(str(e))

st.caption(f"API: {BASE_URL}")
