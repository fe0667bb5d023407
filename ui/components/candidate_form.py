import streamlit as st
from typing import Dict, Any, List

from domain.constants import CANDIDATE_STATUSES
from services.validation import validate_skill
from ui.session import keep_for_route
from .base import inject_base_css, skill_chips
from .forms import index_of

LABELS = {
    'name': 'Full name', 'email': 'Email', 'phone': 'Phone',
    'location': 'Location', 'status': 'Status', 'skills': 'Skills', 'skill': 'Skill',
}


def _skills_key(key_prefix: str) -> str:
    return f"{key_prefix}_skills"


def render_skills_editor(initial: List[str], key_prefix: str) -> List[str]:
    """
    Skill list editor living outside the form so skills can be added and
    removed without submitting. The working list is kept in session state
    until the page is left.
    """
    inject_base_css()
    skills_key = keep_for_route(_skills_key(key_prefix))
    if skills_key not in st.session_state:
        st.session_state[skills_key] = list(initial or [])
    skills = st.session_state[skills_key]

    st.markdown(f"**{LABELS['skills']}**")
    c1, c2 = st.columns([4, 1])
    new_skill = c1.text_input("Add a skill", key=f"{key_prefix}_new_skill", label_visibility="collapsed",
                              placeholder="Add a skill")
    if c2.button("Add", key=f"{key_prefix}_add_skill"):
        errors = validate_skill(new_skill, skills)
        if errors:
            st.error(errors['skill'])
        else:
            skills.append(new_skill.strip())
            st.rerun()

    if not skills:
        st.caption("No skills added yet")
        return skills

    st.markdown(skill_chips(skills), unsafe_allow_html=True)
    cols = st.columns(min(len(skills), 6))
    for i, skill in enumerate(list(skills)):
        if cols[i % len(cols)].button(f"✕ {skill}", key=f"{key_prefix}_rm_{i}"):
            skills.remove(skill)
            st.rerun()
    return skills


def render(candidate: Dict[str, Any], key_prefix: str, is_new: bool = False):
    """Renders the candidate create/edit form. Returns submitted data or None."""
    skills = render_skills_editor(candidate.get('skills', []), key_prefix)

    with st.form(f"form_{key_prefix}"):
        c1, c2 = st.columns(2)
        name = c1.text_input(LABELS['name'], value=candidate.get('name', ''), key=f"{key_prefix}_name")
        email = c2.text_input(LABELS['email'], value=candidate.get('email', ''), key=f"{key_prefix}_email")
        phone = c1.text_input(LABELS['phone'], value=candidate.get('phone', ''), key=f"{key_prefix}_phone")
        location = c2.text_input(LABELS['location'], value=candidate.get('location') or '', key=f"{key_prefix}_location")
        status = st.selectbox(LABELS['status'], CANDIDATE_STATUSES,
                              index=index_of(CANDIDATE_STATUSES, candidate.get('status')),
                              format_func=str.capitalize, key=f"{key_prefix}_status")

        submitted = st.form_submit_button("Create Candidate" if is_new else "Save Changes", type="primary")

    if not submitted:
        return None

    return {
        'name': name.strip(),
        'email': email.strip(),
        'phone': phone.strip(),
        'location': location.strip() or None,
        'status': status,
        'skills': list(skills),
    }
