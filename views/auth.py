import streamlit as st

from services import auth
from ui.session import set_current_user, navigate


def login_view(params=None):
    st.header("Sign in to your account")
    with st.form("login_form"):
        email = st.text_input("Email address")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign in", type="primary")
    if submitted:
        try:
            with st.spinner("Signing in..."):
                user = auth.login(email, password)
        except ValueError as e:
            st.error(e)
        else:
            set_current_user(user)
            navigate("/")
    st.write("Don't have an account?")
    if st.button("Create one"):
        navigate("/signup")


def signup_view(params=None):
    st.header("Create your account")
    with st.form("signup_form"):
        name = st.text_input("Full name")
        email = st.text_input("Email address")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Sign up", type="primary")
    if submitted:
        try:
            with st.spinner("Creating account..."):
                user = auth.signup(name, email, password)
        except ValueError as e:
            st.error(e)
        else:
            set_current_user(user)
            navigate("/")
    st.write("Already have an account?")
    if st.button("Sign in"):
        navigate("/login")


def logout():
    auth.logout()
    set_current_user(None)
    navigate("/login")
