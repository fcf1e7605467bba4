# signalist/ui/forms.py

import streamlit as st
from signalist.auth import AuthError, sign_in, sign_up, validate_sign_in, validate_sign_up
from signalist.constants import INVESTMENT_GOALS, PREFERRED_INDUSTRIES, RISK_TOLERANCE_OPTIONS

def _show_errors(errors):
    for message in errors.values():
        st.warning(message)

def sign_in_form():
    """
    Renders the sign-in form. Stores the signed-in user in the session.
    """
    st.subheader("Log In Your Account")
    with st.form("sign_in"):
        email = st.text_input("Email", placeholder="your-email@email.com")
        password = st.text_input("Password", type="password", placeholder="Enter your password")
        submitted = st.form_submit_button("Sign In", use_container_width=True)

    if submitted:
        errors = validate_sign_in(email, password)
        if errors:
            _show_errors(errors)
            return
        try:
            st.session_state["user"] = sign_in(email, password)
        except AuthError as e:
            st.error(str(e))
            return
        st.rerun()

def sign_up_form():
    """
    Renders the sign-up form with the investor profile used to personalise emails.
    """
    st.subheader("Sign Up & Personalize")
    with st.form("sign_up"):
        full_name = st.text_input("Full Name", placeholder="John Doe")
        email = st.text_input("Email", placeholder="contact@signalist.com")
        password = st.text_input("Password", type="password", placeholder="Enter a strong password")
        country = st.text_input("Country", placeholder="United States")

        col1, col2, col3 = st.columns(3)
        with col1:
            investment_goals = st.selectbox("Investment Goals", INVESTMENT_GOALS, index=0)
        with col2:
            risk_tolerance = st.selectbox("Risk Tolerance", RISK_TOLERANCE_OPTIONS, index=1)
        with col3:
            preferred_industry = st.selectbox("Preferred Industry", PREFERRED_INDUSTRIES, index=0)

        submitted = st.form_submit_button("Start Your Investing Journey", use_container_width=True)

    if submitted:
        errors = validate_sign_up(full_name, email, password, country, investment_goals, risk_tolerance, preferred_industry)
        if errors:
            _show_errors(errors)
            return
        try:
            st.session_state["user"] = sign_up(
                full_name, email, password, country, investment_goals, risk_tolerance, preferred_industry
            )
        except AuthError as e:
            st.error(str(e))
            return
        st.rerun()

def auth_section():
    sign_in_tab, sign_up_tab = st.tabs(["Sign In", "Sign Up"])
    with sign_in_tab:
        sign_in_form()
    with sign_up_tab:
        sign_up_form()
