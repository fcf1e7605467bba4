"""
Account handling on top of Supabase Auth, plus the investor profile
captured at sign-up.
"""
import re

from signalist.constants import INVESTMENT_GOALS, PREFERRED_INDUSTRIES, RISK_TOLERANCE_OPTIONS
from signalist.db import get_supabase_client, insert_user
from signalist.jobs.functions import USER_CREATED_EVENT, jobs
from signalist.logging import log_event

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PASSWORD_LENGTH = 8
MIN_NAME_LENGTH = 2


class AuthError(Exception):
    """Sign-up or sign-in failure with a message safe to show the user."""


def validate_sign_in(email, password):
    errors = {}
    if not (email or "").strip():
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(email.strip()):
        errors["email"] = "Please enter a valid email address"
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return errors


def validate_sign_up(full_name, email, password, country, investment_goals, risk_tolerance, preferred_industry):
    errors = validate_sign_in(email, password)
    if len((full_name or "").strip()) < MIN_NAME_LENGTH:
        errors["full_name"] = "Full name is required"
    if not (country or "").strip():
        errors["country"] = "Country is required"
    if investment_goals not in INVESTMENT_GOALS:
        errors["investment_goals"] = "Please select your investment goal"
    if risk_tolerance not in RISK_TOLERANCE_OPTIONS:
        errors["risk_tolerance"] = "Please select your risk tolerance"
    if preferred_industry not in PREFERRED_INDUSTRIES:
        errors["preferred_industry"] = "Please select your preferred industry"
    return errors


def _user_dict(user):
    metadata = getattr(user, "user_metadata", None) or {}
    return {"id": str(user.id), "email": user.email, "name": metadata.get("name", "")}


def sign_up(full_name, email, password, country, investment_goals, risk_tolerance, preferred_industry):
    """
    Creates the account, stores the investor profile and emits the
    user-created event that triggers the welcome email.
    """
    errors = validate_sign_up(full_name, email, password, country, investment_goals, risk_tolerance, preferred_industry)
    if errors:
        raise AuthError(next(iter(errors.values())))

    email = email.strip().lower()
    full_name = full_name.strip()
    try:
        res = get_supabase_client().auth.sign_up({
            "email": email,
            "password": password,
            "options": {"data": {"name": full_name}},
        })
    except Exception as e:
        log_event("ERROR", "Sign up failed", email=email, error=str(e))
        raise AuthError("Sign up failed. Please try again.") from e
    if res.user is None:
        raise AuthError("Sign up failed. Please try again.")

    profile = {
        "id": str(res.user.id),
        "email": email,
        "name": full_name,
        "country": country.strip(),
        "investment_goals": investment_goals,
        "risk_tolerance": risk_tolerance,
        "preferred_industry": preferred_industry,
    }
    try:
        insert_user(profile)
    except Exception as e:
        log_event("ERROR", "Failed to store user profile", user_id=profile["id"], email=email, error=str(e))
        raise AuthError("Sign up failed. Please try again.") from e
    log_event("INFO", "User signed up", user_id=profile["id"])

    jobs.send(USER_CREATED_EVENT, profile)

    return {"id": profile["id"], "email": email, "name": full_name}


def sign_in(email, password):
    errors = validate_sign_in(email, password)
    if errors:
        raise AuthError(next(iter(errors.values())))
    email = email.strip().lower()
    try:
        res = get_supabase_client().auth.sign_in_with_password({"email": email, "password": password})
    except Exception as e:
        log_event("WARN", "Sign in failed", email=email, error=str(e))
        raise AuthError("Invalid email or password") from e
    if res.user is None:
        raise AuthError("Invalid email or password")
    log_event("INFO", "User signed in", user_id=str(res.user.id))
    return _user_dict(res.user)


def sign_out():
    try:
        get_supabase_client().auth.sign_out()
    except Exception as e:
        log_event("ERROR", "Sign out failed", error=str(e))
