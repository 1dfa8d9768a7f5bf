"""Input validators for console forms and public applications."""

import re

_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE = re.compile(r"^[\d\s\-+]{7,15}$")
_DIGIT = re.compile(r"[0-9]")


def validate_email(email: str) -> bool:
    return bool(_EMAIL.fullmatch(email or ""))


def validate_phone(phone: str) -> bool:
    # Digits, spaces, dashes and plus sign only
    return bool(_PHONE.fullmatch(phone or ""))


def validate_required(value: str) -> bool:
    return len((value or "").strip()) > 0


def validate_salary(salary: str) -> bool:
    """Has a number-like part that the ranking salary parser can read."""
    return bool(_DIGIT.search(salary or ""))
