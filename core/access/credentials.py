"""Password hashing and generated branch credentials."""

import re
import secrets
from typing import Tuple

import bcrypt

from core.exceptions import ValidationError

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = "abcdefghijklmnopqrstuvwxyz"
DIGITS = "0123456789"
SPECIAL = "!@#$%^&*"

GENERATED_PASSWORD_LENGTH = 12

# bcrypt only reads this many bytes of a password
MAX_PASSWORD_BYTES = 72


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Raises:
        ValidationError: Password longer than MAX_PASSWORD_BYTES in UTF-8.
    """
    pwd_bytes = password.encode("utf-8")
    if len(pwd_bytes) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pwd_bytes, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. Malformed hashes and overlong passwords never match."""
    if not plain_password or not hashed_password:
        return False
    pwd_bytes = plain_password.encode("utf-8")
    if len(pwd_bytes) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(pwd_bytes, hashed_password.encode("utf-8"))
    except ValueError:
        return False


def branch_email(branch_name: str, domain: str = "company.com") -> str:
    """``"North Hub"`` -> ``"north.hub@company.com"``."""
    prefix = re.sub(r"\s+", ".", branch_name.strip().lower())
    return f"{prefix}@{domain}"


def generate_password(length: int = GENERATED_PASSWORD_LENGTH) -> str:
    """
    Random password with at least one upper, lower, digit and special char.

    Uses ``secrets`` for every draw and a CSPRNG for the final shuffle.
    """
    length = max(length, 4)
    chars = [
        secrets.choice(UPPER),
        secrets.choice(LOWER),
        secrets.choice(DIGITS),
        secrets.choice(SPECIAL),
    ]
    pool = UPPER + LOWER + DIGITS + SPECIAL
    chars.extend(secrets.choice(pool) for _ in range(length - len(chars)))

    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)


def generate_branch_credentials(branch_name: str, domain: str = "company.com") -> Tuple[str, str]:
    return branch_email(branch_name, domain), generate_password()
