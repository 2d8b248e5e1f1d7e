"""
Input rules for account fields.
"""

import re
from typing import Optional

from libs.result import Error

USERNAME_MIN_LENGTH = 3
PASSWORD_SYMBOLS = "@$!%*?&"

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$"
)

PASSWORD_RULE_MESSAGE = (
    "Password must be at least 8 characters long and include at least one "
    "uppercase letter, one lowercase letter, one number, and one special "
    "character."
)


def validation_error(message: str) -> Error:
    return Error("VALIDATION_ERROR", message)


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email.lower()) is not None


def is_valid_password(password: str) -> bool:
    return PASSWORD_PATTERN.match(password) is not None


def check_username(username: str) -> Optional[Error]:
    if len(username) < USERNAME_MIN_LENGTH:
        return validation_error(
            f"Username must be at least {USERNAME_MIN_LENGTH} characters long."
        )
    return None


def check_email(email: str) -> Optional[Error]:
    if not is_valid_email(email):
        return validation_error("Invalid email format.")
    return None


def check_password(password: str) -> Optional[Error]:
    if not is_valid_password(password):
        return validation_error(PASSWORD_RULE_MESSAGE)
    return None
