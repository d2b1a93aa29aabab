"""
Input Validators

Provides input validation and guardrails.
"""

import re
from alumni_hub.config import settings

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_signup(email: str, password: str) -> tuple[bool, str | None]:
    """
    Validate new account credentials.

    Args:
        email: Email address
        password: Plaintext password

    Returns:
        tuple: (is_valid, error_message)
    """
    if not _EMAIL_PATTERN.match(email.strip()):
        return False, f"Invalid email address: {email}"

    if len(password) < settings.MIN_PASSWORD_LENGTH:
        return False, f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters long"

    return True, None


def validate_search_text(text: str) -> tuple[bool, str | None]:
    """
    Validate free search text.

    Args:
        text: Query text

    Returns:
        tuple: (is_valid, error_message)
    """
    if len(text) > settings.SEARCH_MAX_QUERY_LENGTH:
        return False, f"Query exceeds maximum length of {settings.SEARCH_MAX_QUERY_LENGTH} characters"

    return True, None
