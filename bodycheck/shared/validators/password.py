"""Password validation functions."""

import logging
from dataclasses import dataclass

from bodycheck.config.settings import settings

from .patterns import (
    DIGIT_PATTERN,
    LOWERCASE_PATTERN,
    SPECIAL_CHARACTER_PATTERN,
    UPPERCASE_PATTERN,
    WHITESPACE_PATTERN,
)

logger = logging.getLogger(__name__)

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 20

PASSWORD_POLICY_MESSAGE = (
    f"should be a valid password between {PASSWORD_MIN_LENGTH} to {PASSWORD_MAX_LENGTH} characters "
    "which contain at least one lowercase letter, one uppercase letter, one numeric digit, "
    "and one special character"
)


@dataclass(frozen=True)
class PasswordCheck:
    """Outcome of each password policy sub-check."""

    has_special: bool
    has_digit: bool
    has_uppercase: bool
    has_lowercase: bool
    has_correct_size: bool
    has_whitespace: bool

    @property
    def is_strong(self) -> bool:
        """All character classes present, size in range, and no whitespace."""
        return (
            self.has_special
            and self.has_digit
            and self.has_uppercase
            and self.has_lowercase
            and self.has_correct_size
            and not self.has_whitespace
        )


def evaluate_password(password: str) -> PasswordCheck:
    """Run every password policy sub-check.

    Requirements:
    - At least one special character (anything outside A-Z, a-z, 0-9)
    - At least one digit (0-9)
    - At least one uppercase letter (A-Z)
    - At least one lowercase letter (a-z)
    - Between 8 and 20 characters
    - No whitespace

    Args:
        password: Password string to check

    Returns:
        PasswordCheck with the result of each sub-check

    """
    check = PasswordCheck(
        has_special=SPECIAL_CHARACTER_PATTERN.search(password) is not None,
        has_digit=DIGIT_PATTERN.search(password) is not None,
        has_uppercase=UPPERCASE_PATTERN.search(password) is not None,
        has_lowercase=LOWERCASE_PATTERN.search(password) is not None,
        has_correct_size=PASSWORD_MIN_LENGTH <= len(password) <= PASSWORD_MAX_LENGTH,
        has_whitespace=WHITESPACE_PATTERN.search(password) is not None,
    )
    if settings.password_diagnostics:
        logger.debug(
            f"Password validation: special={check.has_special} digit={check.has_digit} "
            f"uppercase={check.has_uppercase} lowercase={check.has_lowercase} "
            f"correct_size={check.has_correct_size} whitespace={check.has_whitespace}"
        )
    return check


def is_strong_password(password: str) -> bool:
    """Return True when the password satisfies the whole policy.

    Examples:
        >>> is_strong_password("P@ssw0rdStrong")
        True
        >>> is_strong_password("Password")
        False

    """
    return evaluate_password(password).is_strong


def validate_password_strength(password: str) -> str:
    """Validate password strength for use in a pydantic field validator.

    Args:
        password: Password string to validate

    Returns:
        The validated password string

    Raises:
        ValueError: If password doesn't meet the policy

    """
    if not is_strong_password(password):
        raise ValueError(f"Password {PASSWORD_POLICY_MESSAGE}")
    return password
