"""Compiled patterns backing the string rules and the password policy.

All patterns are compiled at import time, so an invalid pattern fails loudly
on import instead of surfacing as a rejected value.
"""

import re

# Local part (dot-atoms or a quoted string) followed by a domain whose last
# label has at least two characters.
EMAIL_PATTERN = re.compile(
    r'^(([^<>()\[\]\.,;:\s@"]+(\.[^<>()\[\]\.,;:\s@"]+)*)|(".+"))'
    r'@(([^<>()\[\]\.,;:\s@"]+\.)+[^<>()\[\]\.,;:\s@"]{2,})$'
)

# dd.mm.yyyy, years 19xx and 20xx. Syntactic only: 31.02.1999 matches.
DATE_PATTERN = re.compile(r"^(0[1-9]|[12][0-9]|3[01])\.(0[1-9]|1[012])\.(19|20)[0-9]{2}$")

# Password character classes
SPECIAL_CHARACTER_PATTERN = re.compile(r"[^A-Za-z0-9]")
UPPERCASE_PATTERN = re.compile(r"[A-Z]")
LOWERCASE_PATTERN = re.compile(r"[a-z]")
DIGIT_PATTERN = re.compile(r"[0-9]")
# ASCII whitespace only; other whitespace such as U+00A0 counts as a special character.
WHITESPACE_PATTERN = re.compile(r"[\t\n\f\r ]")


def is_email(value: str) -> bool:
    """Check a value against the full email pattern."""
    return EMAIL_PATTERN.fullmatch(value) is not None


def is_date(value: str) -> bool:
    """Check a value against the dd.mm.yyyy pattern."""
    return DATE_PATTERN.fullmatch(value) is not None
