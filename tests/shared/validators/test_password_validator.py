"""Tests for the shared password validator."""

import logging

import pytest

from bodycheck.shared.validators.password import (
    evaluate_password,
    is_strong_password,
    validate_password_strength,
)


class TestPasswordPolicy:
    """Test the password strength policy."""

    def test_valid_password_with_all_requirements(self):
        """Test password with all requirements is strong."""
        assert is_strong_password("P@ssw0rdStrong") is True

    def test_password_too_short_fails(self):
        """Test password shorter than 8 characters fails."""
        assert is_strong_password("week") is False

    def test_password_only_stars_fails(self):
        """Test password made only of special characters fails."""
        assert is_strong_password("*" * 15) is False

    def test_password_without_digit_and_special_fails(self):
        """Test password with only letters fails."""
        assert is_strong_password("Password") is False

    def test_password_without_letters_fails(self):
        """Test password with only digits and specials fails."""
        assert is_strong_password("!0125583939193948_") is False

    def test_password_without_uppercase_fails(self):
        """Test password without uppercase letter fails."""
        assert is_strong_password("nouppercase!1") is False

    def test_password_without_lowercase_fails(self):
        """Test password without lowercase letter fails."""
        assert is_strong_password("NOLOWERCASE!1") is False

    def test_password_without_special_character_fails(self):
        """Test password without special character fails."""
        assert is_strong_password("Nospecial1") is False

    def test_password_without_digit_fails(self):
        """Test password without digit fails."""
        assert is_strong_password("Nonumber@") is False

    def test_password_with_space_fails(self):
        """Test password containing a space fails even when all classes are present."""
        assert is_strong_password("P@ss w0rd") is False
        assert is_strong_password(" P@ssw0rd") is False
        assert is_strong_password("P@ssw0rd\t") is False

    def test_non_ascii_whitespace_counts_as_special(self):
        """Test a no-break space is a special character, not whitespace."""
        assert is_strong_password("P@ssw0rd\u00a0x") is True
        assert is_strong_password("Passw0rd\u00a0x") is True

    def test_password_length_bounds(self):
        """Test passwords of exactly 8 and 20 characters pass, 7 and 21 fail."""
        assert is_strong_password("P@ssw0r") is False
        assert is_strong_password("P@ssw0rd") is True
        assert is_strong_password("P@ssw0rd" + "a" * 12) is True
        assert is_strong_password("P@ssw0rd" + "a" * 13) is False

    def test_password_very_long_fails(self):
        """Test very long password fails."""
        assert is_strong_password("P@ssw0rdtolongtofitonthevalidation" * 3) is False


class TestPasswordCheck:
    """Test the per-check password report."""

    def test_report_lists_each_sub_check(self):
        """Test every sub-check is reported."""
        check = evaluate_password("Password")

        assert check.has_special is False
        assert check.has_digit is False
        assert check.has_uppercase is True
        assert check.has_lowercase is True
        assert check.has_correct_size is True
        assert check.has_whitespace is False
        assert check.is_strong is False

    def test_diagnostics_logged_at_debug(self, caplog):
        """Test sub-check results are logged when diagnostics are enabled."""
        with caplog.at_level(logging.DEBUG, logger="bodycheck.shared.validators.password"):
            evaluate_password("P@ssw0rdStrong")

        assert "special=True" in caplog.text
        assert "whitespace=False" in caplog.text

    def test_diagnostics_can_be_disabled(self, caplog, quiet_password_diagnostics):
        """Test no diagnostics are logged when disabled."""
        with caplog.at_level(logging.DEBUG, logger="bodycheck.shared.validators.password"):
            assert is_strong_password("P@ssw0rdStrong") is True

        assert "Password validation" not in caplog.text


class TestValidatePasswordStrength:
    """Test the pydantic-friendly password validator."""

    def test_strong_password_is_returned(self):
        """Test strong password is returned unchanged."""
        assert validate_password_strength("Secure@Pass123") == "Secure@Pass123"

    def test_weak_password_raises_value_error(self):
        """Test weak password raises ValueError."""
        with pytest.raises(ValueError, match="Password should be a valid password between 8 to 20 characters"):
            validate_password_strength("SecurePass123")
