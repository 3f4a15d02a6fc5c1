"""
Primitive validator unit tests
"""

import pytest

from recruitment.core.errors import ValidationError
from recruitment.utils import validators


class TestIsNumber:
    @pytest.mark.parametrize("value", [0, 42, "7", "-3", "123456"])
    def test_accepts_integers(self, value):
        assert validators.is_number(value, "n") is None

    @pytest.mark.parametrize("value", ["abc", "1.5", "012", " 5", "5\n", "\u0665", "1\u0665", "", None, True, 2.5])
    def test_rejects_non_integers(self, value):
        with pytest.raises(ValidationError, match="n needs to be a number."):
            validators.is_number(value, "n")


class TestIsPositiveInteger:
    def test_accepts_positive(self):
        validators.is_positive_integer("5", "id")

    @pytest.mark.parametrize("value", [0, -1, "-10"])
    def test_rejects_zero_and_negative(self, value):
        with pytest.raises(ValidationError, match="id needs to be a positive integer."):
            validators.is_positive_integer(value, "id")


class TestIsEmailValid:
    @pytest.mark.parametrize("value", ["alice@example.com", "a.b+c@sub.example.org", "x@localhost"])
    def test_accepts(self, value):
        validators.is_email_valid(value)

    @pytest.mark.parametrize("value", ["alice", "alice@", "@example.com", "a b@example.com", "alice@example.com\n", 42])
    def test_rejects(self, value):
        with pytest.raises(ValidationError):
            validators.is_email_valid(value)


class TestStrings:
    def test_is_string(self):
        validators.is_string("", "s")
        with pytest.raises(ValidationError, match="s needs to be a string."):
            validators.is_string(1, "s")

    def test_non_zero_length(self):
        validators.is_string_non_zero_length("a", "s")
        with pytest.raises(ValidationError, match="non-zero length"):
            validators.is_string_non_zero_length("", "s")

    def test_alphanumeric(self):
        validators.is_alphanumeric_string("alice99", "username")
        with pytest.raises(ValidationError, match="only contain letters and numbers"):
            validators.is_alphanumeric_string("alice_99", "username")
        with pytest.raises(ValidationError):
            validators.is_alphanumeric_string("", "username")
        with pytest.raises(ValidationError):
            validators.is_alphanumeric_string("alice99\n", "username")


class TestIsNumberBetween:
    def test_limits_are_inclusive(self):
        validators.is_number_between(0, 0, 10, "years")
        validators.is_number_between("10", 0, 10, "years")

    def test_out_of_range(self):
        with pytest.raises(ValidationError, match="years needs to be a number between 0 and 10."):
            validators.is_number_between(11, 0, 10, "years")
