"""
Tests for registration and product payload validation.
"""

import pytest

from utils.errors import ValidationError
from utils.random_string import generate_random_string
from utils.validators import validate_product, validate_registration


def _registration(**overrides) -> dict:
    payload = {"name": "A", "email": "a@b.com", "password": "p1"}
    payload.update(overrides)
    return payload


class TestValidateRegistration:
    def test_valid_payload(self):
        data = validate_registration(_registration())
        assert data.email == "a@b.com"
        assert data.name == "A"

    @pytest.mark.parametrize("password", [None, ""])
    def test_empty_password_checked_first(self, password):
        payload = _registration(password=password, name="", email="broken")
        with pytest.raises(ValidationError, match="Invalid password"):
            validate_registration(payload)

    def test_missing_password_key(self):
        payload = _registration()
        del payload["password"]
        with pytest.raises(ValidationError, match="Invalid password"):
            validate_registration(payload)

    def test_email_kept_verbatim(self):
        data = validate_registration(_registration(email="Alice@Example.COM"))
        assert data.email == "Alice@Example.COM"

    def test_bad_email(self):
        with pytest.raises(ValidationError, match="Issue in Email"):
            validate_registration(_registration(email="not-an-email"))

    def test_missing_name(self):
        with pytest.raises(ValidationError, match="Issue in Name Field"):
            validate_registration(_registration(name=""))

    def test_first_failing_field_wins(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_registration(_registration(name="", email="nope"))
        assert excinfo.value.message == "Issue in Name Field"

    def test_password_too_long_for_bcrypt(self):
        with pytest.raises(ValidationError, match="Issue in Password"):
            validate_registration(_registration(password="x" * 73))

    def test_non_string_password(self):
        with pytest.raises(ValidationError, match="Issue in Password"):
            validate_registration(_registration(password=12345))


class TestValidateProduct:
    def test_valid_payload(self):
        fields = validate_product({"name": "X", "description": "Y", "price": 20.5})
        assert fields == {"name": "X", "description": "Y", "price": 20.5}

    def test_integer_price_accepted(self):
        assert validate_product({"name": "X", "description": "Y", "price": 3})["price"] == 3.0

    @pytest.mark.parametrize("price", [0, -1, -0.5, "10", True, None, float("nan"), 10**400])
    def test_invalid_price(self, price):
        with pytest.raises(ValidationError, match="Invalid or missing positive Price"):
            validate_product({"name": "X", "description": "Y", "price": price})

    @pytest.mark.parametrize(
        "payload, message",
        [
            ({"name": "X", "description": "Y"}, "Price Key Missing"),
            ({"name": "X", "price": 1}, "Description Key Missing"),
            ({"description": "Y", "price": 1}, "Name Key Missing"),
            ({"name": "X", "description": 5, "price": 1}, "Invalid Description Key type"),
            ({"name": 5, "description": "Y", "price": 1}, "Invalid Name Key type"),
        ],
    )
    def test_missing_or_wrong_type(self, payload, message):
        with pytest.raises(ValidationError) as excinfo:
            validate_product(payload)
        assert excinfo.value.message == message

    def test_price_checked_before_name(self):
        with pytest.raises(ValidationError) as excinfo:
            validate_product({"price": -1})
        assert excinfo.value.message == "Invalid or missing positive Price"

    def test_partial_keeps_only_present_fields(self):
        assert validate_product({"price": 9.99}, partial=True) == {"price": 9.99}
        assert validate_product({}, partial=True) == {}

    def test_partial_still_validates_present_fields(self):
        with pytest.raises(ValidationError, match="Invalid or missing positive Price"):
            validate_product({"price": 0}, partial=True)
        with pytest.raises(ValidationError, match="Invalid Name Key type"):
            validate_product({"name": ["X"]}, partial=True)


class TestRandomString:
    def test_length_and_charset(self):
        value = generate_random_string(32)
        assert len(value) == 32
        assert value.isalnum() and value.isascii()

    def test_zero_length(self):
        assert generate_random_string(0) == ""

    def test_values_differ(self):
        assert generate_random_string(16) != generate_random_string(16)
