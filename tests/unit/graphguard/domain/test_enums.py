"""Unit tests for domain enums."""

import pytest

from graphguard.domain.enums import Lifetime, ValidationSeverity


class TestLifetimeEnum:
    """Test cases for the Lifetime enum."""

    def test_lifetime_values(self):
        """Test that lifetimes have the expected string values."""
        assert Lifetime.TRANSIENT.value == "transient"
        assert Lifetime.PER_REQUEST.value == "per_request"
        assert Lifetime.PER_SCOPE.value == "per_scope"
        assert Lifetime.PER_CONTAINER.value == "per_container"

    def test_lifetime_from_value(self):
        """Test that lifetime can be created from string value."""
        assert Lifetime("per_scope") == Lifetime.PER_SCOPE

    def test_invalid_lifetime_value_raises_error(self):
        """Test that invalid lifetime value raises ValueError."""
        with pytest.raises(ValueError):
            Lifetime("singleton")

    def test_lifetime_enum_members(self):
        """Test that all expected enum members exist."""
        assert {member.name for member in Lifetime} == {"TRANSIENT", "PER_REQUEST", "PER_SCOPE", "PER_CONTAINER"}

    def test_lifetime_string_representation(self):
        """Test that str() returns the value."""
        assert str(Lifetime.PER_CONTAINER) == "per_container"


class TestValidationSeverityEnum:
    """Test cases for the ValidationSeverity enum."""

    def test_severity_members(self):
        """Test that the four severities exist."""
        assert {member.name for member in ValidationSeverity} == {
            "CAPTIVE",
            "NOT_DISPOSED",
            "MISSING_DEPENDENCY",
            "AMBIGUOUS",
        }

    def test_severity_is_string(self):
        """Test that severities compare equal to their string values."""
        assert ValidationSeverity.CAPTIVE == "captive"
        assert str(ValidationSeverity.MISSING_DEPENDENCY) == "missing_dependency"
