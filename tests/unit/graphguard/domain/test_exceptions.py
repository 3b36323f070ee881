"""Unit tests for domain exceptions."""

import pytest

from graphguard.domain.enums import Lifetime, ValidationSeverity
from graphguard.domain.exceptions import (
    ConstructorSelectionError,
    GraphGuardError,
    InvalidRankError,
    ValidationFailedError,
)
from graphguard.domain.models import ConstructorParameter, Finding, ServiceRegistration, ValidationTarget


class TestGraphGuardError:
    """Test cases for the base GraphGuardError class."""

    def test_is_exception(self):
        """Test that GraphGuardError inherits from Exception."""
        assert issubclass(GraphGuardError, Exception)

    @pytest.mark.parametrize("error_type", [InvalidRankError, ConstructorSelectionError, ValidationFailedError])
    def test_subclasses(self, error_type):
        """Test that every error derives from GraphGuardError."""
        assert issubclass(error_type, GraphGuardError)


class TestInvalidRankError:
    """Test cases for InvalidRankError."""

    def test_attributes_and_message(self):
        """Test that the lifetime and rank are kept and rendered."""
        error = InvalidRankError(Lifetime.PER_SCOPE, -1)

        assert error.lifetime == Lifetime.PER_SCOPE
        assert error.rank == -1
        assert "per_scope" in str(error)
        assert "-1" in str(error)


class TestConstructorSelectionError:
    """Test cases for ConstructorSelectionError."""

    def test_message_without_reason(self):
        """Test the message names the type."""

        class Service:
            pass

        error = ConstructorSelectionError(Service)

        assert error.implementing_type is Service
        assert error.reason is None
        assert str(error) == "Cannot select constructor for type: Service"

    def test_message_with_reason(self):
        """Test the reason is appended to the message."""

        class Service:
            pass

        error = ConstructorSelectionError(Service, "Parameter 'x' lacks type hint")

        assert str(error).endswith("Reason: Parameter 'x' lacks type hint")


class TestValidationFailedError:
    """Test cases for ValidationFailedError."""

    def test_lists_findings(self):
        """Test that the failing findings are kept and listed in the message."""

        class Foo:
            pass

        parameter = ConstructorParameter(declared_type=int, name="value", owner=Foo)
        finding = Finding(
            message="The injected 'int' is not registered.",
            severity=ValidationSeverity.MISSING_DEPENDENCY,
            target=ValidationTarget.for_parameter(parameter),
            registration=ServiceRegistration(service_type=Foo, implementing_type=Foo),
        )

        error = ValidationFailedError([finding])

        assert error.findings == [finding]
        assert "1 finding(s)" in str(error)
        assert "[missing_dependency] The injected 'int' is not registered." in str(error)
