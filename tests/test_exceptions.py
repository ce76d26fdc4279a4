"""Tests for custom exception hierarchy."""

from car_loans.exceptions import (
    CarLoanError,
    ConfigurationError,
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidLoanStateError,
    ReferentialIntegrityError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_car_loan_error_is_exception(self) -> None:
        assert isinstance(CarLoanError("test"), Exception)

    def test_invalid_argument_is_car_loan_error(self) -> None:
        err = InvalidArgumentError("test")
        assert isinstance(err, CarLoanError)
        assert isinstance(err, ValueError)

    def test_invalid_loan_state_is_car_loan_error(self) -> None:
        assert isinstance(InvalidLoanStateError("test"), CarLoanError)

    def test_entity_not_found_is_car_loan_error(self) -> None:
        assert isinstance(EntityNotFoundError("test"), CarLoanError)

    def test_referential_integrity_is_entity_not_found(self) -> None:
        err = ReferentialIntegrityError("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, CarLoanError)

    def test_configuration_error_is_car_loan_error(self) -> None:
        assert isinstance(ConfigurationError("test"), CarLoanError)

    def test_exception_message(self) -> None:
        err = InvalidArgumentError("Payer name cannot be empty")
        assert str(err) == "Payer name cannot be empty"
