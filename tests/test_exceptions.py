"""Tests for custom exception hierarchy."""

from spd_payment.exceptions import (
    ConfigurationError,
    FieldTooLongError,
    ForbiddenCharacterError,
    InvalidAccountFormatError,
    InvalidAmountError,
    InvalidCountryCodeError,
    InvalidCurrencyError,
    InvalidIbanError,
    MissingLibraryError,
    SpdPaymentError,
    UnknownOptionError,
    UnparseableDueDateError,
    ValidationError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_spd_payment_error_is_exception(self) -> None:
        assert isinstance(SpdPaymentError("test"), Exception)

    def test_validation_errors(self) -> None:
        for error in (
            ForbiddenCharacterError("comment"),
            InvalidIbanError("test"),
            InvalidCountryCodeError("test"),
            InvalidAccountFormatError("test"),
            InvalidAmountError("test"),
            InvalidCurrencyError("test"),
            FieldTooLongError("variable_symbol", 10),
            UnparseableDueDateError("test"),
        ):
            assert isinstance(error, ValidationError)
            assert isinstance(error, SpdPaymentError)

    def test_unknown_option_is_configuration_error(self) -> None:
        err = UnknownOptionError("test")
        assert isinstance(err, ConfigurationError)
        assert isinstance(err, SpdPaymentError)
        assert not isinstance(err, ValidationError)

    def test_missing_library_is_spd_payment_error(self) -> None:
        assert isinstance(MissingLibraryError("test"), SpdPaymentError)


class TestExceptionDetails:
    """Test the data carried by discriminated errors."""

    def test_forbidden_character_field_name(self) -> None:
        err = ForbiddenCharacterError("payee_name")
        assert err.field_name == "payee_name"
        assert str(err) == (
            "Properties cannot contain asterisk (*). Property payee_name contains it."
        )

    def test_field_too_long(self) -> None:
        err = FieldTooLongError("specific_symbol", 10)
        assert err.field_name == "specific_symbol"
        assert err.max_length == 10
        assert "10" in str(err)

    def test_unknown_option_key(self) -> None:
        err = UnknownOptionError("test")
        assert err.key == "test"
        assert str(err) == "The property 'test' is not valid"

    def test_exception_message(self) -> None:
        err = InvalidIbanError("The IBAN is not a valid IBAN")
        assert str(err) == "The IBAN is not a valid IBAN"
