import pytest

from scilib.core.base.exceptions import (
    ConfigurationError,
    DegenerateRangeError,
    DivideByZeroError,
    EmptyInputError,
    GeometryError,
    LengthMismatchError,
    ScilibError,
    StatisticsError,
    ValidationError,
)


def test_str_includes_details_and_cause():
    cause = KeyError("missing")
    err = ScilibError("Something failed", details={"step": "load"}, cause=cause)
    assert str(err) == "Something failed (Details: step=load) (Caused by: 'missing')"


def test_add_and_get_detail():
    err = ScilibError("boom").add_detail("n", 3)
    assert err.get_detail("n") == 3
    assert err.get_detail("absent", "default") == "default"


def test_validation_error_records_field_and_value():
    err = ValidationError("bad value", field="r", value="x")
    assert err.field == "r"
    assert err.details == {"field": "r", "value": "x"}


def test_configuration_error_records_parameter():
    err = ConfigurationError("bad", config_file="c.yaml", parameter="log_level")
    assert err.details == {"config_file": "c.yaml", "parameter": "log_level"}


def test_statistics_errors_record_operation():
    err = EmptyInputError("empty", operation="mean")
    assert err.operation == "mean"
    assert "operation=mean" in str(err)


@pytest.mark.parametrize("cls", [EmptyInputError, LengthMismatchError, DegenerateRangeError])
def test_statistics_errors_hierarchy(cls):
    assert issubclass(cls, StatisticsError)
    assert issubclass(cls, ValueError)
    assert issubclass(cls, ScilibError)


def test_divide_by_zero_hierarchy():
    assert issubclass(DivideByZeroError, GeometryError)
    assert issubclass(DivideByZeroError, ZeroDivisionError)
