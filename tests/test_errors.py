import pytest

from cncsim.errors import ErrorCode, ErrorSeverity, SimError


def test_default_is_success():
    err = SimError()
    assert err.is_success()
    assert not err.is_error()
    assert err.severity is ErrorSeverity.INFO
    assert err.recoverable is True
    assert err.message == ""


def test_success_factory_equals_default():
    assert SimError.success() == SimError()


@pytest.mark.parametrize(
    "value, code",
    [
        (1000, ErrorCode.SIMULATION_INVALID_STATE),
        (4002, ErrorCode.MACHINE_LIMIT_EXCEEDED),
        (9999, ErrorCode.UNKNOWN_ERROR),
    ],
)
def test_code_values_pinned_by_source(value, code):
    err = SimError.make(value, "pinned")
    assert err.code is code
    assert err.code == value


def test_make_limit_exceeded_is_warning():
    err = SimError.make(ErrorCode.MACHINE_LIMIT_EXCEEDED, "X over travel")
    assert err.severity is ErrorSeverity.WARNING
    assert err.is_error()
    assert err.message == "X over travel"
    assert err.recoverable is False


@pytest.mark.parametrize(
    "code",
    [
        ErrorCode.SIMULATION_TOOL_COLLISION,
        ErrorCode.GEOMETRY_INVALID_BOUNDS,
        ErrorCode.MATERIAL_GRID_INVALID,
        ErrorCode.MACHINE_INVALID_POSITION,
        ErrorCode.TOOL_INVALID_GEOMETRY,
        ErrorCode.INVALID_ARGUMENT,
    ],
)
def test_make_other_codes_are_errors(code):
    err = SimError.make(code, "failure", recoverable=True)
    assert err.severity is ErrorSeverity.ERROR
    assert err.code is code
    assert err.recoverable is True
    assert not err.is_fatal()


def test_make_accepts_plain_int_code():
    err = SimError.make(1002, "collision")
    assert err.code is ErrorCode.SIMULATION_TOOL_COLLISION


def test_make_rejects_unknown_code():
    with pytest.raises(ValueError):
        SimError.make(12345, "bogus")


def test_fatal_severity():
    err = SimError(ErrorCode.UNKNOWN_ERROR, ErrorSeverity.FATAL, "boom")
    assert err.is_fatal()
    assert err.is_error()