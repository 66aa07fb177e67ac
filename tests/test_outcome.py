"""Tests for the tagged Outcome type and the error hierarchy."""

import pytest

from scicalc.core.errors import (
    InvalidArgument,
    NoResultError,
    NotSquare,
    ScicalcError,
    UnsupportedError,
)
from scicalc.core.outcome import Outcome, Status


class TestOutcome:
    def test_ok(self):
        out = Outcome.ok(42)
        assert out.is_ok
        assert out.status is Status.OK
        assert out.unwrap() == 42

    def test_no_result(self):
        out = Outcome.no_result("singular")
        assert not out.is_ok
        assert out.reason == "singular"
        with pytest.raises(NoResultError, match="singular"):
            out.unwrap()

    def test_unsupported(self):
        out = Outcome.unsupported("degree 4")
        with pytest.raises(UnsupportedError):
            out.unwrap()

    def test_value_or(self):
        assert Outcome.ok(1).value_or(0) == 1
        assert Outcome.no_result("x").value_or(0) == 0

    def test_ok_with_falsy_payload(self):
        assert Outcome.ok(0.0).unwrap() == 0.0


class TestErrorHierarchy:
    def test_invalid_argument_is_value_error(self):
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(InvalidArgument, ScicalcError)

    def test_not_square_is_invalid_argument(self):
        assert issubclass(NotSquare, InvalidArgument)
