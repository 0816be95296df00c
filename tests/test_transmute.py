"""Tests for conversion between Option and Result."""

from hypothesis import given

from tests.strategies import errors, present
from twofold import Err, MissingValue, Nothing, Ok, Some, TransmuteTarget


class TestOptionToResult:
    """Tests for Option.transmute()."""

    def test_some_to_ok(self):
        """Some(v) becomes Ok(v)."""
        assert Some(1).transmute('unused') == Ok(1)

    def test_nothing_to_err(self):
        """Nothing becomes Err with the supplied error."""
        assert Nothing.transmute('missing') == Err('missing')

    def test_error_is_not_a_provider(self):
        """A callable error is used as-is, never called."""

        def factory():
            raise AssertionError('should not be called')

        assert Nothing.transmute(factory) == Err(factory)

    def test_with_missing_value_struct(self):
        """MissingValue works as a filler error."""
        assert Nothing.transmute(MissingValue('no user')).error.message == 'no user'


class TestResultToOption:
    """Tests for Result.transmute()."""

    def test_ok_to_some(self):
        """Ok(v) becomes Some(v)."""
        assert Ok(5).transmute() == Some(5)

    def test_err_to_nothing(self):
        """Err discards the error."""
        assert Err('e').transmute() is Nothing

    def test_unit_success_to_nothing(self):
        """A unit success has no value to keep."""
        assert Ok().transmute() is Nothing

    def test_error_target(self):
        """TransmuteTarget.ERROR keeps the error instead."""
        assert Err('e').transmute(TransmuteTarget.ERROR) == Some('e')
        assert Ok(5).transmute(TransmuteTarget.ERROR) is Nothing

    def test_value_target_is_default(self):
        """TransmuteTarget.VALUE is the default."""
        assert Ok(5).transmute(TransmuteTarget.VALUE) == Ok(5).transmute()


class TestRoundTrips:
    """Property-based round trips through the bridge."""

    @given(present, errors)
    def test_some_round_trip(self, value, error):
        """Some(v) -> Ok(v) -> Some(v)."""
        assert Some(value).transmute(error).transmute() == Some(value)

    @given(errors)
    def test_nothing_round_trip_through_error(self, error):
        """Nothing -> Err(e) -> Some(e) on the error side."""
        assert Nothing.transmute(error).transmute(TransmuteTarget.ERROR) == Some(error)
