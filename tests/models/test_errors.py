"""
Unit tests for pagekit.models.errors
"""

from pagekit.models.errors import FilterError, PagerError, SortExpressionError


class TestPagerError:
    def test_base_error(self) -> None:
        err = PagerError(
            message="Something went wrong",
            error_code="TEST_ERROR",
            details={"foo": "bar"},
        )

        assert err.message == "Something went wrong"
        assert err.error_code == "TEST_ERROR"
        assert err.details == {"foo": "bar"}
        assert str(err) == "Something went wrong"


class TestFilterError:
    def test_defaults(self) -> None:
        err = FilterError(message="Invalid filter")

        assert isinstance(err, PagerError)
        assert err.error_code == "INVALID_FILTER"
        assert err.details == {}


class TestSortExpressionError:
    def test_defaults(self) -> None:
        err = SortExpressionError(
            message="Unknown sort field 'x'",
            details={"field": "x"},
        )

        assert isinstance(err, PagerError)
        assert err.error_code == "INVALID_SORT_EXPRESSION"
        assert err.details == {"field": "x"}
