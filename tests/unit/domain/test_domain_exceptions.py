"""Tests for pagekit.domain.exceptions.pagination_exceptions"""

from pagekit.domain.exceptions import (
    InvalidPaginationConfigError,
    InvalidPaginationOptionsError,
    PaginationError,
)


class TestPaginationError:
    def test_default_attributes(self):
        exc = PaginationError("something went wrong")
        assert exc.detail == "something went wrong"
        assert exc.title == "Pagination Error"
        assert exc.status_code == 400
        assert exc.error_type == "about:blank"

    def test_custom_attributes(self):
        exc = PaginationError("custom", title="Custom", status_code=422, error_type="urn:custom")
        assert exc.title == "Custom"
        assert exc.status_code == 422
        assert exc.error_type == "urn:custom"

    def test_is_exception(self):
        assert issubclass(PaginationError, Exception)


class TestInvalidPaginationOptionsError:
    def test_attributes(self):
        exc = InvalidPaginationOptionsError("page", "abc")
        assert exc.field == "page"
        assert exc.value == "abc"
        assert exc.status_code == 400
        assert exc.title == "Invalid Pagination Options"
        assert "'abc'" in exc.detail

    def test_inherits_pagination_error(self):
        assert issubclass(InvalidPaginationOptionsError, PaginationError)


class TestInvalidPaginationConfigError:
    def test_attributes(self):
        exc = InvalidPaginationConfigError("maxLimit")
        assert exc.key == "maxLimit"
        assert exc.title == "Invalid Pagination Config"
        assert "maxLimit" in str(exc)

    def test_inherits_pagination_error(self):
        assert issubclass(InvalidPaginationConfigError, PaginationError)
