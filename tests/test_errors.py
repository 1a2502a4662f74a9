"""Tests for pathmapper.errors — exception hierarchy and error messages."""

from pathmapper.errors import (
    ConfigurationError,
    MatchFailure,
    PathMapperError,
    ToLessParamsFailure,
    UnmatchedPath,
)


class TestHierarchy:
    def test_all_derive_from_base(self) -> None:
        for exc_type in (ConfigurationError, MatchFailure, ToLessParamsFailure, UnmatchedPath):
            assert issubclass(exc_type, PathMapperError)

    def test_base_is_exception(self) -> None:
        assert issubclass(PathMapperError, Exception)


class TestMatchFailure:
    def test_attributes(self) -> None:
        err = MatchFailure("/users/1", r"\A\/?pages\Z")
        assert err.path == "/users/1"
        assert err.expression == r"\A\/?pages\Z"

    def test_message(self) -> None:
        err = MatchFailure("/users/1", "pages")
        assert str(err) == "Path '/users/1' does not match regex 'pages'"


class TestToLessParamsFailure:
    def test_attributes_keep_order(self) -> None:
        err = ToLessParamsFailure({"page": "a", "lang": "en"}, ["page"])
        assert err.params == ("page", "lang")
        assert err.required == ("page",)

    def test_message(self) -> None:
        err = ToLessParamsFailure({"page": "a", "lang": "en"}, ["page"])
        assert str(err) == "To less params: page, lang. Required: page"


class TestUnmatchedPath:
    def test_message(self) -> None:
        err = UnmatchedPath("/missing")
        assert err.path == "/missing"
        assert "/missing" in str(err)
