"""Tests for separator normalization helpers."""

import pytest
from pathprefix.core.normalize import (
    absolutize,
    collapse_separators,
    flatten_tokens,
    is_absolute,
    relativize,
    strip_leading,
    to_text,
)
from pathprefix.errors import ErrorKind, InvalidArgumentError


class TestCollapseSeparators:
    """Tests for collapse_separators()."""

    def test__double__collapsed(self) -> None:
        assert collapse_separators("a//b", "/") == "a/b"

    def test__long_run__collapsed_to_one(self) -> None:
        assert collapse_separators("a/////b//c", "/") == "a/b/c"

    def test__after_colon__kept(self) -> None:
        assert collapse_separators("http://host//x", "/") == "http://host/x"

    def test__leading_run__collapsed(self) -> None:
        assert collapse_separators("//a", "/") == "/a"

    def test__single_colon_separator__kept(self) -> None:
        """Colon followed by a single separator is untouched."""
        assert collapse_separators("a:/b", "/") == "a:/b"

    def test__empty_separator__unchanged(self) -> None:
        assert collapse_separators("a//b", "") == "a//b"


class TestStripLeading:
    """Tests for strip_leading() and relativize()."""

    def test__all_leading__removed(self) -> None:
        assert strip_leading("///a/", "/") == "a/"

    def test__no_leading__unchanged(self) -> None:
        assert strip_leading("a/b", "/") == "a/b"

    def test__multi_char_separator__removed(self) -> None:
        assert strip_leading("--a--b", "--") == "a--b"

    def test__relativize__collapses_then_strips(self) -> None:
        assert relativize("//a//b", "/") == "a/b"


class TestAbsolutize:
    """Tests for absolutize()."""

    def test__relative__prefixed(self) -> None:
        assert absolutize("a/b", "/") == "/a/b"
        assert is_absolute("/a", "/")

    def test__absolute__unchanged(self) -> None:
        assert absolutize("/a", "/") == "/a"

    def test__empty__becomes_separator(self) -> None:
        assert absolutize("", "/") == "/"


class TestToText:
    """Tests for to_text() and flatten_tokens()."""

    def test__string__returned_as_is(self) -> None:
        assert to_text("a") == "a"

    @pytest.mark.parametrize("value", [None, b"a", bytearray(b"a")])
    def test__non_text__raises_error(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            to_text(value, parameter="segment")

        assert exc_info.value.kind is ErrorKind.NOT_TEXT
        assert exc_info.value.parameter == "segment"
        assert "segment" in str(exc_info.value)

    def test__flatten__single_token(self) -> None:
        assert flatten_tokens("a") == ["a"]

    def test__flatten__nested(self) -> None:
        assert flatten_tokens(["a", ("b", [3])]) == ["a", "b", "3"]

    def test__flatten__empty(self) -> None:
        assert flatten_tokens([]) == []

    def test__flatten__none_becomes_empty(self) -> None:
        assert flatten_tokens(None) == [""]
        assert flatten_tokens(["a", None]) == ["a", ""]
