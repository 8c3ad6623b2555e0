"""Tests for diffson.pointer — RFC 6901 parsing and rendering."""

from __future__ import annotations

import pytest

from diffson.errors import MalformedPointer
from diffson.pointer import (
    Pointer,
    escape_token,
    format_pointer,
    parse_pointer,
    unescape_token,
)

# ===================================================================
# Parsing
# ===================================================================


class TestParse:
    def test_empty_string_is_root(self):
        assert parse_pointer("") == Pointer.root()

    def test_none_is_root(self):
        assert parse_pointer(None).is_root

    def test_two_segments(self):
        assert parse_pointer("/a/b").segments == ("a", "b")

    def test_single_slash_is_empty_key(self):
        assert parse_pointer("/").segments == ("",)

    def test_trailing_slash_keeps_empty_segment(self):
        assert parse_pointer("/a/").segments == ("a", "")

    def test_consecutive_slashes(self):
        assert parse_pointer("//x").segments == ("", "x")

    def test_missing_leading_slash(self):
        with pytest.raises(MalformedPointer, match="must start with '/'"):
            parse_pointer("a/b")

    def test_malformed_pointer_carries_text(self):
        with pytest.raises(MalformedPointer) as exc_info:
            parse_pointer("a/b")
        assert exc_info.value.pointer == "a/b"

    def test_malformed_pointer_is_value_error(self):
        with pytest.raises(ValueError):
            parse_pointer("nope")

    def test_pointer_passthrough(self):
        ptr = Pointer.of("a")
        assert parse_pointer(ptr) is ptr


class TestEscaping:
    def test_slash_escape(self):
        assert parse_pointer("/a~1b").segments == ("a/b",)

    def test_tilde_escape(self):
        assert parse_pointer("/a~0b").segments == ("a~b",)

    def test_escape_order(self):
        assert parse_pointer("/a~01").segments == ("a~1",)

    def test_invalid_escape_digit(self):
        with pytest.raises(MalformedPointer, match="'~' must be followed"):
            parse_pointer("/a~2b")

    def test_trailing_tilde(self):
        with pytest.raises(MalformedPointer):
            parse_pointer("/a~")

    def test_double_tilde_is_validated_on_raw_text(self):
        # Stripping valid escapes first would hide the leading bare '~'.
        with pytest.raises(MalformedPointer):
            parse_pointer("/~~01")

    def test_invalid_escape_in_later_segment(self):
        with pytest.raises(MalformedPointer):
            parse_pointer("/ok/still~0ok/bad~x")

    def test_token_helpers(self):
        assert escape_token("a/b~c") == "a~1b~0c"
        assert unescape_token("a~1b~0c") == "a/b~c"
        assert unescape_token("~01") == "~1"


# ===================================================================
# Pointer type
# ===================================================================


class TestPointer:
    def test_constructor_normalizes_to_tuple(self):
        ptr = Pointer(["a", "b"])
        assert ptr.segments == ("a", "b")
        assert ptr == Pointer.of("a", "b")
        assert hash(ptr) == hash(Pointer.of("a", "b"))

    def test_rejects_plain_string(self):
        with pytest.raises(TypeError):
            Pointer("abc")

    def test_rejects_non_string_segment(self):
        with pytest.raises(TypeError):
            Pointer(["a", 1])

    def test_immutable(self):
        ptr = Pointer.of("a")
        with pytest.raises(AttributeError):
            ptr.segments = ("b",)

    def test_sequence_protocol(self):
        ptr = Pointer.of("a", "b", "c")
        assert len(ptr) == 3
        assert list(ptr) == ["a", "b", "c"]
        assert ptr[0] == "a"
        assert ptr[1:] == Pointer.of("b", "c")

    def test_child_does_not_mutate(self):
        base = Pointer.of("a")
        extended = base.child("b").child(2)
        assert base == Pointer.of("a")
        assert extended == Pointer.of("a", "b", "2")

    def test_child_rejects_negative_index(self):
        with pytest.raises(ValueError):
            Pointer.root().child(-1)

    def test_child_rejects_bool(self):
        with pytest.raises(TypeError):
            Pointer.root().child(True)

    def test_parent_and_last(self):
        ptr = Pointer.of("a", "b")
        assert ptr.parent == Pointer.of("a")
        assert ptr.last == "b"
        assert Pointer.root().last is None

    def test_root_has_no_parent(self):
        with pytest.raises(MalformedPointer, match="no parent"):
            Pointer.root().parent


class TestFormat:
    def test_root_renders_empty(self):
        assert str(Pointer.root()) == ""

    def test_escapes_on_render(self):
        assert str(Pointer.of("a/b", "m~n")) == "/a~1b/m~0n"

    def test_format_pointer(self):
        assert format_pointer(["", "x"]) == "//x"

    @pytest.mark.parametrize(
        "segments",
        [("a", "b"), ("",), ("a/b", "~1", "~0/"), ("0", "-", "01")],
    )
    def test_render_then_parse(self, segments):
        ptr = Pointer(segments)
        assert parse_pointer(str(ptr)) == ptr

    @pytest.mark.parametrize(
        "segments",
        [
            ["foo", "bar", "0", "baz"],
            ["", "a", ""],
            ["0", "10", "01"],
            ["items", "-"],
            ["caf\u00e9", "\u65e5\u672c", "\U0001f600"],
            [" ", "a b", "%20"],
        ],
    )
    def test_plain_segments_round_trip_through_join(self, segments):
        assert list(parse_pointer("/" + "/".join(segments))) == segments
