"""Wildcard matcher tests."""

import pytest
from routy_core.routing.errors import InvalidPattern
from routy_core.routing.matcher import WildcardCompiler, has_wildcards, make


class TestWildcardCompiler:
    """Test placeholder compilation."""

    def test_placeholder_becomes_segment_group(self):
        """Test a placeholder compiles to a single-segment capture."""
        assert make("users/{id}") == "users/([^/]+)"

    def test_static_pattern_is_escaped(self):
        """Test literal text is escaped."""
        assert make("a.b") == r"a\.b"

    def test_several_placeholders_in_one_segment(self):
        """Test placeholders sharing a segment."""
        compiler = WildcardCompiler()
        assert compiler.compile("files/{name}.{ext}") == r"files/([^/]+)\.([^/]+)"
        assert compiler.match("files/{name}.{ext}", "files/report.tar.gz") == [
            "report.tar",
            "gz",
        ]

    def test_names_are_positional_only(self):
        """Test repeated names still produce one group each."""
        compiler = WildcardCompiler()
        assert compiler.match("{x}/{x}", "a/b") == ["a", "b"]

    def test_match_requires_whole_value(self):
        """Test matching is anchored at both ends."""
        compiler = WildcardCompiler()
        assert compiler.match("users/{id}", "users/7") == ["7"]
        assert compiler.match("users/{id}", "users/7/posts") is None
        assert compiler.match("users/{id}", "api/users/7") is None

    def test_placeholder_needs_a_character(self):
        """Test empty segments do not match."""
        assert WildcardCompiler().match("users/{id}", "users/") is None

    def test_unterminated_placeholder(self):
        """Test an unclosed brace is an error."""
        with pytest.raises(InvalidPattern):
            make("users/{id")

    def test_lone_closing_brace_is_literal(self):
        """Test a closing brace outside a placeholder matches literally."""
        compiler = WildcardCompiler()
        assert compiler.match("a}/{id}", "a}/1") == ["1"]

    def test_has_wildcards(self):
        """Test wildcard detection."""
        assert has_wildcards("users/{id}") is True
        assert has_wildcards("{id}") is True
        assert has_wildcards("users") is False
