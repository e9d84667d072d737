"""Tests for nsdebug.core.filters — namespace filter compilation and matching."""

import pytest

from nsdebug.core.filters import (
    NamespaceFilter,
    compile_filter,
    compile_pattern,
    split_filter,
)


# =============================================================================
# Splitting
# =============================================================================

class TestSplitFilter:
    """Test tokenizing of filter strings."""

    def test_commas(self):
        assert split_filter("a,b,c") == ("a", "b", "c")

    def test_whitespace_runs(self):
        assert split_filter("a   b\tc\nd") == ("a", "b", "c", "d")

    def test_mixed_separators_drop_empty_tokens(self):
        assert split_filter(" ,a, ,b,,") == ("a", "b")

    def test_none_and_empty(self):
        assert split_filter(None) == ()
        assert split_filter("") == ()


# =============================================================================
# Matching
# =============================================================================

class TestDefaultDeny:
    """An empty filter enables nothing."""

    @pytest.mark.parametrize("filter_string", [None, "", "  ", ",,"])
    def test_empty_filter_matches_nothing(self, filter_string):
        f = compile_filter(filter_string)
        assert not f
        assert f.matches("main") is False
        assert f.matches("worker:a") is False
        assert f.matches(None) is False


class TestWildcards:
    """Test '*' glob semantics."""

    @pytest.mark.parametrize("namespace", ["a", "main", "worker:a", "x:y:z", "with space"])
    def test_star_matches_any_namespace(self, namespace):
        assert compile_filter("*").matches(namespace) is True

    def test_star_matches_root(self):
        """The root namespace is matched as '' and only wildcards reach it."""
        assert compile_filter("*").matches(None) is True
        assert compile_filter("main").matches(None) is False

    def test_prefix_wildcard(self):
        f = compile_filter("worker:*")
        assert f.matches("worker:a") is True
        assert f.matches("worker:a:b") is True
        assert f.matches("worker:") is True
        assert f.matches("other:a") is False
        assert f.matches("worker") is False

    def test_inner_wildcard(self):
        f = compile_filter("app:*:db")
        assert f.matches("app:users:db") is True
        assert f.matches("app:users:http") is False

    def test_patterns_are_anchored(self):
        f = compile_filter("work")
        assert f.matches("work") is True
        assert f.matches("worker") is False
        assert f.matches("rework") is False

    def test_any_token_may_match(self):
        f = compile_filter("db, http:*")
        assert f.matches("db") is True
        assert f.matches("http:get") is True
        assert f.matches("cache") is False


class TestMetacharacters:
    """Regex metacharacters in tokens are literal."""

    def test_dot_is_literal(self):
        f = compile_filter("app.db")
        assert f.matches("app.db") is True
        assert f.matches("appxdb") is False

    def test_brackets_and_plus(self):
        f = compile_filter("a[1]+")
        assert f.matches("a[1]+") is True
        assert f.matches("a1") is False

    def test_question_mark_is_literal(self):
        assert compile_filter("a?").matches("ab") is False


# =============================================================================
# Compiled filter object
# =============================================================================

class TestNamespaceFilter:
    """Test the immutable compiled filter value."""

    def test_is_deterministic(self):
        a = compile_filter("worker:*,db")
        b = compile_filter("worker:*,db")
        for ns in ["worker:a", "db", "other"]:
            assert a.matches(ns) == b.matches(ns)
            assert a.matches(ns) == a.matches(ns)

    def test_patterns_and_str(self):
        f = compile_filter(" worker:*  db ")
        assert f.patterns == ("worker:*", "db")
        assert str(f) == "worker:*,db"

    def test_frozen(self):
        f = compile_filter("db")
        with pytest.raises(AttributeError):
            f.rules = ()

    def test_default_instance_denies(self):
        assert NamespaceFilter().matches("anything") is False

    def test_compile_pattern_returns_anchored_regex(self):
        rule = compile_pattern("a*c")
        assert rule.match("abc")
        assert rule.match("ac")
        assert not rule.match("abcd")
