"""Pattern compiler tests."""

import pytest
from tinyrouter_core.exceptions import InvalidPattern
from tinyrouter_core.routing.matcher import compile_pattern, tokenize


class TestCompilePattern:
    """Test pattern compilation."""

    def test_literal_pattern(self):
        """Test literal patterns match verbatim."""
        matcher = compile_pattern("/users")

        assert matcher.match("/users") == {}
        assert matcher.match("/users/") == {}
        assert matcher.match("/user") is None
        assert matcher.match("/users/1") is None

    def test_single_trailing_slash_only(self):
        """Test exactly one optional trailing slash is accepted."""
        matcher = compile_pattern("/users")

        assert matcher.match("/users//") is None

    def test_placeholder_captures_segment(self):
        """Test unconstrained placeholders stop at slashes."""
        matcher = compile_pattern("/users/{id}")

        assert matcher.match("/users/42") == {"id": "42"}
        assert matcher.match("/users/42/") == {"id": "42"}
        assert matcher.match("/users/42/posts") is None
        assert matcher.match("/users/") is None

    def test_constrained_placeholder(self):
        """Test constrained placeholders use the given regex."""
        matcher = compile_pattern(r"/users/{id:\d+}/posts")

        assert matcher.match("/users/7/posts") == {"id": "7"}
        assert matcher.match("/users/abc/posts") is None

    def test_constraint_may_span_slashes(self):
        """Test a constraint is used verbatim, slashes included."""
        matcher = compile_pattern("/files/{path:.+}")

        assert matcher.match("/files/a/b/c.txt") == {"path": "a/b/c.txt"}

    def test_param_names_in_order(self):
        """Test captured names follow left-to-right order."""
        matcher = compile_pattern(r"/{org}/repos/{repo}/issues/{num:\d+}")

        assert matcher.param_names == ("org", "repo", "num")
        assert matcher.match("/acme/repos/web/issues/12") == {
            "org": "acme",
            "repo": "web",
            "num": "12",
        }

    def test_literal_regex_characters_are_escaped(self):
        """Test literal text is not interpreted as regex."""
        matcher = compile_pattern("/files/{name}.json")

        assert matcher.match("/files/report.json") == {"name": "report"}
        assert matcher.match("/files/reportxjson") is None

    def test_whole_path_anchored(self):
        """Test matching is anchored at both ends."""
        matcher = compile_pattern("/api")

        assert matcher.match("/v1/api") is None
        assert matcher.match("/api\n") is None

    def test_duplicate_placeholder_rejected(self):
        """Test duplicate placeholder names fail at compile time."""
        with pytest.raises(InvalidPattern) as exc_info:
            compile_pattern("/{id}/{id}")

        assert "id" in str(exc_info.value)

    def test_invalid_constraint_rejected(self):
        """Test broken constraint regexes fail at compile time."""
        with pytest.raises(InvalidPattern):
            compile_pattern("/{id:[0-9}")


class TestTokenize:
    """Test pattern tokenization."""

    def test_tokens(self):
        """Test literal and placeholder tokens alternate."""
        tokens = list(tokenize(r"/users/{id:\d+}/posts"))

        assert tokens == [
            ("/users/", None, None),
            ("", "id", r"\d+"),
            ("/posts", None, None),
        ]

    def test_non_word_braces_are_literal(self):
        """Test braces without a valid name stay literal."""
        assert list(tokenize("/{foo-bar}")) == [("/{foo-bar}", None, None)]
