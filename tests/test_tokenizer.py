"""
Tests for selector argument tokenization.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from entity_selector.selector.tokenizer import split_arguments, split_assignment


class TestSplitArguments:
    """Tests for split_arguments."""

    def test_flat_arguments(self):
        """Plain key=value arguments split on every comma."""
        assert split_arguments("type=pig,tag=a,r=5") == ["type=pig", "tag=a", "r=5"]

    def test_nested_commas_stay_in_token(self):
        """Commas inside braces and brackets do not split."""
        text = "scores={a=1,b=2..3},hasitem=[{item=apple,quantity=1},{item=stick}],r=5"
        assert split_arguments(text) == [
            "scores={a=1,b=2..3}",
            "hasitem=[{item=apple,quantity=1},{item=stick}]",
            "r=5",
        ]

    def test_token_count_is_top_level_commas_plus_one(self):
        """Only top-level commas separate tokens."""
        text = "a=1,b={x=1,y=2},c=[1,2]"
        top_level_commas = 2
        assert len(split_arguments(text)) == top_level_commas + 1

    def test_whitespace_and_empty_tokens(self):
        """Tokens are stripped and empty ones dropped."""
        assert split_arguments(" a=1 , ,b=2 ") == ["a=1", "b=2"]
        assert split_arguments("") == []

    def test_independent_depth_counters(self):
        """Brace and bracket depth are tracked separately."""
        assert split_arguments("a={[,]},b=1") == ["a={[,]}", "b=1"]

    def test_unbalanced_input_keeps_rest_in_one_token(self):
        """An unclosed bracket swallows the remaining commas."""
        assert split_arguments("tag=x,hasitem=[{item=apple,r=5") == [
            "tag=x",
            "hasitem=[{item=apple,r=5",
        ]


class TestSplitAssignment:
    """Tests for split_assignment."""

    def test_splits_on_first_equals(self):
        assert split_assignment("name=a=b") == ("name", "a=b")

    def test_strips_parts(self):
        assert split_assignment(" type = pig ") == ("type", "pig")

    def test_missing_equals(self):
        assert split_assignment("oops") == ("", "")
