"""
Argument normalizer tests.
"""

from __future__ import annotations

import pytest

from chibilog.arguments import normalize, split_options, to_display
from chibilog.types import LogOptions


class TestNormalize:
    """Inline options detection"""

    def test_trailing_options_override_tags_and_separator(self) -> None:
        assert normalize(("a", "b", {"tags": ["X"], "sep": "-"})) == ("a-b", ("X",), "-")

    def test_defaults_apply_without_options(self) -> None:
        assert normalize(("a", "b"), ("WARN",)) == ("a b", ("WARN",), " ")

    def test_missing_tags_means_no_tags(self) -> None:
        assert normalize(("a", "b", {"sep": ","}), ("WARN",)) == ("a,b", (), ",")

    def test_missing_sep_means_single_space(self) -> None:
        assert normalize(("a", "b", {"tags": ["X", "X"]})) == ("a b", ("X", "X"), " ")

    def test_zero_parts_is_empty_message(self) -> None:
        assert normalize((), ("DEBUG",)) == ("", ("DEBUG",), " ")

    def test_only_options(self) -> None:
        assert normalize(({"tags": ["AUDIT"]},), ("WARN",)) == ("", ("AUDIT",), " ")

    def test_mapping_without_option_keys_is_a_message_part(self) -> None:
        assert normalize(("user", {"id": 7})) == ('user {"id":7}', (), " ")

    def test_options_not_last_are_message_parts(self) -> None:
        message, tags, _ = normalize(({"tags": ["X"]}, "tail"))
        assert message == '{"tags":["X"]} tail'
        assert tags == ()

    def test_log_options_instance(self) -> None:
        assert normalize(("a", LogOptions(tags=["N"], sep="|"))) == ("a", ("N",), "|")

    def test_single_string_tag_is_wrapped(self) -> None:
        assert normalize(("a", {"tags": "solo"})) == ("a", ("solo",), " ")


class TestSplitOptions:
    def test_none_is_a_message_part(self) -> None:
        parts, options = split_options(("a", None))
        assert parts == ("a", None)
        assert options is None

    def test_empty_args(self) -> None:
        assert split_options(()) == ((), None)


class TestToDisplay:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("text", "text"),
            (3, "3"),
            (1.5, "1.5"),
            (None, "null"),
            (True, "true"),
            ([1, "a"], '[1,"a"]'),
            ((1, 2), "[1,2]"),
            ({1: "x"}, '{"1":"x"}'),
        ],
    )
    def test_display_strings(self, value, expected) -> None:
        assert to_display(value) == expected

    def test_colorized_json_strips_back(self) -> None:
        from chibilog.formatters import strip_ansi

        colored = to_display({"a": [1, None]}, colorize=True)
        assert colored != '{"a":[1,null]}'
        assert strip_ansi(colored) == '{"a":[1,null]}'


class TestLooseOptionValues:
    """Odd option values degrade to defaults instead of failing the call"""

    def test_none_separator_is_single_space(self) -> None:
        assert normalize(("a", "b", {"tags": ["X"], "sep": None})) == ("a b", ("X",), " ")

    def test_non_iterable_tags_become_one_tag(self) -> None:
        assert normalize(("payload", {"tags": 5})) == ("payload", ("5",), " ")

    def test_none_tags_mean_no_tags(self) -> None:
        assert normalize(("a", {"tags": None}), ("WARN",)) == ("a", (), " ")

    def test_non_string_separator_is_stringified(self) -> None:
        assert normalize(("a", "b", {"sep": 0})) == ("a0b", (), "0")
