"""Tests for the tinycss2-backed rule tree parser."""

from darkcss.css import Declaration, MediaBlock, StyleRule, parse_stylesheet


# ---------------------------------------------------------------------------
# Style rules
# ---------------------------------------------------------------------------


class TestStyleRules:
    def test_selectors_and_declarations(self):
        ss = parse_stylesheet("a,b > c{color:#333;background:#fff!important}")
        assert ss.items == (
            StyleRule(
                selectors=("a", "b > c"),
                declarations=(
                    Declaration("color", "#333"),
                    Declaration("background", "#fff", important=True),
                ),
            ),
        )

    def test_commas_inside_functions_do_not_split(self):
        ss = parse_stylesheet(":not(a, b) .x, .y { color: red }")
        assert ss.rules[0].selectors == (":not(a, b) .x", ".y")

    def test_nth_child_arguments_kept_verbatim(self):
        ss = parse_stylesheet("li:nth-child(n+3), .x:nth-of-type(3n+2), tr:nth-child(2n-1) { color: red }")
        assert ss.rules[0].selectors == (
            "li:nth-child(n+3)",
            ".x:nth-of-type(3n+2)",
            "tr:nth-child(2n-1)",
        )

    def test_whitespace_in_selectors_collapsed(self):
        ss = parse_stylesheet("a,\n  b\n    c { color: red }")
        assert ss.rules[0].selectors == ("a", "b c")

    def test_property_names_lowercased(self):
        ss = parse_stylesheet(".a { COLOR: #333 }")
        assert ss.rules[0].declarations == (Declaration("color", "#333"),)

    def test_value_tokens_preserved(self):
        ss = parse_stylesheet(".a{box-shadow:inset 0 1px 2px rgba(27,31,35,.075),0 0 0 .2em rgba(3,102,214,.3)}")
        assert ss.rules[0].declarations[0].value == (
            "inset 0 1px 2px rgba(27,31,35,.075),0 0 0 .2em rgba(3,102,214,.3)"
        )

    def test_comments_skipped(self):
        ss = parse_stylesheet("/* header */ .a { /* x */ color: red; }")
        assert ss.rules[0].declarations == (Declaration("color", "red"),)


# ---------------------------------------------------------------------------
# At-rules
# ---------------------------------------------------------------------------


class TestAtRules:
    def test_media_block(self):
        ss = parse_stylesheet("@media (max-width: 767px){.a{color:#333}}")
        assert ss.items == (
            MediaBlock(
                query="(max-width: 767px)",
                rules=(StyleRule(selectors=(".a",), declarations=(Declaration("color", "#333"),)),),
            ),
        )

    def test_media_keyword_case_insensitive(self):
        ss = parse_stylesheet("@MEDIA screen{.a{color:#333}}")
        assert len(ss.media) == 1
        assert ss.media[0].query == "screen"

    def test_other_at_rules_dropped(self):
        ss = parse_stylesheet(
            "@font-face{font-family:x}@keyframes spin{from{color:red}}"
            "@supports (display:grid){.g{color:red}}.a{color:red}"
        )
        assert len(ss.items) == 1
        assert ss.rules[0].selectors == (".a",)

    def test_source_order(self):
        ss = parse_stylesheet(".a{color:red}@media print{.b{color:red}}.c{color:red}")
        assert [type(i).__name__ for i in ss.items] == ["StyleRule", "MediaBlock", "StyleRule"]


class TestEdgeCases:
    def test_empty(self):
        assert parse_stylesheet("").items == ()

    def test_malformed_declarations_are_skipped(self):
        ss = parse_stylesheet(".a{color:red;;:bad;}.b{color:blue}")
        assert ss.rules[0].declarations == (Declaration("color", "red"),)
        assert ss.rules[1].selectors == (".b",)
