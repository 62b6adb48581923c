"""Tests for generated rule layout."""

from darkcss.emit import CssFormatter, split_declarations


class TestSplitDeclarations:
    def test_single(self):
        assert split_declarations("color:#fff") == ["color: #fff"]

    def test_multi_line_template(self):
        body = """
     box-shadow: 0 0 0 2px rgba(79,140,201,.3);
     box-shadow: 0 0 0 2px rgba(/*[[base-color-rgb]]*/, .3);
        """
        assert split_declarations(body) == [
            "box-shadow: 0 0 0 2px rgba(79,140,201,.3)",
            "box-shadow: 0 0 0 2px rgba(/*[[base-color-rgb]]*/, .3)",
        ]

    def test_comment_in_value_preserved(self):
        assert split_declarations("color: /*[[base-color]]*/ #4f8cc9") == [
            "color: /*[[base-color]]*/ #4f8cc9"
        ]


class TestCssFormatter:
    def test_format_rule(self):
        out = CssFormatter().format_rule([".a", ".b"], "color: #fff")
        assert out == ".a, .b {\n  color: #fff;\n}\n"

    def test_several_declarations(self):
        out = CssFormatter(indent_size=4).format_rule([".a"], "background: #000; color: #fff")
        assert out == ".a {\n    background: #000;\n    color: #fff;\n}\n"

    def test_wraps_selector_list(self):
        fmt = CssFormatter(max_selector_length=14)
        assert fmt.wrap_selectors([".aaaa", ".bbbb", ".cccc"]) == [".aaaa, .bbbb,", ".cccc"]

    def test_wraps_every_selector_when_narrow(self):
        fmt = CssFormatter(max_selector_length=10)
        assert fmt.wrap_selectors([".aaaa", ".bbbb", ".cccc"]) == [".aaaa,", ".bbbb,", ".cccc"]

    def test_long_selector_gets_own_line(self):
        fmt = CssFormatter(max_selector_length=10)
        assert fmt.wrap_selectors([".a", ".a-very-long-selector", ".b"]) == [
            ".a,",
            ".a-very-long-selector,",
            ".b",
        ]

    def test_lines_respect_limit(self):
        selectors = [f".selector-{i}" for i in range(40)]
        lines = CssFormatter().wrap_selectors(selectors)
        assert all(len(line) <= 76 for line in lines)
        assert " ".join(lines) == ", ".join(selectors)
