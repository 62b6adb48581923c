from darkcss.css.media import MediaQuery, match_media, parse_media_query
from darkcss.css.model import Declaration, MediaBlock, StyleRule, StyleSheet
from darkcss.css.parser import parse_stylesheet, split_selectors
from darkcss.css.values import normalize_value, values_equal

__all__ = [
    "MediaQuery",
    "match_media",
    "parse_media_query",
    "Declaration",
    "MediaBlock",
    "StyleRule",
    "StyleSheet",
    "parse_stylesheet",
    "split_selectors",
    "normalize_value",
    "values_equal",
]
