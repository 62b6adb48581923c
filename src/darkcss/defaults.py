"""Built-in GitHub dark-theme tables.

MAPPINGS maps old declarations to new ones and ordering is significant.
Keys starting with ``$`` generate a family of rules (see
darkcss.mapping.builder).
"""

from __future__ import annotations

import re

MAPPINGS: list[tuple[str, str]] = [
    # ==========================================================================
    # Background
    # ==========================================================================
    ("$background: #fff", "#181818"),
    ("$background: #fdfdfd", "#1c1c1c"),
    ("$background: #fafbfc", "#181818"),
    ("$background: #f6f8fa", "#202020"),
    ("$background: #f4f4f4", "#242424"),
    ("$background: #eff3f6", "#343434"),
    ("$background: #eaecef", "#343434"),
    ("$background: #e6ebf1", "#444"),
    ("$background: #e1e4e8", "#343434"),
    ("$background: #dfe2e5", "#383838"),
    ("$background: #d6e2f1", "#444"),
    ("$background: #d3e2f4", "#383838"),
    ("$background: #d1d5da", "#404040"),
    ("$background: #c6cbd1", "#484848"),
    ("$background: #6a737d", "#303030"),
    ("$background: #24292e", "#181818"),
    ("$background: #f9f9f9", "#181818"),
    ("$background: #4183C4", "/*[[base-color]]*/ #4f8cc9"),
    ("$background: hsla(0,0%,100%,.125)", "hsla(0,0%,100%,.05)"),
    ("$background: hsla(0,0%,100%,.175)", "hsla(0,0%,100%,.1)"),
    # ==========================================================================
    # Border
    # ==========================================================================
    ("$border: transparent", "transparent"),  # before the color variants
    ("$border: rgba(27,31,35,.1)", "rgba(200,200,200,.1)"),
    ("$border: rgba(27,31,35,.15)", "rgba(200,200,200,.15)"),
    ("$border: #959da5", "#484848"),
    ("$border: #c3c8cf", "#484848"),
    ("$border: #dfe2e5", "#343434"),
    ("$border: #d1d5da", "#404040"),
    ("$border: #ddd", "#343434"),
    ("$border: #e1e4e8", "#343434"),
    ("$border: #e6ebf1", "#343434"),
    ("$border: #eaecef", "#343434"),
    ("$border: #eee", "#343434"),
    ("$border: #f6f8fa", "#202020"),
    ("$border: #f8f8f8", "#343434"),
    ("$border: #fff", "#181818"),
    ("border-top: 8px solid rgba(27,31,35,.15)", "border-top-color: rgba(200,200,200,.15)"),
    ("border-bottom-color: #e36209", "border-bottom-color: #eee"),
    ("border: 1px solid", "border-color: #181818"),
    ("border-top: 7px solid #fff", "border-top-color: #181818"),
    ("border-color: #dfe2e5 #dfe2e5 #fff", "border-color: #343434 #343434 #181818"),
    # ==========================================================================
    # Box-Shadow
    # ==========================================================================
    ("box-shadow: 0 0 0 .2em rgba(3,102,214,.3)", """
     box-shadow: 0 0 0 2px rgba(79,140,201,.3);
     box-shadow: 0 0 0 2px rgba(/*[[base-color-rgb]]*/, .3);
    """),
    ("box-shadow: 0 0 0 .2em #c8e1ff", """
     box-shadow: 0 0 0 2px rgba(79,140,201,.3);
     box-shadow: 0 0 0 2px rgba(/*[[base-color-rgb]]*/, .3);
    """),
    ("box-shadow: inset 0 1px 2px rgba(27,31,35,.075),0 0 0 .2em rgba(3,102,214,.3)", """
    box-shadow: 0 0 0 2px rgba(79,140,201,.3);
    box-shadow: 0 0 0 2px rgba(/*[[base-color-rgb]]*/, .3);
    """),
    ("box-shadow: 0 1px 0 0 rgba(16,116,231,.5)", """
    box-shadow: 0 1px 0 0 rgba(79,140,201,.5);
    box-shadow: 0 1px 0 0 rgba(/*[[base-color-rgb]]*/, .5);
    """),
    ("box-shadow: 0 1px 0 0 #1074e7", """
    box-shadow: 0 1px 0 0 #4f8cc9;
    box-shadow: 0 1px 0 0 /*[[base-color]]*/;
    """),
    ("box-shadow: inset 0 1px 2px rgba(27,31,35,0.075),0 0 0 0.2em rgba(3,102,214,0.3)", """
    box-shadow: inset 0 1px 2px 0 rgba(27,31,35,.04),0 0 0 0.1em rgba(79, 140, 201, 6);
    box-shadow: inset 0 1px 2px 0 rgba(27,31,35,.04),0 0 0 0.1em rgba(/*[[base-color-rgb]]*/, .6);
    """),
    ("box-shadow: 0 0 0 .2em rgba(203,36,49,.4)", "box-shadow: 0 0 0 .2em rgba(255,68,68,.4)"),
    ("box-shadow: 0 1px 5px rgba(27,31,35,.15)", "box-shadow: 0 1px 5px #000"),
    ("box-shadow: inset 0 0 0 1px #e1e4e8,0 2px 4px rgba(0,0,0,.15)", "box-shadow: inset 0 0 0 1px #555"),
    ("box-shadow: inset 0 0 0 1px #e1e4e8", "box-shadow: inset 0 0 0 1px #555"),
    ("box-shadow: inset 0 1px 0 0 #e1e4e8", "box-shadow: inset 0 1px 0 0 #555"),
    ("box-shadow: inset 0 -1px 0 #c6cbd1", "box-shadow: inset 0 -2px 0 #343434"),
    ("box-shadow: 0 1px 0 0 #0058a2", "box-shadow: 0 1px 0 0 /*[[base-color]]*/ #4f8cc9"),
    # ==========================================================================
    # Color / Background
    # ==========================================================================
    ("color: #05264c", "color: #bebebe"),  # big commit title
    ("color: #333", "color: #bebebe"),
    ("color: #3c4146", "color: #bebebe"),
    ("color: #444d56", "color: #afafaf"),
    ("color: #1b1f23", "color: #afafaf"),
    ("color: #666", "color: #8e8e8e"),
    ("color: #6a737d", "color: #8e8e8e"),
    ("color: #959da5", "color: #757575"),
    ("color: #767676", "color: #767676"),
    ("color: #a3aab1", "color: #757575"),
    ("color: #c3c8cf", "color: #5a5a5a"),
    ("color: #c6cbd1", "color: #5a5a5a"),
    ("color: #d1d5da", "color: #404040"),
    ("color: #4183C4", """
    color: rgba(79,140,201,.9);
    color: rgba(/*[[base-color-rgb]]*/,.9);
    """),
    ("color: #005b9e", """
    color: rgba(79,140,201,1);
    color: rgba(/*[[base-color-rgb]]*/,1);
    """),
    ("color: rgba(27,31,35,.6)", "color: #9daccc"),
    ("color: rgba(27,31,35,.85)", "color: rgba(230,230,230,.85)"),
    ("color: rgba(27,31,35,.3)", "color: rgba(230,230,230,.3)"),
    ("color: hsla(0,0%,100%,.5)", "color: hsla(0,0%,100%,.5)"),
    ("color: hsla(0,0%,100%,.6)", "color: hsla(0,0%,100%,.6)"),
    ("color: hsla(0,0%,100%,.75)", "color: hsla(0,0%,100%,.75)"),
    ("fill: #959da5", "fill: #757575"),
    # after #333 for .btn vs .btn-outline
    ("color: #0366d6", "color: /*[[base-color]]*/ #4f8cc9"),
    ("color: #1074e7", "color: /*[[base-color]]*/ #4f8cc9"),
    # after #0366d6 for .btn-link vs .text-gray
    ("color: #586069", "color: #949494"),
    ("color: rgba(88,96,105,.5)", "color: rgba(148,148,148,.5)"),
    # after #0366d6 for .btn-link vs .text-gray-dark
    ("color: #24292e", "color: #d2d2d2"),
    ("color: #2f363d", "color: #bebebe"),
    # blue
    ("color: #264c72", "color: #9daccc"),
    ("color: #032f62", "color: #9daccc"),
    ("$background: #f1f8ff", "#182030"),
    ("$background: #032f62", "#182030"),
    ("$background: #dbedff", "#182030"),
    ("$border: #f1f8ff", "#182030"),
    ("color: #c0d3eb", "color: #224466"),
    ("$border: #c8e1ff", "#224466"),
    ("$border: #c0d3eb", "#224466"),
    # blue (base-color)
    ("color: #327fc7", "color: /*[[base-color]]*/ #4f8cc9"),
    ("$background: #0366d6", "/*[[base-color]]*/ #4f8cc9; color: #fff"),
    ("$border: #0366d6", "/*[[base-color]]*/ #4f8cc9"),
    ("filter: drop-shadow(-.25em 0 0 #c8e1ff)", """
    filter: drop-shadow(-.25em 0 0 rgba(79,140,201,.3));
    filter: drop-shadow(-.25em 0 0 rgba(/*[[base-color-rgb]]*/, .3))
    """),
    ("filter: drop-shadow(0 -.28em 0 #c8e1ff)", """
    filter: drop-shadow(0 -.28em 0 rgba(79,140,201,.3));
    filter: drop-shadow(0 -.28em 0 rgba(/*[[base-color-rgb]]*/, .3))
    """),
    ("$border: #2188ff", "/*[[base-color]]*/ #4f8cc9"),
    # red
    ("color: #cb2431", "color: #f44"),
    ("color: #86181d", "color: #f44"),
    ("$background: #d73a49", "#f44"),
    ("$background: #cb2431", "#911"),
    ("$background: #ffdce0", "#300"),
    ("fill: #cb2431", "fill: #f44"),
    ("$border: #d73a49", "#b00"),
    # orange
    ("color: #a04100", "color: #f3582c"),
    ("$background: #d15704", "#f3582c"),
    ("$background: #fb8532", "#f3582c"),
    # green
    ("color: #28a745", "color: #6cc644"),
    ("color: #165c26", "color: #6cc644"),
    ("$background: #28a745", "#6cc644"),
    ("$background: #2cbe4e", "#163"),
    ("$background: #dcffe4", "#002800"),
    ("$background: rgba(108,198,68,.1)", "#002800"),
    ("fill: #2cbe4e", "fill: #6cc644"),
    ("$border: #34d058", "#34d058"),
    # yellow
    ("color: rgba(47,38,6,.5)", "color: #cb4"),
    ("color: #b08800", "color: #cb4"),
    ("color: #735c0f", "color: #bba257"),
    ("color: #613A00", "color: #bba257"),
    ("$background: #ffd33d", "#cb4"),
    ("$background: #ffdf5d", "#cb4"),
    ("$background: #fffbdd", "#261d08"),
    ("fill: #dbab09", "fill: #cb4"),
    ("$border: #fffbdd", "#321"),
    ("$border: #ffdf5d", "#321"),
    ("$border: #d9d0a5", "#542"),
    ("$border: #dca874", "#542"),
    # light yellow
    ("$background: #fff5b1", "#651"),
    # purple
    ("color: #6f42c1", "color: #8368aa"),
    ("$background: #6f42c1", "#8368aa"),
    ("$background: #f8f4ff", "#213"),
    ("$background: #f5f0ff", "#213"),
    ("$border: #6f42c1", "#8368aa"),
    ("$border: #8a63d2", "#8368aa"),
    ("fill: currentColor", "fill: currentColor"),
    ("color: inherit", "color: inherit"),
    ("box-shadow: none", "box-shadow: none"),
    ("$background: none", "none"),
]

_MOBILE_UA = (
    "Mozilla/5.0 (Linux; Android 6.0; Nexus 5 Build/MRA58N) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/65.0.3325.181 Mobile Safari/537.36"
)

# Upstream origins. A URL ending in .css is loaded directly, anything else
# is treated as a page whose <link rel="stylesheet"> references are followed.
SOURCES: list[dict] = [
    {"url": "https://github.com"},
    {"url": "https://gist.github.com"},
    {"url": "https://help.github.com"},
    {"url": "https://developer.github.com", "prefix": "html[prefix]"},
    {
        "url": "https://github.com/login",
        "prefix": 'body[class="page-responsive"]',
        "match": ["body", ".page-responsive"],
        "fetch_options": {"headers": {"User-Agent": _MOBILE_UA}},
    },
    {
        "url": "https://raw.githubusercontent.com/sindresorhus/refined-github/master/source/content.css",
        "prefix": "html.refined-github",
    },
]

# Selectors that are never collected.
IGNORE_SELECTORS: list[re.Pattern[str]] = [
    re.compile(r"\.CodeMirror"),
    re.compile(r"\.cm-"),  # CodeMirror
    re.compile(r"\.pl-"),  # Pretty Lights syntax highlighter
    re.compile(r"\spre$"),
    re.compile(r":not\(li\.moved\)"),
    re.compile(r"^.Popover-message:before$"),
    re.compile(r"^.Popover-message:after$"),
    re.compile(r"^h[1-6] a$"),  # help.github.com
    re.compile(r"^\.bg-white$"),
    re.compile(r"^\.CircleBadge$"),
    re.compile(r"^table$"),
    re.compile(r"^.text-gray-dark$"),
    re.compile(r"^.markdown-body del$"),
    re.compile(r"^.dashboard .js-all-activity-header \+ div$"),  # refined-github
]

# Selectors that can turn a merged selector list into an invalid rule.
UNMERGEABLE_SELECTORS: list[re.Pattern[str]] = [
    re.compile(r"(-moz-|-ms-|-o-|-webkit-).+"),
]

# Shorthands whose values are compared regardless of token order,
# e.g. "1px solid red" equals "1px red solid".
SHORTHANDS: tuple[str, ...] = (
    "border",
    "border-left",
    "border-right",
    "border-top",
    "border-bottom",
    "background",
    "font",
)

TARGET_FILE = "github-dark.css"
