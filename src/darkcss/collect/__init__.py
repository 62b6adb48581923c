from darkcss.collect.accumulator import SelectorAccumulator, SourceResult, merge_results
from darkcss.collect.matcher import DeclarationMatcher, Match, collect_source
from darkcss.collect.selectors import SelectorCollector, apply_prefix, normalize_combinators

__all__ = [
    "SelectorAccumulator",
    "SourceResult",
    "merge_results",
    "DeclarationMatcher",
    "Match",
    "collect_source",
    "SelectorCollector",
    "apply_prefix",
    "normalize_combinators",
]
