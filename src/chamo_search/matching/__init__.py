"""Approximate text matching modules."""

from chamo_search.matching.distance import edit_distance
from chamo_search.matching.fuzzy import MatchRule, fuzzy_match, match_rule, token_fuzzy_matches
from chamo_search.matching.normalizer import normalize

__all__ = [
    "MatchRule",
    "edit_distance",
    "fuzzy_match",
    "match_rule",
    "normalize",
    "token_fuzzy_matches",
]
