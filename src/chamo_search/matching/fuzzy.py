"""Approximate matching of search queries against catalog text."""

from enum import Enum

from chamo_search.matching.distance import edit_distance
from chamo_search.matching.normalizer import normalize
from chamo_search.models.pydantic_models import MatchThresholds

_DEFAULT_THRESHOLDS = MatchThresholds()


class MatchRule(str, Enum):
    """Rule of the matching cascade that accepted a query."""

    SUBSTRING = "substring"
    TOKENS = "tokens"
    FUZZY = "fuzzy"


def _split(text: str) -> list[str]:
    return [part for part in text.split(" ") if part]


def token_fuzzy_matches(
    token: str,
    target: str,
    thresholds: MatchThresholds | None = None,
) -> bool:
    """Check whether a single normalized token approximately occurs in target.

    ``target`` is the whole normalized target, not a single word. Each of its
    words is compared against the token by containment in either direction,
    by edit distance, and by edit distance against the word's leading
    ``len(token) + 1`` characters.

    Args:
        token: Normalized query token.
        target: Normalized target text.
        thresholds: Distance table; defaults to ``MatchThresholds()``.

    Returns:
        True if the token matches somewhere in target.
    """
    if token in target:
        return True

    thresholds = thresholds or _DEFAULT_THRESHOLDS
    if len(token) < thresholds.min_token_length:
        return False

    max_distance = thresholds.max_distance_for(len(token))

    for word in _split(target):
        if token in word or word in token:
            return True
        if edit_distance(token, word) <= max_distance:
            return True
        # Compare against the start of a longer word only
        prefix = word[: len(token) + 1]
        if edit_distance(token, prefix) <= max_distance:
            return True

    return False


def match_rule(
    query: str,
    target: str,
    thresholds: MatchThresholds | None = None,
) -> MatchRule | None:
    """Run the matching cascade and report the first rule that accepts.

    Rules, from strictest to most permissive:
    1. Normalized target contains the normalized query
    2. Query has 2+ tokens and every token occurs in the target
    3. Every query token passes the per-token fuzzy test

    Args:
        query: Raw search text.
        target: Raw candidate text.
        thresholds: Distance table for rule 3.

    Returns:
        The accepting rule, or None if nothing matched.
    """
    normalized_query = normalize(query)
    normalized_target = normalize(target)

    if normalized_query in normalized_target:
        return MatchRule.SUBSTRING

    tokens = _split(normalized_query)
    if len(tokens) > 1 and all(token in normalized_target for token in tokens):
        return MatchRule.TOKENS

    if all(token_fuzzy_matches(token, normalized_target, thresholds) for token in tokens):
        return MatchRule.FUZZY

    return None


def fuzzy_match(
    query: str,
    target: str,
    thresholds: MatchThresholds | None = None,
) -> bool:
    """Return True if query approximately matches target.

    Examples:
        >>> fuzzy_match("ar condicionado", "Técnico de Ar-Condicionado")
        True
        >>> fuzzy_match("eletrecista", "Eletricista")
        True
        >>> fuzzy_match("encanador", "Fotógrafo")
        False
    """
    return match_rule(query, target, thresholds) is not None
