"""Unit tests for the fuzzy matcher."""

from chamo_search.matching.fuzzy import MatchRule, fuzzy_match, match_rule, token_fuzzy_matches
from chamo_search.models.pydantic_models import DistanceBand, MatchThresholds


class TestFuzzyMatch:
    """Tests for the matching cascade."""

    def test_substring_match(self) -> None:
        """Normalized target containing the normalized query should match."""
        assert fuzzy_match("eletric", "Eletricista")
        assert match_rule("eletric", "Eletricista") == MatchRule.SUBSTRING

    def test_accent_insensitive(self) -> None:
        assert fuzzy_match("eletricista", "Eletricísta")
        assert fuzzy_match("pedreiro", "Pedreiro")
        assert fuzzy_match("fotógrafo", "Fotografo")

    def test_multi_token_containment(self) -> None:
        """All tokens present, even if not contiguous, should match."""
        assert fuzzy_match("ar condicionado", "Técnico de Ar-Condicionado")
        assert match_rule("ar condicionado", "Técnico de Ar-Condicionado") == MatchRule.TOKENS

    def test_multi_token_any_order(self) -> None:
        assert match_rule("silva joao", "João Silva Eletricista") == MatchRule.TOKENS

    def test_typo_tolerance(self) -> None:
        """A single misspelled letter on a long token should match."""
        assert fuzzy_match("eletrecista", "eletricista")
        assert match_rule("eletrecista", "Eletricista") == MatchRule.FUZZY

    def test_typo_in_every_token(self) -> None:
        assert match_rule("eletrecista predial", "Eletricista Pedrial") == MatchRule.FUZZY

    def test_one_token_failing_rejects(self) -> None:
        """Every token must pass the fuzzy test."""
        assert not fuzzy_match("eletricista xyzwq", "Eletricista Predial")

    def test_short_token_matches_by_substring_only(self) -> None:
        """Two-letter queries match as substrings but never fuzzily."""
        assert match_rule("ar", "Armário") == MatchRule.SUBSTRING
        assert not fuzzy_match("xy", "completely unrelated text")
        assert not fuzzy_match("az", "Armário")

    def test_no_match(self) -> None:
        assert not fuzzy_match("encanador", "fotografo")
        assert match_rule("encanador", "Fotógrafo") is None

    def test_empty_query_matches(self) -> None:
        """An empty query is a substring of anything."""
        assert match_rule("", "Pedreiro") == MatchRule.SUBSTRING
        assert fuzzy_match("", "")

    def test_custom_thresholds_disable_typos(self) -> None:
        strict = MatchThresholds(bands=[], default_max_distance=0)

        assert fuzzy_match("eletrecista", "eletricista")
        assert not fuzzy_match("eletrecista", "eletricista", strict)
        # substring rule is unaffected
        assert fuzzy_match("eletric", "eletricista", strict)


class TestTokenFuzzyMatches:
    """Tests for the per-token fuzzy test."""

    def test_token_substring_of_target(self) -> None:
        assert token_fuzzy_matches("tecnico", "tecnico de arcondicionado")

    def test_short_token_rejected(self) -> None:
        assert not token_fuzzy_matches("xz", "xy ab")

    def test_short_token_allowed_by_min_length(self) -> None:
        thresholds = MatchThresholds(min_token_length=2)

        assert token_fuzzy_matches("xz", "xy ab", thresholds)

    def test_word_contained_in_token(self) -> None:
        """A token longer than a word that contains it should match."""
        assert token_fuzzy_matches("pedreiros", "joao pedreiro")
        assert match_rule("pedreiros", "João Pedreiro") == MatchRule.FUZZY

    def test_four_letter_token_allows_one_edit(self) -> None:
        assert token_fuzzy_matches("caza", "casa")
        assert not token_fuzzy_matches("cxsx", "casa")

    def test_five_letter_token_allows_two_edits(self) -> None:
        assert token_fuzzy_matches("cxsxs", "casas")
        assert not token_fuzzy_matches("cxxxs", "casas")

    def test_prefix_of_longer_word(self) -> None:
        """Compares against the word's first len(token) + 1 characters."""
        # full word is 3 edits away, the 9-character prefix only 2
        assert token_fuzzy_matches("eletrica", "eletricista")
        assert match_rule("eletrica", "Eletricista") == MatchRule.FUZZY

    def test_prefix_length_boundary(self) -> None:
        """Only one extra character of the word is considered."""
        strict = MatchThresholds(bands=[], default_max_distance=1)

        # "pintr" is one edit from the prefix "pintor"
        assert token_fuzzy_matches("pintr", "pintores", strict)

        # "abef" is two edits from "abcdef" but three from "abcde"
        loose = MatchThresholds(bands=[], default_max_distance=2)
        assert not token_fuzzy_matches("abef", "abcdefzz", loose)

    def test_empty_words_ignored(self) -> None:
        """Repeated spaces in the target do not create wildcard words."""
        assert not token_fuzzy_matches("encanador", "tecnico  fotografo")
        assert not fuzzy_match("encanador", "Técnico - Fotógrafo")

    def test_band_table_is_used(self) -> None:
        thresholds = MatchThresholds(
            bands=[DistanceBand(max_token_length=9, max_distance=3)],
            default_max_distance=0,
        )

        assert token_fuzzy_matches("xxxanador", "encanador", thresholds)
        assert not token_fuzzy_matches("xxxanador", "encanador")
