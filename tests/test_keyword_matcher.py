"""Unit tests for keyword-based category matching."""

from resilientme.models.strategy import StrategyCategory
from resilientme.services.keyword_matcher import (
    DEFAULT_CATEGORIES,
    KEYWORD_CATEGORY_MAP,
    KeywordMatcher,
    match_categories,
)


class TestKeywordMatcher:
    """Test cases for KeywordMatcher.match()."""

    def test_case_insensitive(self):
        assert match_categories("I feel ANXIOUS today") == match_categories("i feel anxious today")

    def test_single_keyword(self):
        assert match_categories("i feel anxious today") == {StrategyCategory.COGNITIVE}

    def test_default_for_empty_text(self):
        assert match_categories("") == {StrategyCategory.SELF_CARE, StrategyCategory.MINDFULNESS}

    def test_default_for_none(self):
        assert match_categories(None) == DEFAULT_CATEGORIES

    def test_default_for_unmatched_text(self):
        assert match_categories("xyz nonsense text") == DEFAULT_CATEGORIES

    def test_multiple_keywords_union(self):
        result = match_categories("Lonely and angry, but trying to stay calm")
        assert result == {
            StrategyCategory.SOCIAL,
            StrategyCategory.PHYSICAL,
            StrategyCategory.MINDFULNESS,
        }

    def test_keywords_sharing_a_category_collapse(self):
        assert match_categories("rejected and sad") == {StrategyCategory.SELF_CARE}

    def test_substring_match_is_not_word_aware(self):
        """'sad' fires inside 'sadness'; this is accepted behaviour."""
        assert match_categories("a wave of sadness") == {StrategyCategory.SELF_CARE}
        assert match_categories("the stressful week") == {StrategyCategory.MINDFULNESS}

    def test_every_keyword_is_lowercase_and_canonical(self):
        for keyword, category in KEYWORD_CATEGORY_MAP.items():
            assert keyword == keyword.lower()
            assert category in set(StrategyCategory)

    def test_matched_keywords_reports_hits(self):
        matcher = KeywordMatcher()
        assert matcher.matched_keywords("worried and frustrated") == {
            "worried": StrategyCategory.COGNITIVE,
            "frustrated": StrategyCategory.PHYSICAL,
        }
        assert matcher.matched_keywords("") == {}

    def test_custom_table_and_defaults(self):
        matcher = KeywordMatcher(
            keyword_map={"Grand": StrategyCategory.SOCIAL},
            default_categories=frozenset({StrategyCategory.CREATIVE}),
        )
        assert matcher.match("visiting my grandmother") == {StrategyCategory.SOCIAL}
        assert matcher.match("nothing here") == {StrategyCategory.CREATIVE}
