"""
Emotion keyword matching for journal text.

A deliberately cheap stand-in for sentiment analysis: each keyword maps to one
strategy category and is looked for as a plain substring of the lowercased
text. Substring matching is not word-boundary aware, so "sad" also fires on
"sadness" and on unrelated words that happen to contain it; that is accepted.

Anything that exposes ``match(text) -> FrozenSet[StrategyCategory]`` can stand
in for KeywordMatcher (see CategoryMatcher).
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Mapping, Optional, Protocol

from resilientme.models.strategy import StrategyCategory


KEYWORD_CATEGORY_MAP: Dict[str, StrategyCategory] = {
    "anxious": StrategyCategory.COGNITIVE,
    "sad": StrategyCategory.SELF_CARE,
    "stress": StrategyCategory.MINDFULNESS,
    "lonely": StrategyCategory.SOCIAL,
    "angry": StrategyCategory.PHYSICAL,
    "rejected": StrategyCategory.SELF_CARE,
    "calm": StrategyCategory.MINDFULNESS,
    "happy": StrategyCategory.CREATIVE,
    "disappointed": StrategyCategory.COGNITIVE,
    "frustrated": StrategyCategory.PHYSICAL,
    "worried": StrategyCategory.COGNITIVE,
}

DEFAULT_CATEGORIES: FrozenSet[StrategyCategory] = frozenset(
    {StrategyCategory.SELF_CARE, StrategyCategory.MINDFULNESS}
)


class CategoryMatcher(Protocol):
    def match(self, text: Optional[str]) -> FrozenSet[StrategyCategory]:
        ...


class KeywordMatcher:
    """Derive candidate strategy categories from free text."""

    def __init__(
        self,
        keyword_map: Mapping[str, StrategyCategory] = KEYWORD_CATEGORY_MAP,
        default_categories: FrozenSet[StrategyCategory] = DEFAULT_CATEGORIES,
    ):
        self.keyword_map: Dict[str, StrategyCategory] = {
            keyword.lower(): category for keyword, category in keyword_map.items()
        }
        self.default_categories = frozenset(default_categories)

    def matched_keywords(self, text: Optional[str]) -> Dict[str, StrategyCategory]:
        """Keywords found in the text with the category each one maps to."""
        lowered = (text or "").lower()
        if not lowered:
            return {}
        return {
            keyword: category
            for keyword, category in self.keyword_map.items()
            if keyword in lowered
        }

    def match(self, text: Optional[str]) -> FrozenSet[StrategyCategory]:
        """Union of matched categories, or the default set when nothing matches."""
        matched = frozenset(self.matched_keywords(text).values())
        return matched or self.default_categories


def match_categories(text: Optional[str]) -> FrozenSet[StrategyCategory]:
    """Match text against the standard keyword table."""
    return _DEFAULT_MATCHER.match(text)


_DEFAULT_MATCHER = KeywordMatcher()
