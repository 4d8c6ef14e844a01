"""
Coping-strategy category mapping.

The journal, mood engine and strategy library each grew their own category
enum over time. They all describe the same six domains, so this module folds
every one of them (and the label strings they serialise to) onto the
canonical StrategyCategory used by matching and selection.

- Legacy taxonomies (Section I)
- Canonical lookup tables: display names, icon tokens (Section II)
- Normalisation (Section III)
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

from resilientme.config.logger import app_logger
from resilientme.models.strategy import StrategyCategory


class MappingError(LookupError):
    """A category value has no canonical counterpart. Indicates a code-level gap, not bad user input."""


# ════════════════════════════════════════════════════════════════════════════
# SECTION I: LEGACY TAXONOMIES
# ════════════════════════════════════════════════════════════════════════════

class EngineCategory(str, Enum):
    """Mood-analysis engine categories (serialised as display labels)."""

    MINDFULNESS = "Mindfulness"
    COGNITIVE = "Cognitive"
    PHYSICAL = "Physical"
    SOCIAL = "Social"
    CREATIVE = "Creative"
    SELF_CARE = "Self-Care"


class CoreCategory(str, Enum):
    """Core journal categories (serialised as camelCase identifiers)."""

    MINDFULNESS = "mindfulness"
    COGNITIVE = "cognitive"
    PHYSICAL = "physical"
    SOCIAL = "social"
    CREATIVE = "creative"
    SELF_CARE = "selfCare"


class LibraryCategory(str, Enum):
    """Strategy library categories, declared in the library's own order."""

    MINDFULNESS = "Mindfulness"
    PHYSICAL = "Physical"
    COGNITIVE = "Cognitive"
    SELF_CARE = "Self-Care"
    SOCIAL = "Social"
    CREATIVE = "Creative"


LEGACY_TAXONOMIES = (EngineCategory, CoreCategory, LibraryCategory)

CategoryValue = Union[StrategyCategory, EngineCategory, CoreCategory, LibraryCategory, str]


# ════════════════════════════════════════════════════════════════════════════
# SECTION II: CANONICAL LOOKUP TABLES
# ════════════════════════════════════════════════════════════════════════════

CATEGORY_DISPLAY_NAMES: Dict[StrategyCategory, str] = {
    StrategyCategory.MINDFULNESS: "Mindfulness",
    StrategyCategory.COGNITIVE: "Cognitive",
    StrategyCategory.PHYSICAL: "Physical",
    StrategyCategory.SOCIAL: "Social",
    StrategyCategory.CREATIVE: "Creative",
    StrategyCategory.SELF_CARE: "Self-Care",
}

CATEGORY_ICON_TOKENS: Dict[StrategyCategory, str] = {
    StrategyCategory.MINDFULNESS: "brain.head.profile",
    StrategyCategory.COGNITIVE: "lightbulb",
    StrategyCategory.PHYSICAL: "figure.walk",
    StrategyCategory.SOCIAL: "person.2",
    StrategyCategory.CREATIVE: "paintbrush",
    StrategyCategory.SELF_CARE: "heart",
}

# Older screens labelled the core categories with friendlier titles
CATEGORY_LABEL_ALIASES: Dict[str, StrategyCategory] = {
    "thought work": StrategyCategory.COGNITIVE,
    "physical activity": StrategyCategory.PHYSICAL,
    "social connection": StrategyCategory.SOCIAL,
    "creative expression": StrategyCategory.CREATIVE,
}


def _label_key(label: str) -> str:
    """Fold case and separators so "Self-Care", "self_care" and "selfCare" collide."""
    return "".join(ch for ch in label.lower() if ch not in "-_ ")


def _build_label_index() -> Dict[str, StrategyCategory]:
    index: Dict[str, StrategyCategory] = {}
    for category in StrategyCategory:
        index[_label_key(category.value)] = category
        index[_label_key(category.name)] = category
        index[_label_key(CATEGORY_DISPLAY_NAMES[category])] = category
    for taxonomy in LEGACY_TAXONOMIES:
        for member in taxonomy:
            # Legacy members share member names with the canonical enum
            canonical = StrategyCategory[member.name]
            index[_label_key(member.value)] = canonical
    for alias, category in CATEGORY_LABEL_ALIASES.items():
        index[_label_key(alias)] = category
    return index


_LABEL_INDEX = _build_label_index()


# ════════════════════════════════════════════════════════════════════════════
# SECTION III: NORMALISATION
# ════════════════════════════════════════════════════════════════════════════

def parse_category(value: Optional[CategoryValue]) -> Optional[StrategyCategory]:
    """Lenient lookup for user-supplied labels. Returns None when nothing matches."""
    if value is None:
        return None
    if isinstance(value, StrategyCategory):
        return value
    if isinstance(value, LEGACY_TAXONOMIES):
        return StrategyCategory[value.name]
    if isinstance(value, str):
        return _LABEL_INDEX.get(_label_key(value))
    return None


def normalize(value: CategoryValue) -> StrategyCategory:
    """
    Map any known category value onto the canonical StrategyCategory.

    Raises MappingError for values outside every known taxonomy. That only
    happens when a taxonomy gains a member without this module being updated,
    so the failure is logged loudly and left to propagate.
    """
    category = parse_category(value)
    if category is None:
        app_logger.error(f"No canonical strategy category for {value!r} ({type(value).__name__})")
        raise MappingError(f"Unmapped strategy category: {value!r}")
    return category


def display_name(category: StrategyCategory) -> str:
    """Human-readable name for a canonical category."""
    return CATEGORY_DISPLAY_NAMES[category]


def icon_token(category: StrategyCategory) -> str:
    """Icon identifier the client uses for a canonical category."""
    return CATEGORY_ICON_TOKENS[category]


def is_known_category(value: CategoryValue) -> bool:
    return parse_category(value) is not None
