"""
Symptom-to-condition scoring.

Each condition mapping is scored by how much of its symptom list the patient
selected, plus a small bonus per matched symptom:

    score = matched / len(mapping.symptoms) + matched * MATCH_COUNT_BONUS

Mappings with no overlap are dropped; the rest are ranked by score (ties keep
table order) and the top few are returned with localized display text.
Duration and severity answers are not inputs to the score.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from core.constants import (
    HIGH_MATCH_THRESHOLD,
    MATCH_COUNT_BONUS,
    MAX_CONDITION_RESULTS,
    MEDIUM_MATCH_THRESHOLD,
)
from chatbot.data import CONDITION_MAPPINGS, CONDITION_TEXTS, DEFAULT_CATEGORY_NAMES, CategoryNames
from chatbot.prompts import match_tier_label
from chatbot.types import ConditionMapping, ConditionResult, Gender, Locale, MatchTier

logger = logging.getLogger(__name__)

# Threshold comparisons are done on rounded scores so 0.5 + 0.2 lands on 0.7
_SCORE_PRECISION = 9


@dataclass
class ScoredMapping:
    mapping: ConditionMapping
    matched: int
    score: float


def score_mapping(mapping: ConditionMapping, selected: Iterable[str]) -> Optional[ScoredMapping]:
    """Score one mapping against the selected symptom ids; None when nothing overlaps."""
    selected_ids = set(selected)
    matched = sum(1 for symptom_id in mapping.symptoms if symptom_id in selected_ids)
    if matched == 0 or not mapping.symptoms:
        return None
    score = matched / len(mapping.symptoms) + matched * MATCH_COUNT_BONUS
    return ScoredMapping(mapping=mapping, matched=matched, score=score)


def match_tier(score: float) -> MatchTier:
    rounded = round(score, _SCORE_PRECISION)
    if rounded >= HIGH_MATCH_THRESHOLD:
        return MatchTier.HIGH
    if rounded >= MEDIUM_MATCH_THRESHOLD:
        return MatchTier.MEDIUM
    return MatchTier.LOW


def rank_mappings(
    selected: Iterable[str],
    mappings: Sequence[ConditionMapping] = CONDITION_MAPPINGS,
    limit: int = MAX_CONDITION_RESULTS,
) -> List[ScoredMapping]:
    """Score every mapping and return the best ``limit``, highest first."""
    selected_ids = set(selected)
    scored = [
        result for result in (score_mapping(mapping, selected_ids) for mapping in mappings)
        if result is not None
    ]
    # sorted() is stable, so equal scores keep the table's declaration order
    scored = sorted(scored, key=lambda item: item.score, reverse=True)
    return scored[:limit]


def resolve_category_name(category_id: str, locale: Locale, category_names: Optional[CategoryNames] = None) -> str:
    """Localized treatment category name, falling back to the raw id."""
    names = DEFAULT_CATEGORY_NAMES if category_names is None else category_names
    return names.get(category_id, {}).get(locale.value) or category_id


def build_result(scored: ScoredMapping, locale: Locale, category_names: Optional[CategoryNames] = None) -> ConditionResult:
    mapping = scored.mapping
    text = CONDITION_TEXTS.get(mapping.id)
    if text is None:
        logger.warning(f"No display text for condition '{mapping.id}', showing raw id")
        title, short_description = mapping.id, ""
    else:
        title, short_description = text.title.get(locale), text.short_description.get(locale)

    tier = match_tier(scored.score)
    return ConditionResult(
        condition_id=mapping.id,
        title=title,
        short_description=short_description,
        match_score=tier,
        category_id=mapping.category_id,
        category_name=resolve_category_name(mapping.category_id, locale, category_names),
        score=scored.score,
        match_label=match_tier_label(tier, locale),
    )


def match_conditions(
    symptom_ids: Iterable[str],
    locale: Locale,
    category_names: Optional[CategoryNames] = None,
    gender: Optional[Gender] = None,
    mappings: Sequence[ConditionMapping] = CONDITION_MAPPINGS,
) -> List[ConditionResult]:
    """
    Match selected symptoms to treatable conditions.

    Args:
        symptom_ids: Symptom ids the patient selected
        locale: Language of the returned display text
        category_names: Category id -> locale -> name lookup supplied by the host;
            defaults to the built-in treatment catalog
        gender: Pelvic branch the symptoms came from. Symptom ids are unique
            across vocabularies, so this is informational only.
        mappings: Condition table to score against

    Returns:
        At most MAX_CONDITION_RESULTS results, best match first. An empty list
        means no condition overlapped the selection.
    """
    ranked = rank_mappings(symptom_ids, mappings)
    results = [build_result(scored, locale, category_names) for scored in ranked]
    logger.debug(
        f"Matched {len(results)} condition(s) "
        f"(gender={gender.value if gender else None}): {[r.condition_id for r in results]}"
    )
    return results
