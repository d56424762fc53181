"""
Unit tests for symptom-to-condition scoring.

Covers the score formula, tier thresholds, ranking and tie order, the result
limit, display-text fallbacks, and property-based invariants over random
symptom selections.
"""

import pytest
from hypothesis import given, settings, strategies as st

from chatbot.data import CONDITION_MAPPINGS, SYMPTOMS_BY_ID
from chatbot.scoring import match_conditions, match_tier, rank_mappings, score_mapping
from chatbot.types import ConditionMapping, Gender, Locale, MatchTier


ALL_SYMPTOM_IDS = sorted(SYMPTOMS_BY_ID)


class TestScoreFormula:
    """Test the coverage-plus-bonus score."""

    def test_two_of_four_scores_point_seven(self):
        mapping = next(m for m in CONDITION_MAPPINGS if m.id == "knee_arthritis")
        scored = score_mapping(mapping, {"knee_pain", "knee_stiffness"})

        assert scored is not None
        assert scored.matched == 2
        assert scored.score == pytest.approx(0.7)

    def test_one_of_three_scores_point_four_three(self):
        mapping = next(m for m in CONDITION_MAPPINGS if m.id == "uterine_fibroids")
        scored = score_mapping(mapping, {"heavy_periods"})

        assert scored is not None
        assert scored.score == pytest.approx(1 / 3 + 0.1)

    def test_full_coverage_gets_count_bonus(self):
        mapping = next(m for m in CONDITION_MAPPINGS if m.id == "hemorrhoids")
        scored = score_mapping(mapping, {"hemorrhoid_bleeding", "hemorrhoid_pain"})

        assert scored is not None
        assert scored.score == pytest.approx(1.2)

    def test_no_overlap_returns_none(self):
        mapping = next(m for m in CONDITION_MAPPINGS if m.id == "knee_arthritis")
        assert score_mapping(mapping, {"heel_pain"}) is None

    def test_small_mapping_can_outrank_larger_one(self):
        """Matching 1 of 2 (0.6) beats matching 1 of 5 (0.3)."""
        small = ConditionMapping("small", "vascular", ("a", "b"), ())
        large = ConditionMapping("large", "vascular", ("a", "c", "d", "e", "f"), ())

        ranked = rank_mappings({"a"}, mappings=(large, small))

        assert [r.mapping.id for r in ranked] == ["small", "large"]
        assert ranked[0].score == pytest.approx(0.6)
        assert ranked[1].score == pytest.approx(0.3)


class TestMatchTier:
    """Test tier thresholds."""

    @pytest.mark.parametrize("score,expected", [
        (1.2, MatchTier.HIGH),
        (0.7, MatchTier.HIGH),
        (0.5 + 0.2, MatchTier.HIGH),
        (0.69, MatchTier.MEDIUM),
        (0.4, MatchTier.MEDIUM),
        (0.39, MatchTier.LOW),
        (0.3, MatchTier.LOW),
    ])
    def test_thresholds(self, score, expected):
        assert match_tier(score) == expected


class TestMatchConditions:
    """Test the public matching function."""

    def test_knee_scenario_is_high_and_top(self):
        results = match_conditions(["knee_pain", "knee_stiffness"], Locale.EN)

        assert results[0].condition_id == "knee_arthritis"
        assert results[0].match_score == MatchTier.HIGH
        assert results[0].score == pytest.approx(0.7)
        assert results[0].title == "Genicular Artery Embolization"
        assert results[0].category_id == "musculoskeletal"
        assert results[0].category_name == "Musculoskeletal Interventions"

    def test_heavy_periods_is_medium(self):
        results = match_conditions(["heavy_periods"], Locale.EN, gender=Gender.FEMALE)

        assert [r.condition_id for r in results] == ["uterine_fibroids"]
        assert results[0].match_score == MatchTier.MEDIUM
        assert results[0].score == pytest.approx(0.4333, abs=1e-3)

    def test_hemorrhoid_scenario_is_high(self):
        results = match_conditions(["hemorrhoid_bleeding", "hemorrhoid_pain"], Locale.EN)

        assert results[0].condition_id == "hemorrhoids"
        assert results[0].match_score == MatchTier.HIGH

    def test_single_symptom_of_large_mapping_is_low(self):
        results = match_conditions(["loud_snoring"], Locale.EN)

        assert [r.condition_id for r in results] == ["sleep_apnea"]
        assert results[0].match_score == MatchTier.LOW

    def test_unmapped_symptom_gives_empty_result(self):
        assert match_conditions(["chest_pain"], Locale.EN) == []
        assert match_conditions(["not_a_symptom"], Locale.EN) == []
        assert match_conditions([], Locale.EN) == []

    def test_ties_keep_declaration_order(self):
        """vision_problems: carotid 0.433, then cerebral_aneurysm and acute_stroke tie at 0.35."""
        results = match_conditions(["vision_problems"], Locale.EN)

        assert [r.condition_id for r in results] == ["carotid_stenosis", "cerebral_aneurysm", "acute_stroke"]
        assert results[1].score == pytest.approx(results[2].score)

    def test_results_capped_at_three(self):
        results = match_conditions(["balance_issues", "confusion", "severe_headache"], Locale.EN)

        # csdh 1.3, acute_stroke 0.7, dbs 0.7 (tie, declared later), avm and cerebral_aneurysm cut
        assert [r.condition_id for r in results] == ["csdh", "acute_stroke", "dbs"]

    def test_traditional_chinese_text(self):
        results = match_conditions(["knee_pain"], Locale.ZH_TW)

        assert results[0].title == "膝動脈栓塞術"
        assert results[0].category_name == "肌肉骨骼介入治療"
        assert results[0].match_label == "可能相關"

    @pytest.mark.parametrize("symptom_ids,label", [
        (["knee_pain", "knee_stiffness"], "High Match"),
        (["heavy_periods"], "Possible Match"),
        (["loud_snoring"], "May be related"),
    ])
    def test_tier_labels(self, symptom_ids, label):
        assert match_conditions(symptom_ids, Locale.EN)[0].match_label == label

    def test_custom_category_names(self):
        names = {"musculoskeletal": {"en": "Joints & Bones", "zh-TW": "關節及骨骼"}}

        en = match_conditions(["knee_pain"], Locale.EN, category_names=names)
        zh = match_conditions(["knee_pain"], Locale.ZH_TW, category_names=names)

        assert en[0].category_name == "Joints & Bones"
        assert zh[0].category_name == "關節及骨骼"

    def test_missing_category_name_falls_back_to_id(self):
        results = match_conditions(["knee_pain"], Locale.EN, category_names={})
        assert results[0].category_name == "musculoskeletal"

    def test_unknown_condition_text_falls_back_to_raw_id(self):
        mapping = ConditionMapping("mystery_condition", "vascular", ("knee_pain",), ("knees",))

        results = match_conditions(["knee_pain"], Locale.EN, mappings=(mapping,))

        assert results[0].title == "mystery_condition"
        assert results[0].short_description == ""


class TestScoringProperties:
    """Property-based invariants over arbitrary symptom selections."""

    @settings(max_examples=200)
    @given(st.sets(st.sampled_from(ALL_SYMPTOM_IDS)))
    def test_zero_overlap_never_returned(self, selected):
        results = match_conditions(selected, Locale.EN)
        mappings = {m.id: m for m in CONDITION_MAPPINGS}

        for result in results:
            assert set(mappings[result.condition_id].symptoms) & selected

    @settings(max_examples=200)
    @given(st.sets(st.sampled_from(ALL_SYMPTOM_IDS)))
    def test_sorted_descending_with_stable_ties(self, selected):
        results = match_conditions(selected, Locale.EN)
        order = [m.id for m in CONDITION_MAPPINGS]

        assert len(results) <= 3
        for earlier, later in zip(results, results[1:]):
            assert earlier.score >= later.score
            if earlier.score == later.score:
                assert order.index(earlier.condition_id) < order.index(later.condition_id)

    @settings(max_examples=200)
    @given(st.sets(st.sampled_from(ALL_SYMPTOM_IDS)))
    def test_returns_the_best_scores(self, selected):
        results = match_conditions(selected, Locale.EN)
        all_scores = sorted(
            (s.score for s in (score_mapping(m, selected) for m in CONDITION_MAPPINGS) if s is not None),
            reverse=True,
        )

        assert [r.score for r in results] == all_scores[:3]
        assert (len(results) == 0) == (len(all_scores) == 0)
