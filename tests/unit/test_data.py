"""
Unit tests for the static decision-tree tables.

These guard the invariants the conversation and scoring rely on: unique ids,
vocabulary sources matching each body area kind, and every mapped symptom
and category resolving.
"""

import pytest

from chatbot.data import (
    BODY_AREAS,
    CATEGORY_INDEX,
    CONDITION_MAPPINGS,
    CONDITION_TEXTS,
    DEFAULT_CATEGORY_NAMES,
    PELVIC_FEMALE,
    PELVIC_MALE,
    QUICK_ENTRIES,
    SYMPTOMS_BY_ID,
    find_body_area,
    find_condition_mapping,
    find_symptom,
    find_vocabulary,
)
from chatbot.types import BodyAreaKind, Gender


ALL_AREAS = QUICK_ENTRIES + BODY_AREAS


class TestBodyAreas:
    """Test body area and quick-entry tables."""

    def test_ids_unique(self):
        ids = [area.id for area in ALL_AREAS]
        assert len(ids) == len(set(ids))

    def test_display_order(self):
        assert [area.id for area in BODY_AREAS] == [
            "head_brain", "sleep", "pelvic", "legs", "knees", "feet", "abdomen", "chest",
        ]

    @pytest.mark.parametrize("area", ALL_AREAS, ids=lambda a: a.id)
    def test_vocabulary_source_matches_kind(self, area):
        if area.kind == BodyAreaKind.PELVIC:
            assert area.vocabulary is None
            assert set(area.branches) == {Gender.FEMALE, Gender.MALE}
            assert area.vocabulary_for() is None
        else:
            assert area.vocabulary is not None
            assert not area.branches
            assert area.vocabulary_for() is area.vocabulary

    def test_pelvic_branches(self):
        pelvic = find_body_area("pelvic")

        assert pelvic.vocabulary_for(Gender.FEMALE) is PELVIC_FEMALE
        assert pelvic.vocabulary_for(Gender.MALE) is PELVIC_MALE

    def test_quick_entry_names_its_condition(self):
        for entry in QUICK_ENTRIES:
            assert entry.kind == BodyAreaKind.DIRECT_ENTRY
            assert find_condition_mapping(entry.condition_id) is not None

    def test_labels_in_both_languages(self):
        for area in ALL_AREAS:
            assert area.label.en and area.label.zh_tw


class TestSymptoms:
    """Test symptom vocabularies."""

    def test_symptom_ids_unique_within_vocabulary(self):
        for area in BODY_AREAS:
            for vocabulary in [area.vocabulary, *area.branches.values()]:
                if vocabulary is None:
                    continue
                assert len(vocabulary.symptom_ids) == len(set(vocabulary.symptom_ids))

    def test_pelvic_vocabularies_disjoint(self):
        assert not set(PELVIC_FEMALE.symptom_ids) & set(PELVIC_MALE.symptom_ids)

    def test_vocabulary_lookup(self):
        assert find_vocabulary("pelvic_female") is PELVIC_FEMALE
        assert find_vocabulary("hemorrhoids").symptom_ids == ("hemorrhoid_bleeding", "hemorrhoid_pain")
        assert find_vocabulary(None) is None
        assert find_vocabulary("elbow") is None

    def test_emergency_messages_only_on_flagged_symptoms(self):
        for symptom in SYMPTOMS_BY_ID.values():
            if symptom.emergency_message is not None:
                assert symptom.is_emergency

    def test_find_symptom(self):
        assert find_symptom("knee_pain").label.en == "Chronic knee pain"
        assert find_symptom("missing") is None


class TestConditionMappings:
    """Test condition mappings and their display data."""

    def test_ids_unique(self):
        ids = [m.id for m in CONDITION_MAPPINGS]
        assert len(ids) == len(set(ids))

    def test_mapped_symptoms_mostly_exist(self):
        # avm lists a generic "headache" no vocabulary offers; it simply never matches
        unknown = {
            symptom_id
            for mapping in CONDITION_MAPPINGS
            for symptom_id in mapping.symptoms
            if symptom_id not in SYMPTOMS_BY_ID
        }
        assert unknown <= {"headache"}

    def test_every_mapping_has_text_and_category(self):
        for mapping in CONDITION_MAPPINGS:
            assert mapping.id in CONDITION_TEXTS
            assert mapping.category_id in DEFAULT_CATEGORY_NAMES
            assert mapping.category_id in CATEGORY_INDEX

    def test_category_index_follows_catalog_order(self):
        assert dict(CATEGORY_INDEX) == {
            "neurovascular": 0,
            "neuromodulation": 1,
            "urogenital": 2,
            "gastrointestinal": 3,
            "musculoskeletal": 4,
            "vascular": 5,
        }

    def test_default_category_names_keyed_by_locale_value(self):
        assert DEFAULT_CATEGORY_NAMES["vascular"]["en"] == "Vascular & Oncology Interventions"
        assert DEFAULT_CATEGORY_NAMES["vascular"]["zh-TW"] == "血管及腫瘤介入治療"
