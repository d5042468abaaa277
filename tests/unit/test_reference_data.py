"""Unit tests for the shipped taxonomy, question bank and gap catalog.

The engine tolerates inconsistent reference data at runtime; these tests
are where authoring mistakes are caught.
"""

import pytest

from ea_assessment.core.gap_rules import (
    GAP_RULES,
    GAP_RULES_BY_ID,
    gap_statistics,
    get_gap_by_id,
    get_gaps_by_component,
    get_gaps_by_layer,
    get_gaps_by_priority,
    get_top_gaps,
)
from ea_assessment.core.models import Answer, Question, get_cost_band
from ea_assessment.core.questions import (
    ALL_CATEGORIES,
    QUESTION_BANK,
    QUESTIONS_BY_CATEGORY,
    QUESTIONS_BY_ID,
)
from ea_assessment.core.taxonomy import (
    COMPONENTS_BY_ID,
    EA_LAYERS,
    TOTAL_COMPONENTS,
    TOTAL_LAYERS,
    get_layer_for_component,
)


class TestTaxonomy:
    """Ten layers and 109 components with stable ids."""

    def test_counts(self) -> None:
        assert TOTAL_LAYERS == 10
        assert TOTAL_COMPONENTS == 109

    def test_layer_ids_are_sequential(self) -> None:
        assert [layer.layer_id for layer in EA_LAYERS] == list(range(10))

    def test_components_per_layer(self) -> None:
        assert [len(layer.components) for layer in EA_LAYERS] == [
            10, 10, 10, 13, 10, 11, 14, 12, 9, 10,
        ]

    def test_component_ids_are_prefixed_by_layer(self) -> None:
        for layer in EA_LAYERS:
            for component in layer.components:
                assert component.component_id.split(".")[0] == str(layer.layer_id)

    def test_get_layer_for_component(self) -> None:
        assert get_layer_for_component("6.2") == 6
        assert get_layer_for_component("42.1") is None


class TestQuestionBank:
    """Question bank consistency with the taxonomy and the gap catalog."""

    def test_ids_unique(self) -> None:
        assert len(QUESTIONS_BY_ID) == len(QUESTION_BANK)

    def test_categories(self) -> None:
        assert len(ALL_CATEGORIES) == 9
        assert set(QUESTIONS_BY_CATEGORY) <= set(ALL_CATEGORIES)
        assert sum(len(qs) for qs in QUESTIONS_BY_CATEGORY.values()) == len(QUESTION_BANK)

    def test_affected_components_exist(self) -> None:
        for question in QUESTION_BANK:
            for component_id in question.affects_components:
                assert component_id in COMPONENTS_BY_ID, (question.question_id, component_id)

    def test_affects_mirrors_related_questions(self) -> None:
        """A component lists exactly the questions that score it."""
        from_questions: dict[str, set[str]] = {}
        for question in QUESTION_BANK:
            for component_id in question.affects_components:
                from_questions.setdefault(component_id, set()).add(question.question_id)
        for component_id, component in COMPONENTS_BY_ID.items():
            assert set(component.related_questions) == from_questions.get(component_id, set()), component_id

    def test_triggered_gaps_exist(self) -> None:
        for question in QUESTION_BANK:
            for answer in question.answers:
                for gap_id in answer.triggers_gaps:
                    assert gap_id in GAP_RULES_BY_ID, (question.question_id, gap_id)

    def test_every_gap_is_reachable(self) -> None:
        reachable = {
            gap_id
            for question in QUESTION_BANK
            for answer in question.answers
            for gap_id in answer.triggers_gaps
        }
        assert reachable == set(GAP_RULES_BY_ID)

    def test_weights_positive(self) -> None:
        assert all(question.weight > 0 for question in QUESTION_BANK)


class TestGapCatalog:
    """41 rules G001..G041 and the lookup helpers."""

    def test_ids(self) -> None:
        assert [rule.gap_id for rule in GAP_RULES] == [f"G{n:03d}" for n in range(1, 42)]

    def test_rule_components_belong_to_rule_layer(self) -> None:
        for rule in GAP_RULES:
            assert get_layer_for_component(rule.component_id) == rule.layer, rule.gap_id

    def test_lookup_helpers(self) -> None:
        assert get_gap_by_id("G024") is GAP_RULES_BY_ID["G024"]
        assert get_gap_by_id("G999") is None
        assert all(rule.layer == 6 for rule in get_gaps_by_layer(6))
        assert all(rule.component_id == "6.2" for rule in get_gaps_by_component("6.2"))
        assert all(rule.priority_band == "Critical" for rule in get_gaps_by_priority("Critical"))

    def test_top_gaps_sorted(self) -> None:
        top = get_top_gaps(5)
        assert len(top) == 5
        scores = [rule.priority_score for rule in top]
        assert scores == sorted(scores, reverse=True)

    def test_statistics(self) -> None:
        stats = gap_statistics()
        assert stats["total"] == 41
        assert sum(stats["by_priority"].values()) == 41
        assert sorted(stats["by_layer"]) == list(range(10))
        assert sum(stats["by_layer"].values()) == 41

    def test_cost_band(self) -> None:
        rule = GAP_RULES_BY_ID["G024"]
        assert rule.cost_band == "M"
        assert get_cost_band(rule.remediation_cost) == "M"

    @pytest.mark.parametrize("cost,band", [(1, "S"), (2, "M"), (3, "L"), (4, "XL"), (5, "XXL")])
    def test_get_cost_band(self, cost: int, band: str) -> None:
        assert get_cost_band(cost) == band

    def test_get_cost_band_out_of_range(self) -> None:
        assert get_cost_band(9) is None


class TestRecordValidation:
    """Out-of-domain reference data is rejected at construction."""

    @pytest.mark.parametrize("score", [0, 6])
    def test_answer_score_range(self, score: int) -> None:
        with pytest.raises(ValueError):
            Answer("Out of range", score)

    def test_non_positive_weight(self) -> None:
        with pytest.raises(ValueError):
            Question("Q-X", "Pain Points", "Weightless?", (Answer("Yes", 3),), (), weight=0)

    def test_duplicate_answer_labels(self) -> None:
        with pytest.raises(ValueError):
            Question("Q-X", "Pain Points", "Twice?", (Answer("Yes", 3), Answer("Yes", 4)), ())

    def test_gap_rule_range(self, make_rule) -> None:
        with pytest.raises(ValueError):
            make_rule("G-X", 6, 1, 1)
