"""Unit tests for recommendation prioritisation."""

import pytest

from ea_assessment.core.gap_detector import detect_gaps
from ea_assessment.core.gap_rules import GAP_RULES_BY_ID
from ea_assessment.core.questions import QUESTION_BANK
from ea_assessment.core.recommendations import (
    build_rationale,
    get_prioritized_recommendations,
    is_quick_win,
)
from ea_assessment.schemas.gaps import DetectedGap


class TestQuickWins:
    """Quick win = priority >= 5 and remediation cost <= 2."""

    def test_expensive_high_priority_gap_is_not_a_quick_win(
        self, make_detected_gap, analysis_of
    ) -> None:
        """Priority 6 at cost 3 fails the cost threshold."""
        gap = make_detected_gap("G-E", 6, 3, 3)
        assert gap.priority_score == 6.0

        recommendations = get_prioritized_recommendations(analysis_of([gap]))
        assert len(recommendations) == 1
        assert recommendations[0].quick_wins is False
        assert recommendations[0].rationale == "Priority Score: 6.0 (Risk: 6, Impact: 3, Cost: 3)"

    @pytest.mark.parametrize(
        "risk,impact,cost,expected",
        [
            (5, 1, 1, True),  # exactly 5.0 at cost 1
            (4, 4, 2, True),  # 8.0 at cost 2
            (2, 2, 1, False),  # 4.0 below threshold
            (5, 5, 3, False),  # 8.33 at cost 3
        ],
    )
    def test_thresholds(self, make_detected_gap, risk, impact, cost, expected) -> None:
        assert is_quick_win(make_detected_gap("G-Q", risk, impact, cost)) is expected

    def test_custom_thresholds(self, make_detected_gap, analysis_of) -> None:
        gap = make_detected_gap("G-E", 5, 4, 3)
        default = get_prioritized_recommendations(analysis_of([gap]))
        relaxed = get_prioritized_recommendations(analysis_of([gap]), quick_win_max_cost=3)
        assert default[0].quick_wins is False
        assert relaxed[0].quick_wins is True


class TestRationale:
    """Rationale text and qualifiers."""

    def test_critical_gap_gets_address_immediately(self, make_detected_gap) -> None:
        gap = make_detected_gap("G-C", 5, 5, 2)
        assert build_rationale(gap, quick_win=True) == (
            "Priority Score: 12.5 (Risk: 5, Impact: 5, Cost: 2). "
            "Critical priority - address immediately."
        )

    def test_high_quick_win_gets_quick_win_qualifier(self, make_detected_gap) -> None:
        gap = make_detected_gap("G-H", 3, 2, 1)
        assert build_rationale(gap, quick_win=True) == (
            "Priority Score: 6.0 (Risk: 3, Impact: 2, Cost: 1). "
            "Quick win - high impact, manageable cost."
        )

    def test_low_gap_has_breakdown_only(self, make_detected_gap) -> None:
        gap = make_detected_gap("G-L", 1, 1, 5)
        assert build_rationale(gap, quick_win=False) == "Priority Score: 0.2 (Risk: 1, Impact: 1, Cost: 5)"

    def test_tied_score_rounds_up(self) -> None:
        """G005 scores 5*5/4 = 6.25, printed as 6.3."""
        gap = DetectedGap.from_rule(GAP_RULES_BY_ID["G005"], "Q2.1")
        assert build_rationale(gap, quick_win=False) == "Priority Score: 6.3 (Risk: 5, Impact: 5, Cost: 4)"


class TestPrioritizedRecommendations:
    """Ranking over the top gaps of a full analysis."""

    def test_ranks_follow_top_gaps(self, worst_answers) -> None:
        analysis = detect_gaps(worst_answers, QUESTION_BANK)
        recommendations = get_prioritized_recommendations(analysis)

        assert [r.rank for r in recommendations] == list(range(1, 11))
        assert [r.gap.gap_id for r in recommendations] == [g.gap_id for g in analysis.top_gaps]

    def test_only_top_gaps_are_ranked(self, worst_answers) -> None:
        analysis = detect_gaps(worst_answers, QUESTION_BANK, top_gaps_limit=4)
        assert len(get_prioritized_recommendations(analysis)) == 4

    def test_no_gaps_no_recommendations(self) -> None:
        analysis = detect_gaps({}, QUESTION_BANK)
        assert get_prioritized_recommendations(analysis) == []

    def test_quick_win_flag_matches_predicate(self, worst_answers) -> None:
        analysis = detect_gaps(worst_answers, QUESTION_BANK)
        for recommendation in get_prioritized_recommendations(analysis):
            assert recommendation.quick_wins == is_quick_win(recommendation.gap)
