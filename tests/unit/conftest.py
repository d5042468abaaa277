"""Shared fixtures for the EA assessment unit tests.

Synthetic reference data keeps each scenario small and independent of the
shipped question bank; tests that exercise the shipped catalogs import them
directly.
"""

from collections.abc import Callable, Sequence

import pytest

from ea_assessment.core.models import Answer, Component, GapRule, Layer, Question, Recommendation
from ea_assessment.core.questions import QUESTION_BANK
from ea_assessment.schemas.gaps import DetectedGap, GapAnalysisResult, RecommendationSchema


@pytest.fixture()
def worst_answers() -> dict[str, str]:
    """The lowest-scoring answer of every question in the shipped bank."""
    return {q.question_id: min(q.answers, key=lambda a: a.score).label for q in QUESTION_BANK}


@pytest.fixture()
def best_answers() -> dict[str, str]:
    """The highest-scoring answer of every question in the shipped bank."""
    return {q.question_id: max(q.answers, key=lambda a: a.score).label for q in QUESTION_BANK}


@pytest.fixture()
def make_question() -> Callable[..., Question]:
    """Build a five-answer question labelled 'score-1' .. 'score-5'.

    Keyword ``triggers`` maps an answer score to the gap ids it raises.
    """

    def _make(
        question_id: str,
        affects: Sequence[str] = (),
        weight: float = 1.0,
        triggers: dict[int, Sequence[str]] | None = None,
    ) -> Question:
        triggers = triggers or {}
        return Question(
            question_id=question_id,
            category="Security & Compliance",
            text=f"Synthetic question {question_id}",
            answers=tuple(
                Answer(f"score-{score}", score, tuple(triggers.get(score, ())))
                for score in range(1, 6)
            ),
            affects_components=tuple(affects),
            weight=weight,
        )

    return _make


@pytest.fixture()
def make_rule() -> Callable[..., GapRule]:
    """Build a gap rule with a placeholder recommendation."""

    def _make(
        gap_id: str,
        risk: int,
        business_impact: int,
        remediation_cost: int,
        layer: int = 6,
        component_id: str = "6.2",
    ) -> GapRule:
        return GapRule(
            gap_id=gap_id,
            description=f"Synthetic gap {gap_id}",
            layer=layer,
            component_id=component_id,
            risk=risk,
            business_impact=business_impact,
            remediation_cost=remediation_cost,
            recommendation=Recommendation(
                title=f"Fix {gap_id}",
                description="Remediate the synthetic gap.",
                suggested_vendors=("Vendor A", "Vendor B"),
                timeline="3-6 months",
                estimated_cost="$100K-$200K",
                expected_roi="200% over 3 years",
            ),
        )

    return _make


@pytest.fixture()
def make_detected_gap() -> Callable[..., DetectedGap]:
    """Build a DetectedGap directly, bypassing catalog range validation."""

    def _make(
        gap_id: str,
        risk: int,
        business_impact: int,
        remediation_cost: int,
        layer: int = 6,
    ) -> DetectedGap:
        return DetectedGap(
            gap_id=gap_id,
            description=f"Synthetic gap {gap_id}",
            layer=layer,
            component_id=f"{layer}.1",
            risk=risk,
            business_impact=business_impact,
            remediation_cost=remediation_cost,
            recommendation=RecommendationSchema(
                title=f"Fix {gap_id}",
                description="Remediate the synthetic gap.",
                timeline="1-3 months",
                estimated_cost="$50K",
                expected_roi="150%",
            ),
            triggered_by=["Q0.1"],
        )

    return _make


@pytest.fixture()
def analysis_of() -> Callable[[Sequence[DetectedGap]], GapAnalysisResult]:
    """Wrap pre-sorted gaps in a GapAnalysisResult with every gap on top."""

    def _make(gaps: Sequence[DetectedGap]) -> GapAnalysisResult:
        return GapAnalysisResult(
            total_gaps=len(gaps),
            critical_gaps=0,
            high_gaps=0,
            medium_gaps=0,
            low_gaps=0,
            gaps=list(gaps),
            top_gaps=list(gaps),
            gaps_by_layer={},
            total_estimated_cost="$0",
            total_expected_roi="$0",
        )

    return _make


@pytest.fixture()
def small_layers() -> tuple[Layer, ...]:
    """Two layers: Alpha with three components, Beta with one."""
    return (
        Layer(
            layer_id=0,
            name="Alpha",
            description="First synthetic layer",
            components=(
                Component("0.1", "Alpha One"),
                Component("0.2", "Alpha Two"),
                Component("0.3", "Alpha Three"),
            ),
        ),
        Layer(
            layer_id=1,
            name="Beta",
            description="Second synthetic layer",
            components=(Component("1.1", "Beta One"),),
        ),
    )
