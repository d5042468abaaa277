"""Maturity calculation engine.

Turns an answer set into maturity scores for components, layers and the
enterprise as a whole:

1. Every taxonomy component starts with an empty weighted accumulator.
2. Each answered question adds ``score x weight`` to the numerator and
   ``weight`` to the denominator of every component it affects.
3. Component score = numerator / denominator; components nobody scored are
   left out of the result rather than reported as zero.
4. Layer score = simple mean of its assessed component scores.
5. Overall score = simple mean of the assessed layer scores, so every layer
   counts equally however many of its components were assessed.

Scores are on the 1-5 answer scale and rounded half-up to one decimal.
Unknown answer labels and unknown component ids contribute nothing; the
calculator never raises for inconsistent reference data.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ea_assessment.core.models import Layer, Question
from ea_assessment.core.taxonomy import EA_LAYERS
from ea_assessment.observability import get_logger
from ea_assessment.schemas.maturity import (
    ComponentMaturity,
    LayerMaturity,
    MaturityComparison,
    MaturityInsight,
    MaturityLevel,
    MaturitySummary,
)

logger = get_logger(__name__)

NOT_ASSESSED_LABEL: str = "Not assessed"
NOT_ASSESSED_COLOR: str = "#E5E7EB"

# Maturity level boundary thresholds (inclusive lower bound), top down.
_MATURITY_THRESHOLDS: list[tuple[float, MaturityLevel]] = [
    (4.5, 5),
    (3.5, 4),
    (2.5, 3),
    (1.5, 2),
]

_MATURITY_LABELS: dict[int, str] = {
    1: "Initial (Critical attention needed)",
    2: "Developing (Significant gaps)",
    3: "Defined (On track)",
    4: "Managed (Above average)",
    5: "Optimized (Best-in-class)",
}

_MATURITY_COLORS: dict[int, str] = {
    1: "#FEE2E2",
    2: "#FED7AA",
    3: "#FEF3C7",
    4: "#D1FAE5",
    5: "#A7F3D0",
}


@dataclass
class _Accumulator:
    """Running weighted sum for one component."""

    name: str
    layer_id: int
    weighted_score: float = 0.0
    total_weight: float = 0.0


def round_score(value: float) -> float:
    """Round half-up to one decimal place (2.25 -> 2.3, never truncated)."""
    return math.floor(value * 10 + 0.5) / 10


def get_maturity_level(score: float) -> MaturityLevel:
    """Map a continuous 1-5 score to its integer maturity level.

    Bands: [4.5, 5] -> 5, [3.5, 4.5) -> 4, [2.5, 3.5) -> 3, [1.5, 2.5) -> 2,
    anything lower -> 1.
    """
    for threshold, level in _MATURITY_THRESHOLDS:
        if score >= threshold:
            return level
    return 1


def get_maturity_label(score: float) -> str:
    """Return the level label for a score, e.g. 'Defined (On track)'."""
    return _MATURITY_LABELS[get_maturity_level(score)]


def get_maturity_color(score: float) -> str:
    """Return the visual-map fill colour for a score."""
    return _MATURITY_COLORS[get_maturity_level(score)]


def _describe(score: float) -> tuple[MaturityLevel, str, str]:
    """Return (level, label, color), using the not-assessed values for zero."""
    if score > 0:
        return get_maturity_level(score), get_maturity_label(score), get_maturity_color(score)
    return 1, NOT_ASSESSED_LABEL, NOT_ASSESSED_COLOR


def calculate_maturity(
    answers: Mapping[str, str],
    questions: Sequence[Question],
    layers: Sequence[Layer] = EA_LAYERS,
) -> MaturitySummary:
    """Calculate maturity scores from an answer set.

    Pure function: the inputs are not modified and a fresh summary is
    returned on every call.

    Args:
        answers: Question id -> selected answer label. Absent ids are
            unanswered; ids that are not in ``questions`` are ignored.
        questions: The question bank to score against.
        layers: The layer/component taxonomy. Defaults to EA_LAYERS.

    Returns:
        MaturitySummary containing only assessed components and layers.
    """
    accumulators: dict[str, _Accumulator] = {}
    for layer in layers:
        for component in layer.components:
            accumulators[component.component_id] = _Accumulator(
                name=component.name,
                layer_id=layer.layer_id,
            )

    questions_answered = 0
    for question in questions:
        selected_label = answers.get(question.question_id)
        if not selected_label:
            continue
        questions_answered += 1

        answer = question.find_answer(selected_label)
        if answer is None:
            continue

        for component_id in question.affects_components:
            accumulator = accumulators.get(component_id)
            if accumulator is None:
                continue
            accumulator.weighted_score += answer.score * question.weight
            accumulator.total_weight += question.weight

    components_by_layer: dict[int, list[ComponentMaturity]] = {}
    for component_id, accumulator in accumulators.items():
        if accumulator.total_weight <= 0:
            continue
        raw_score = accumulator.weighted_score / accumulator.total_weight
        level, label, color = _describe(raw_score)
        components_by_layer.setdefault(accumulator.layer_id, []).append(
            ComponentMaturity(
                component_id=component_id,
                component_name=accumulator.name,
                maturity_score=round_score(raw_score),
                maturity_level=level,
                maturity_label=label,
                contributing_questions=int(math.floor(accumulator.total_weight + 0.5)),
                color=color,
            )
        )

    layer_maturities: list[LayerMaturity] = []
    for layer in layers:
        assessed = components_by_layer.get(layer.layer_id)
        if not assessed:
            continue
        raw_score = sum(c.maturity_score for c in assessed) / len(assessed)
        level, label, color = _describe(raw_score)
        layer_maturities.append(
            LayerMaturity(
                layer_id=layer.layer_id,
                layer_name=layer.name,
                maturity_score=round_score(raw_score),
                maturity_level=level,
                maturity_label=label,
                components=assessed,
                color=color,
            )
        )

    overall = (
        sum(layer.maturity_score for layer in layer_maturities) / len(layer_maturities)
        if layer_maturities
        else 0.0
    )
    overall_level, overall_label, _ = _describe(overall)
    total_questions = len(questions)
    completion = (
        int(math.floor(questions_answered / total_questions * 100 + 0.5)) if total_questions else 0
    )

    summary = MaturitySummary(
        overall_maturity_score=round_score(overall),
        overall_maturity_level=overall_level,
        overall_maturity_label=overall_label,
        layers=layer_maturities,
        questions_answered=questions_answered,
        total_questions=total_questions,
        completion_percentage=completion,
    )

    logger.debug(
        "Maturity calculated",
        overall_score=summary.overall_maturity_score,
        assessed_layers=len(layer_maturities),
        questions_answered=questions_answered,
        total_questions=total_questions,
    )
    return summary


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def get_maturity_insights(summary: MaturitySummary) -> list[MaturityInsight]:
    """Derive headline strengths, concerns and critical layers.

    Args:
        summary: Result of calculate_maturity().

    Returns:
        Insights in the order strength, concern, critical, then an
        'Assessment Incomplete' concern when completion is below 100%.
    """
    insights: list[MaturityInsight] = []

    strengths = [layer for layer in summary.layers if layer.maturity_score >= 4.0]
    if strengths:
        names = [layer.layer_name for layer in strengths]
        insights.append(
            MaturityInsight(
                type="strength",
                title=f"{len(strengths)} Strong {_plural(len(strengths), 'Layer', 'Layers')}",
                description=(
                    f"{', '.join(names)} {_plural(len(strengths), 'is', 'are')} "
                    "performing well with maturity scores of 4.0+"
                ),
                components=names,
            )
        )

    concerns = [layer for layer in summary.layers if 2.0 <= layer.maturity_score < 3.0]
    if concerns:
        names = [layer.layer_name for layer in concerns]
        count = len(concerns)
        insights.append(
            MaturityInsight(
                type="concern",
                title=(
                    f"{count} {_plural(count, 'Layer', 'Layers')} "
                    f"{_plural(count, 'Needs', 'Need')} Improvement"
                ),
                description=(
                    f"{', '.join(names)} {_plural(count, 'has', 'have')} "
                    "significant gaps that should be addressed"
                ),
                components=names,
            )
        )

    critical = [layer for layer in summary.layers if layer.maturity_score < 2.0]
    if critical:
        names = [layer.layer_name for layer in critical]
        count = len(critical)
        insights.append(
            MaturityInsight(
                type="critical",
                title=f"{count} Critical {_plural(count, 'Layer', 'Layers')}",
                description=(
                    f"{', '.join(names)} {_plural(count, 'requires', 'require')} "
                    "immediate attention with maturity below 2.0"
                ),
                components=names,
            )
        )

    if summary.completion_percentage < 100:
        insights.append(
            MaturityInsight(
                type="concern",
                title="Assessment Incomplete",
                description=(
                    f"Only {summary.completion_percentage}% of questions answered. "
                    "Complete the assessment for accurate maturity scoring."
                ),
                components=[],
            )
        )

    return insights


def compare_maturity(
    before: MaturitySummary,
    after: MaturitySummary,
) -> list[MaturityComparison]:
    """Compare two summaries layer by layer.

    Every layer assessed in ``before`` is reported. A layer missing from
    ``after`` is treated as unchanged.
    """
    after_by_id = {layer.layer_id: layer for layer in after.layers}
    comparisons: list[MaturityComparison] = []
    for before_layer in before.layers:
        after_layer = after_by_id.get(before_layer.layer_id)
        after_score = after_layer.maturity_score if after_layer else before_layer.maturity_score
        improvement = after_score - before_layer.maturity_score
        percentage_change = improvement / before_layer.maturity_score * 100
        comparisons.append(
            MaturityComparison(
                layer_name=before_layer.layer_name,
                before_score=before_layer.maturity_score,
                after_score=after_score,
                improvement=round_score(improvement),
                percentage_change=int(math.floor(percentage_change + 0.5)),
            )
        )
    return comparisons
