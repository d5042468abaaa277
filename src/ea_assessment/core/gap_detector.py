"""Gap detection engine.

Scans the answered questions for gap triggers and builds a prioritised,
deduplicated gap portfolio:

1. Resolve each selected answer; unknown labels are skipped.
2. Resolve each triggered gap id in the catalog; unknown ids are skipped.
3. The first trigger of a gap creates a DetectedGap, later triggers append
   their question id to ``triggered_by`` on that same gap.
4. Sort by priority score, descending. The sort is stable, so ties keep
   first-detection order.
5. Count gaps per priority band, take the top gaps, group gaps by layer
   (layers in ascending id order).
6. Roll up portfolio cost and expected ROI from the cost-band midpoints.

The result is rebuilt from scratch on every call. Nothing here raises for
malformed references.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any

from ea_assessment.core.formatting import format_currency
from ea_assessment.core.gap_rules import GAP_RULES_BY_ID
from ea_assessment.core.maturity import round_score
from ea_assessment.core.models import GapRule, PriorityBand, Question
from ea_assessment.core.recommendations import is_quick_win
from ea_assessment.core.taxonomy import LAYER_NAMES
from ea_assessment.observability import get_logger
from ea_assessment.schemas.gaps import (
    DetectedGap,
    GapAnalysisResult,
    GapFilter,
    LayerGapSummary,
)

logger = get_logger(__name__)

DEFAULT_TOP_GAPS: int = 10

# Remediation cost band -> dollar midpoint, medium company size.
COST_BAND_AMOUNTS: dict[int, int] = {
    1: 100_000,
    2: 300_000,
    3: 800_000,
    4: 2_000_000,
    5: 5_000_000,
}

# Expected return multiple on remediation spend, per priority band.
ROI_MULTIPLIERS: dict[str, float] = {
    "Critical": 3.5,
    "High": 3.0,
    "Medium": 2.5,
    "Low": 2.0,
}

_DEFAULT_ROI_MULTIPLIER: float = 2.0


def cost_band_amount(remediation_cost: int) -> int:
    """Return the dollar midpoint of a cost band; 0 for an unknown band."""
    return COST_BAND_AMOUNTS.get(remediation_cost, 0)


def total_cost_amount(gaps: Sequence[DetectedGap]) -> float:
    """Sum the cost-band midpoints of every gap.

    Gaps that would share a remediation project are still counted
    individually.
    """
    return float(sum(cost_band_amount(gap.remediation_cost) for gap in gaps))


def total_roi_amount(gaps: Sequence[DetectedGap]) -> float:
    """Sum each gap's cost-band midpoint times its priority-band ROI multiple."""
    return sum(
        cost_band_amount(gap.remediation_cost)
        * ROI_MULTIPLIERS.get(gap.priority_band, _DEFAULT_ROI_MULTIPLIER)
        for gap in gaps
    )


def estimate_total_cost(gaps: Sequence[DetectedGap]) -> str:
    """Return the formatted portfolio remediation cost."""
    return format_currency(total_cost_amount(gaps))


def estimate_total_roi(gaps: Sequence[DetectedGap]) -> str:
    """Return the formatted portfolio expected return."""
    return format_currency(total_roi_amount(gaps))


def detect_gaps(
    answers: Mapping[str, str],
    questions: Sequence[Question],
    gap_rules: Mapping[str, GapRule] = GAP_RULES_BY_ID,
    top_gaps_limit: int = DEFAULT_TOP_GAPS,
) -> GapAnalysisResult:
    """Detect gaps raised by an answer set.

    Args:
        answers: Question id -> selected answer label.
        questions: The question bank; detection iterates it in order.
        gap_rules: Gap id -> rule. Defaults to the built-in catalog.
        top_gaps_limit: How many of the highest-priority gaps populate
            ``top_gaps``.

    Returns:
        GapAnalysisResult with gaps sorted by priority score, descending.
    """
    detected: dict[str, DetectedGap] = {}

    for question in questions:
        selected_label = answers.get(question.question_id)
        if not selected_label:
            continue

        answer = question.find_answer(selected_label)
        if answer is None or not answer.triggers_gaps:
            continue

        for gap_id in answer.triggers_gaps:
            rule = gap_rules.get(gap_id)
            if rule is None:
                logger.debug(
                    "Skipping unknown gap id",
                    gap_id=gap_id,
                    question_id=question.question_id,
                )
                continue

            existing = detected.get(gap_id)
            if existing is not None:
                existing.triggered_by.append(question.question_id)
                existing.detection_confidence = "High"
            else:
                detected[gap_id] = DetectedGap.from_rule(rule, question.question_id)

    gaps = sorted(detected.values(), key=lambda gap: gap.priority_score, reverse=True)

    band_counts: dict[PriorityBand, int] = {"Critical": 0, "High": 0, "Medium": 0, "Low": 0}
    gaps_by_layer: dict[int, list[DetectedGap]] = {}
    for gap in gaps:
        band_counts[gap.priority_band] += 1
        gaps_by_layer.setdefault(gap.layer, []).append(gap)
    gaps_by_layer = dict(sorted(gaps_by_layer.items()))

    cost_amount = total_cost_amount(gaps)
    roi_amount = total_roi_amount(gaps)

    result = GapAnalysisResult(
        total_gaps=len(gaps),
        critical_gaps=band_counts["Critical"],
        high_gaps=band_counts["High"],
        medium_gaps=band_counts["Medium"],
        low_gaps=band_counts["Low"],
        gaps=gaps,
        top_gaps=gaps[:top_gaps_limit],
        gaps_by_layer=gaps_by_layer,
        total_estimated_cost=format_currency(cost_amount),
        total_expected_roi=format_currency(roi_amount),
        total_estimated_cost_amount=cost_amount,
        total_expected_roi_amount=roi_amount,
    )

    logger.debug(
        "Gap detection complete",
        total_gaps=result.total_gaps,
        critical_gaps=result.critical_gaps,
        total_estimated_cost=result.total_estimated_cost,
    )
    return result


def get_layer_gap_summary(
    gap_analysis: GapAnalysisResult,
    layer_names: Mapping[int, str] = LAYER_NAMES,
) -> list[LayerGapSummary]:
    """Summarise detected gaps per layer.

    Args:
        gap_analysis: Result of detect_gaps().
        layer_names: Layer id -> display name; missing ids render as 'Layer N'.

    Returns:
        One summary per layer with gaps, most critical gaps first.
    """
    summaries: list[LayerGapSummary] = []
    for layer_id, layer_gaps in gap_analysis.gaps_by_layer.items():
        ranked = sorted(layer_gaps, key=lambda gap: gap.priority_score, reverse=True)
        average_priority = sum(gap.priority_score for gap in ranked) / len(ranked)
        summaries.append(
            LayerGapSummary(
                layer_id=layer_id,
                layer_name=layer_names.get(layer_id, f"Layer {layer_id}"),
                total_gaps=len(ranked),
                critical_gaps=sum(1 for gap in ranked if gap.priority_band == "Critical"),
                average_priority=round_score(average_priority),
                top_gap=ranked[0] if ranked else None,
                estimated_cost=estimate_total_cost(ranked),
            )
        )
    summaries.sort(key=lambda summary: summary.critical_gaps, reverse=True)
    return summaries


def filter_gaps(gap_analysis: GapAnalysisResult, gap_filter: GapFilter) -> list[DetectedGap]:
    """Return the gaps matching every criterion set on gap_filter."""
    filtered = list(gap_analysis.gaps)

    if gap_filter.priority_bands:
        filtered = [gap for gap in filtered if gap.priority_band in gap_filter.priority_bands]

    if gap_filter.layers:
        filtered = [gap for gap in filtered if gap.layer in gap_filter.layers]

    if gap_filter.max_cost is not None:
        filtered = [gap for gap in filtered if gap.remediation_cost <= gap_filter.max_cost]

    if gap_filter.quick_wins_only:
        filtered = [gap for gap in filtered if is_quick_win(gap)]

    return filtered


def export_gap_analysis(
    gap_analysis: GapAnalysisResult,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    """Flatten a gap analysis into a JSON-ready structure for exporters.

    Args:
        gap_analysis: Result of detect_gaps().
        generated_at: Timestamp to stamp; defaults to now (UTC).

    Returns:
        Dict with generatedDate, summary and one flat row per gap.
    """
    stamp = generated_at or datetime.now(timezone.utc)
    return {
        "generatedDate": stamp.isoformat(),
        "summary": {
            "totalGaps": gap_analysis.total_gaps,
            "byPriority": {
                "critical": gap_analysis.critical_gaps,
                "high": gap_analysis.high_gaps,
                "medium": gap_analysis.medium_gaps,
                "low": gap_analysis.low_gaps,
            },
            "estimatedCost": gap_analysis.total_estimated_cost,
            "expectedROI": gap_analysis.total_expected_roi,
        },
        "gaps": [
            {
                "id": gap.gap_id,
                "description": gap.description,
                "priority": gap.priority_band,
                "priorityScore": gap.priority_score,
                "layer": gap.layer,
                "component": gap.component_id,
                "risk": gap.risk,
                "impact": gap.business_impact,
                "cost": gap.remediation_cost,
                "recommendation": gap.recommendation.title,
                "timeline": gap.recommendation.timeline,
                "estimatedCost": gap.recommendation.estimated_cost,
                "expectedROI": gap.recommendation.expected_roi,
            }
            for gap in gap_analysis.gaps
        ],
    }
