"""Recommendation prioritisation over the top detected gaps.

Ranks are the 1-based positions in ``GapAnalysisResult.top_gaps``; the list is
already sorted by priority, so no re-sort happens here.
"""

from ea_assessment.core.formatting import to_fixed
from ea_assessment.schemas.gaps import DetectedGap, GapAnalysisResult, PrioritizedRecommendation

QUICK_WIN_MIN_PRIORITY: float = 5.0
QUICK_WIN_MAX_COST: int = 2

_CRITICAL_QUALIFIER = "Critical priority - address immediately."
_QUICK_WIN_QUALIFIER = "Quick win - high impact, manageable cost."


def is_quick_win(
    gap: DetectedGap,
    min_priority: float = QUICK_WIN_MIN_PRIORITY,
    max_cost: int = QUICK_WIN_MAX_COST,
) -> bool:
    """A quick win scores at least min_priority and costs at most max_cost."""
    return gap.priority_score >= min_priority and gap.remediation_cost <= max_cost


def build_rationale(gap: DetectedGap, quick_win: bool) -> str:
    """Explain a gap's ranking from its score breakdown.

    Critical gaps get the 'address immediately' qualifier; other quick wins
    get the quick-win qualifier; everything else gets the breakdown only.
    """
    rationale = (
        f"Priority Score: {to_fixed(gap.priority_score, 1)} "
        f"(Risk: {gap.risk}, Impact: {gap.business_impact}, Cost: {gap.remediation_cost})"
    )
    if gap.priority_band == "Critical":
        return f"{rationale}. {_CRITICAL_QUALIFIER}"
    if quick_win:
        return f"{rationale}. {_QUICK_WIN_QUALIFIER}"
    return rationale


def get_prioritized_recommendations(
    gap_analysis: GapAnalysisResult,
    quick_win_min_priority: float = QUICK_WIN_MIN_PRIORITY,
    quick_win_max_cost: int = QUICK_WIN_MAX_COST,
) -> list[PrioritizedRecommendation]:
    """Decorate the top gaps with rank, rationale and quick-win flag.

    Args:
        gap_analysis: Result of detect_gaps(). Only ``top_gaps`` is used.
        quick_win_min_priority: Minimum priority score of a quick win.
        quick_win_max_cost: Maximum remediation cost band of a quick win.

    Returns:
        One PrioritizedRecommendation per top gap, rank 1 first.
    """
    recommendations: list[PrioritizedRecommendation] = []
    for index, gap in enumerate(gap_analysis.top_gaps):
        quick_win = is_quick_win(gap, quick_win_min_priority, quick_win_max_cost)
        recommendations.append(
            PrioritizedRecommendation(
                rank=index + 1,
                gap=gap,
                rationale=build_rationale(gap, quick_win),
                quick_wins=quick_win,
            )
        )
    return recommendations
