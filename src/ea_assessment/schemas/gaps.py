"""Pydantic schemas for gap analysis and recommendation results."""

from typing import Literal

from pydantic import Field, computed_field

from ea_assessment.core.models import (
    GapRule,
    PriorityBand,
    calculate_priority_score,
    get_priority_band,
)
from ea_assessment.schemas.base import ResultModel

DetectionConfidence = Literal["High", "Medium", "Low"]


class RecommendationSchema(ResultModel):
    """Remediation payload copied from the gap rule."""

    title: str
    description: str
    suggested_vendors: list[str] = Field(default_factory=list)
    timeline: str
    estimated_cost: str
    expected_roi: str = Field(alias="expectedROI")


class DetectedGap(ResultModel):
    """A gap rule raised by one or more answers.

    priority_score and priority_band are computed from risk, business impact
    and remediation cost each time they are read.

    Attributes:
        gap_id: Catalog id (serialised as ``id``).
        triggered_by: Ids of the questions whose answers raised the gap,
            in question-bank order.
        detection_confidence: Always 'High' for detected gaps.
    """

    gap_id: str = Field(alias="id")
    description: str
    layer: int
    component_id: str
    risk: int
    business_impact: int
    remediation_cost: int
    recommendation: RecommendationSchema
    triggered_by: list[str] = Field(default_factory=list)
    detection_confidence: DetectionConfidence = "High"

    @computed_field(alias="priorityScore")  # type: ignore[prop-decorator]
    @property
    def priority_score(self) -> float:
        return calculate_priority_score(self.risk, self.business_impact, self.remediation_cost)

    @computed_field(alias="priorityBand")  # type: ignore[prop-decorator]
    @property
    def priority_band(self) -> PriorityBand:
        return get_priority_band(self.priority_score)

    @classmethod
    def from_rule(cls, rule: GapRule, question_id: str) -> "DetectedGap":
        """Create the detected gap for a rule's first trigger."""
        recommendation = rule.recommendation
        return cls(
            gap_id=rule.gap_id,
            description=rule.description,
            layer=rule.layer,
            component_id=rule.component_id,
            risk=rule.risk,
            business_impact=rule.business_impact,
            remediation_cost=rule.remediation_cost,
            recommendation=RecommendationSchema(
                title=recommendation.title,
                description=recommendation.description,
                suggested_vendors=list(recommendation.suggested_vendors),
                timeline=recommendation.timeline,
                estimated_cost=recommendation.estimated_cost,
                expected_roi=recommendation.expected_roi,
            ),
            triggered_by=[question_id],
            detection_confidence="High",
        )


class GapAnalysisResult(ResultModel):
    """Portfolio view of every detected gap.

    Attributes:
        gaps: All detected gaps, priority score descending.
        top_gaps: The first entries of ``gaps`` (10 by default).
        gaps_by_layer: Layer id -> gaps, in ascending layer id; layers
            without gaps are absent.
        total_estimated_cost: Summed cost-band midpoints, e.g. '$1.2M'.
        total_expected_roi: Summed ROI-weighted midpoints, e.g. '$3.9M'.
        total_estimated_cost_amount: Unformatted dollar sum behind
            total_estimated_cost.
        total_expected_roi_amount: Unformatted dollar sum behind
            total_expected_roi.
    """

    total_gaps: int
    critical_gaps: int
    high_gaps: int
    medium_gaps: int
    low_gaps: int
    gaps: list[DetectedGap] = Field(default_factory=list)
    top_gaps: list[DetectedGap] = Field(default_factory=list)
    gaps_by_layer: dict[int, list[DetectedGap]] = Field(default_factory=dict)
    total_estimated_cost: str
    total_expected_roi: str = Field(alias="totalExpectedROI")
    total_estimated_cost_amount: float = 0.0
    total_expected_roi_amount: float = Field(default=0.0, alias="totalExpectedROIAmount")


class PrioritizedRecommendation(ResultModel):
    """A ranked entry of the top-gap list."""

    rank: int
    gap: DetectedGap
    rationale: str
    quick_wins: bool


class LayerGapSummary(ResultModel):
    """Gap rollup for a single layer."""

    layer_id: int
    layer_name: str
    total_gaps: int
    critical_gaps: int
    average_priority: float
    top_gap: DetectedGap | None = None
    estimated_cost: str


class GapFilter(ResultModel):
    """Criteria for narrowing a gap list. Empty criteria match everything."""

    priority_bands: list[PriorityBand] = Field(default_factory=list)
    layers: list[int] = Field(default_factory=list)
    max_cost: int | None = Field(default=None, ge=1, le=5)
    quick_wins_only: bool = False
