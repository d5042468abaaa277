"""Pydantic schemas for maturity scoring results.

A MaturitySummary is a read-only snapshot recomputed from the answer set on
every call; it has no identity of its own.
"""

from typing import Literal

from pydantic import Field

from ea_assessment.schemas.base import ResultModel

MaturityLevel = Literal[1, 2, 3, 4, 5]


class ComponentMaturity(ResultModel):
    """Maturity of one assessed component.

    Attributes:
        component_id: Taxonomy component id (e.g., '3.4').
        component_name: Component display name.
        maturity_score: Weighted average answer score, rounded to 0.1.
        maturity_level: Integer band 1-5.
        maturity_label: Level label with its qualitative suffix.
        contributing_questions: Total weight of the answered questions
            scoring it, rounded half-up (two weight-1.0 answers -> 2, one
            weight-1.5 answer -> 2).
        color: Hex fill colour used by the visual map.
    """

    component_id: str
    component_name: str
    maturity_score: float
    maturity_level: MaturityLevel
    maturity_label: str
    contributing_questions: int
    color: str


class LayerMaturity(ResultModel):
    """Maturity of one layer: the simple mean of its assessed components."""

    layer_id: int
    layer_name: str
    maturity_score: float
    maturity_level: MaturityLevel
    maturity_label: str
    components: list[ComponentMaturity] = Field(default_factory=list)
    color: str


class MaturitySummary(ResultModel):
    """Per-component, per-layer and overall maturity plus completion counters."""

    overall_maturity_score: float
    overall_maturity_level: MaturityLevel
    overall_maturity_label: str
    layers: list[LayerMaturity] = Field(default_factory=list)
    questions_answered: int
    total_questions: int
    completion_percentage: int


class MaturityInsight(ResultModel):
    """A headline observation drawn from a maturity summary."""

    type: Literal["strength", "concern", "critical"]
    title: str
    description: str
    components: list[str] = Field(default_factory=list)


class MaturityComparison(ResultModel):
    """Before/after maturity of one layer."""

    layer_name: str
    before_score: float
    after_score: float
    improvement: float
    percentage_change: int
