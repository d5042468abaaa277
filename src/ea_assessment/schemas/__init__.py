"""Pydantic result schemas for the EA maturity assessment engine."""

from ea_assessment.schemas.answers import SavedAnswers
from ea_assessment.schemas.cost import BusinessCase, BusinessCaseInput, NpvInput, TcoInput
from ea_assessment.schemas.gaps import (
    DetectedGap,
    GapAnalysisResult,
    GapFilter,
    LayerGapSummary,
    PrioritizedRecommendation,
    RecommendationSchema,
)
from ea_assessment.schemas.maturity import (
    ComponentMaturity,
    LayerMaturity,
    MaturityComparison,
    MaturityInsight,
    MaturitySummary,
)

__all__ = [
    "BusinessCase",
    "BusinessCaseInput",
    "ComponentMaturity",
    "DetectedGap",
    "GapAnalysisResult",
    "GapFilter",
    "LayerGapSummary",
    "LayerMaturity",
    "MaturityComparison",
    "MaturityInsight",
    "MaturitySummary",
    "NpvInput",
    "PrioritizedRecommendation",
    "RecommendationSchema",
    "SavedAnswers",
    "TcoInput",
]
