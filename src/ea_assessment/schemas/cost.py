"""Pydantic schemas for the cost model: NPV, TCO and business cases."""

from typing import Literal

from pydantic import Field

from ea_assessment.core.models import CompanySize, CostBand, TimelineRange
from ea_assessment.schemas.base import ResultModel

InvestmentDecision = Literal["Approve", "Review", "Defer"]


class NpvInput(ResultModel):
    """Cash flows for a net present value calculation.

    Attributes:
        initial_investment: Year-0 outlay.
        annual_benefits: Benefit per year, year 1 first.
        annual_costs: Ongoing cost per year, year 1 first. The shorter of
            the two lists is padded with zeros.
        discount_rate: Annual rate as a fraction, typically 0.08-0.12.
    """

    initial_investment: float
    annual_benefits: list[float] = Field(default_factory=list)
    annual_costs: list[float] = Field(default_factory=list)
    discount_rate: float = Field(gt=-1.0)


class TcoInput(ResultModel):
    """Cost lines for a total cost of ownership calculation."""

    initial_implementation: float
    annual_licenses: float = 0.0
    annual_support: float = 0.0
    annual_infrastructure: float = 0.0
    annual_staffing: float = 0.0
    years: int = Field(ge=0)


class BusinessCaseInput(ResultModel):
    """What a business case is generated from.

    Attributes:
        recommendation_title: Title of the recommendation being costed.
        company_size: Selects the column of the cost band matrix.
        cost_complexity: Selects the row of the cost band matrix.
        timeline: Implementation timeline, carried through unchanged.
        roi_model_key: Key into ROI_MODELS naming the benefit model.
        estimated_annual_benefit: Year-1 benefit; years 2 and 3 grow by
            20% and 40%.
    """

    recommendation_title: str
    company_size: CompanySize
    cost_complexity: CostBand
    timeline: TimelineRange
    roi_model_key: str
    estimated_annual_benefit: float


class BusinessCase(ResultModel):
    """Three-year financial case for one recommendation.

    The string fields are display-formatted; the ``*_amount``, ``roi_percentage``
    and ``payback_years`` fields carry the numbers behind them.
    """

    recommendation_title: str
    total_investment: str
    timeline: str
    year1_benefit: str
    year2_benefit: str
    year3_benefit: str
    cumulative_benefit: str
    roi: str
    payback_period: str
    npv: str
    recommendation: InvestmentDecision
    roi_model: str | None = None
    total_investment_amount: float
    npv_amount: int
    roi_percentage: float
    payback_years: float
