"""Unit tests for the cost model.

Tests cover:
- Fixed-decimal formatting with ties rounded up
- Cost band matrix lookups and range parsing
- Reference data consistency with the taxonomy
- NPV, payback, ROI and TCO calculators
- Business case figures and the Approve / Review / Defer boundaries
"""

import math

import pytest
from pydantic import ValidationError

from ea_assessment.core.cost_model import (
    COMPONENT_COST_ESTIMATES,
    COST_BAND_MATRIX,
    ROI_MODELS,
    TIMELINE_BANDS,
    calculate_npv,
    calculate_payback_period,
    calculate_roi,
    calculate_tco,
    cost_band_description,
    cost_estimate_statistics,
    generate_business_case,
    get_component_cost_estimate,
    get_cost_range,
    get_gap_cost_range,
    investment_decision,
    parse_average_cost,
)
from ea_assessment.core.formatting import to_fixed
from ea_assessment.core.gap_rules import GAP_RULES_BY_ID
from ea_assessment.core.taxonomy import COMPONENTS_BY_ID
from ea_assessment.schemas.cost import BusinessCaseInput, NpvInput, TcoInput


def _case(benefit: float, company_size: str = "Medium", complexity: str = "M", **overrides) -> BusinessCaseInput:
    fields = dict(
        recommendation_title="Deploy SSO and MFA",
        company_size=company_size,
        cost_complexity=complexity,
        timeline="3-6 months",
        roi_model_key="securityRiskAvoidance",
        estimated_annual_benefit=benefit,
    )
    fields.update(overrides)
    return BusinessCaseInput(**fields)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


class TestToFixed:
    @pytest.mark.parametrize(
        "value,digits,expected",
        [
            (6.25, 1, "6.3"),
            (2.5, 0, "3"),
            (0.125, 2, "0.13"),
            (1.005, 2, "1.00"),  # stored just below the tie
            (336.589, 0, "337"),
            (0.0, 1, "0.0"),
        ],
    )
    def test_values(self, value: float, digits: int, expected: str) -> None:
        assert to_fixed(value, digits) == expected


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class TestCostBandMatrix:
    """Complexity x company size ranges."""

    def test_lookup(self) -> None:
        assert get_cost_range("M", "Large") == "$400K-$1.2M"
        assert get_cost_range("S", "Small") == "$25K-$100K"
        assert get_cost_range("XXL", "Enterprise") == "$20M-$100M"

    def test_xxl_not_applicable_for_small(self) -> None:
        assert get_cost_range("XXL", "Small") == "N/A"

    @pytest.mark.parametrize("complexity,size", [("XXXL", "Medium"), ("M", "Huge")])
    def test_unknown_is_reported(self, complexity: str, size: str) -> None:
        assert get_cost_range(complexity, size) == "Unknown"

    def test_gap_cost_range(self) -> None:
        """G024 has remediation cost 2, the M band."""
        rule = GAP_RULES_BY_ID["G024"]
        assert get_gap_cost_range(rule.remediation_cost, "Enterprise") == "$800K-$2.4M"

    def test_descriptions_come_from_matrix(self) -> None:
        assert cost_band_description("M").startswith("Medium initiatives")
        assert cost_band_description("XXL").startswith("Enterprise transformation")
        assert cost_band_description("Z") == "Unknown"

    def test_every_band_present(self) -> None:
        assert [row.complexity for row in COST_BAND_MATRIX] == ["S", "M", "L", "XL", "XXL"]


class TestParseAverageCost:
    @pytest.mark.parametrize(
        "cost_range,expected",
        [
            ("$400K-$1.2M", 800_000),
            ("$25K-$100K", 62_500),
            ("$20M-$100M", 60_000_000),
            ("N/A", 0),
            ("Unknown", 0),
            ("$50K", 0),
        ],
    )
    def test_midpoint(self, cost_range: str, expected: float) -> None:
        assert parse_average_cost(cost_range) == pytest.approx(expected)


class TestReferenceData:
    """Estimates point at real components and ROI models."""

    def test_estimates_reference_known_components(self) -> None:
        for estimate in COMPONENT_COST_ESTIMATES:
            assert estimate.component_id in COMPONENTS_BY_ID

    def test_estimates_reference_known_roi_models(self) -> None:
        for estimate in COMPONENT_COST_ESTIMATES:
            assert estimate.roi_model in ROI_MODELS

    def test_component_lookup(self) -> None:
        estimate = get_component_cost_estimate("6.2")
        assert estimate is not None
        assert estimate.component_name == "IAM"
        assert estimate.cost_complexity == "M"
        assert get_component_cost_estimate("9.9") is None

    def test_timeline_bands_in_order(self) -> None:
        assert [band.range for band in TIMELINE_BANDS] == [
            "1-3 months", "3-6 months", "6-12 months", "12-18 months", "18-36 months",
        ]

    def test_statistics(self) -> None:
        stats = cost_estimate_statistics()
        assert stats["total_components"] == 16
        assert stats["by_complexity"] == {"S": 2, "M": 5, "L": 4, "XL": 3, "XXL": 2}
        assert stats["roi_models_count"] == 8
        assert stats["timeline_bands_count"] == 5


# ---------------------------------------------------------------------------
# Calculators
# ---------------------------------------------------------------------------


class TestCalculators:
    def test_npv_break_even(self) -> None:
        """1100 a year out at 10% is worth exactly the 1000 invested."""
        assert calculate_npv(NpvInput(initial_investment=1000, annual_benefits=[1100], discount_rate=0.1)) == 0

    def test_npv_pads_shorter_list(self) -> None:
        """-600 + (500 - 100) + (500 - 0) = 300 undiscounted."""
        npv_input = NpvInput(
            initial_investment=600, annual_benefits=[500, 500], annual_costs=[100], discount_rate=0.0
        )
        assert calculate_npv(npv_input) == 300

    def test_npv_rejects_rate_at_minus_one(self) -> None:
        with pytest.raises(ValidationError):
            NpvInput(initial_investment=1, discount_rate=-1.0)

    def test_payback(self) -> None:
        assert calculate_payback_period(400_000, 200_000) == 2.0
        assert calculate_payback_period(400_000, 0) == math.inf

    @pytest.mark.parametrize(
        "benefits,costs,expected",
        [(300, 100, 200.0), (100, 100, 0.0), (50, 100, -50.0), (0, 0, 0.0)],
    )
    def test_roi(self, benefits: float, costs: float, expected: float) -> None:
        assert calculate_roi(benefits, costs) == pytest.approx(expected)

    def test_roi_without_costs_is_infinite(self) -> None:
        assert calculate_roi(10, 0) == math.inf

    def test_tco(self) -> None:
        """100K + (10K + 5K + 2K + 3K) * 3 = 160K."""
        tco_input = TcoInput(
            initial_implementation=100_000,
            annual_licenses=10_000,
            annual_support=5_000,
            annual_infrastructure=2_000,
            annual_staffing=3_000,
            years=3,
        )
        assert calculate_tco(tco_input) == 160_000


# ---------------------------------------------------------------------------
# Business case
# ---------------------------------------------------------------------------


class TestBusinessCase:
    """Three-year case for a Medium company, M complexity ($200K-$600K)."""

    def test_figures(self) -> None:
        """Investment 400K, benefits 300K/360K/420K, maintenance 60K a year at 10%."""
        case = generate_business_case(_case(300_000))
        assert case.total_investment == "$400K"
        assert case.total_investment_amount == pytest.approx(400_000)
        assert case.year1_benefit == "$300K"
        assert case.year2_benefit == "$360K"
        assert case.year3_benefit == "$420K"
        assert case.cumulative_benefit == "$1.1M"
        assert case.npv_amount == 336_589
        assert case.npv == "$337K"
        assert case.roi == "170%"
        assert case.payback_period == "1.3 years"
        assert case.recommendation == "Approve"
        assert case.roi_model == "Security Breach Avoidance"
        assert case.timeline == "3-6 months"

    @pytest.mark.parametrize(
        "benefit,decision",
        [
            (300_000, "Approve"),  # payback 1.33
            (200_000, "Review"),  # payback exactly 2.0
            (190_000, "Review"),  # payback 2.1, NPV 11,796
            (100_000, "Defer"),  # NPV negative
        ],
    )
    def test_decision_boundaries(self, benefit: float, decision: str) -> None:
        assert generate_business_case(_case(benefit)).recommendation == decision

    @pytest.mark.parametrize(
        "npv,payback,decision",
        [
            (1, 1.99, "Approve"),
            (1, 2.0, "Review"),
            (1, 2.99, "Review"),
            (1, 3.0, "Defer"),
            (0, 0.5, "Defer"),
            (-1, 0.5, "Defer"),
        ],
    )
    def test_investment_decision(self, npv: float, payback: float, decision: str) -> None:
        assert investment_decision(npv, payback) == decision

    def test_not_applicable_range_has_no_investment(self) -> None:
        case = generate_business_case(_case(100_000, company_size="Small", complexity="XXL"))
        assert case.total_investment == "$0"
        assert case.roi == "N/A"

    def test_zero_benefit_never_pays_back(self) -> None:
        case = generate_business_case(_case(0))
        assert case.payback_period == "Never"
        assert case.recommendation == "Defer"

    def test_unknown_roi_model(self) -> None:
        assert generate_business_case(_case(300_000, roi_model_key="unknown")).roi_model is None

    def test_invalid_company_size_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _case(300_000, company_size="Huge")

    def test_camel_case_serialisation(self) -> None:
        payload = generate_business_case(_case(300_000)).model_dump(by_alias=True)
        assert {"recommendationTitle", "year1Benefit", "paybackPeriod", "npvAmount"} <= set(payload)
