"""Reference-data records for the EA maturity assessment.

The layer/component taxonomy, the question bank and the gap rule catalog are
static data loaded once and treated as immutable. They are modelled as frozen
dataclasses so the scoring and gap-detection functions can share them freely.

Priority score and band are derived from a gap rule's risk, business impact
and remediation cost on every read. They are never stored on the record.
"""

from dataclasses import dataclass, field
from typing import Literal

PriorityBand = Literal["Critical", "High", "Medium", "Low"]
CostBand = Literal["S", "M", "L", "XL", "XXL"]
CompanySize = Literal["Small", "Medium", "Large", "Enterprise"]
TimelineRange = Literal["1-3 months", "3-6 months", "6-12 months", "12-18 months", "18-36 months"]

QUESTION_CATEGORIES: tuple[str, ...] = (
    "Company Profile",
    "Strategic Drivers",
    "Applications & Systems",
    "Data & Analytics",
    "Integration",
    "Infrastructure & Cloud",
    "Security & Compliance",
    "DevOps & Delivery",
    "Pain Points",
)

# Inclusive lower bounds, checked from the top down.
_PRIORITY_THRESHOLDS: list[tuple[float, PriorityBand]] = [
    (8.0, "Critical"),
    (5.0, "High"),
    (3.0, "Medium"),
]

# Remediation cost 1..5 maps onto the S..XXL t-shirt bands.
_COST_BANDS: dict[int, CostBand] = {1: "S", 2: "M", 3: "L", 4: "XL", 5: "XXL"}


def _check_scale(name: str, value: int) -> None:
    if not (1 <= value <= 5):
        raise ValueError(f"{name} must be between 1 and 5, got {value!r}")


@dataclass(frozen=True)
class Answer:
    """One selectable answer to a question.

    Attributes:
        label: Answer text, unique within its question. Answer sets refer
            to the selected answer by this label.
        score: Maturity value 1-5.
        triggers_gaps: Gap rule ids raised when this answer is selected.
    """

    label: str
    score: int
    triggers_gaps: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_scale("score", self.score)


@dataclass(frozen=True)
class Question:
    """A questionnaire item.

    Attributes:
        question_id: Unique identifier (e.g., 'Q7.1').
        category: One of QUESTION_CATEGORIES.
        text: Question text presented to the respondent.
        answers: Ordered selectable answers.
        affects_components: Taxonomy component ids this question scores.
        weight: Relative weight in the component weighted average.
        is_required: Whether the questionnaire insists on an answer.
    """

    question_id: str
    category: str
    text: str
    answers: tuple[Answer, ...]
    affects_components: tuple[str, ...]
    weight: float = 1.0
    is_required: bool = False

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError(
                f"weight must be positive, got {self.weight!r} "
                f"for question {self.question_id!r}"
            )
        labels = [answer.label for answer in self.answers]
        if len(labels) != len(set(labels)):
            raise ValueError(f"duplicate answer labels in question {self.question_id!r}")

    def find_answer(self, label: str) -> Answer | None:
        """Resolve a selected label to its Answer.

        Returns None when no answer carries the label. Callers treat that as
        "question contributes nothing", never as an error.
        """
        for answer in self.answers:
            if answer.label == label:
                return answer
        return None


@dataclass(frozen=True)
class Component:
    """An EA component, e.g. '6.2 Privileged Access Management (PAM)'."""

    component_id: str
    name: str
    description: str = ""
    related_questions: tuple[str, ...] = ()


@dataclass(frozen=True)
class Layer:
    """One of the ten EA layers with its ordered components."""

    layer_id: int
    name: str
    description: str
    components: tuple[Component, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Recommendation:
    """Remediation advice attached to a gap rule."""

    title: str
    description: str
    suggested_vendors: tuple[str, ...]
    timeline: str
    estimated_cost: str
    expected_roi: str


@dataclass(frozen=True)
class GapRule:
    """A catalogued capability gap.

    Attributes:
        gap_id: Catalog identifier (e.g., 'G013').
        description: Short statement of the missing capability.
        layer: Layer id 0-9.
        component_id: Taxonomy component the gap belongs to.
        risk: 1 (low) to 5 (critical security/compliance exposure).
        business_impact: 1 (minor) to 5 (revenue/regulatory).
        remediation_cost: 1-5, the S..XXL cost band.
        recommendation: Remediation payload.
    """

    gap_id: str
    description: str
    layer: int
    component_id: str
    risk: int
    business_impact: int
    remediation_cost: int
    recommendation: Recommendation

    def __post_init__(self) -> None:
        _check_scale("risk", self.risk)
        _check_scale("business_impact", self.business_impact)
        _check_scale("remediation_cost", self.remediation_cost)

    @property
    def priority_score(self) -> float:
        return priority_score_of(self)

    @property
    def priority_band(self) -> PriorityBand:
        return priority_band_of(self)

    @property
    def cost_band(self) -> CostBand:
        return _COST_BANDS[self.remediation_cost]


def calculate_priority_score(risk: int, business_impact: int, remediation_cost: int) -> float:
    """Return (risk x business impact) / remediation cost."""
    return (risk * business_impact) / remediation_cost


def get_priority_band(score: float) -> PriorityBand:
    """Map a priority score to its band.

    Thresholds are inclusive: 8.0 is Critical, 5.0 is High, 3.0 is Medium.
    """
    for threshold, band in _PRIORITY_THRESHOLDS:
        if score >= threshold:
            return band
    return "Low"


def priority_score_of(gap: GapRule) -> float:
    """Derive the priority score of a gap rule (or anything shaped like one)."""
    return calculate_priority_score(gap.risk, gap.business_impact, gap.remediation_cost)


def priority_band_of(gap: GapRule) -> PriorityBand:
    """Derive the priority band of a gap rule (or anything shaped like one)."""
    return get_priority_band(priority_score_of(gap))


def get_cost_band(remediation_cost: int) -> CostBand | None:
    """Map a 1-5 remediation cost onto its S..XXL band; None when out of range."""
    return _COST_BANDS.get(remediation_cost)
