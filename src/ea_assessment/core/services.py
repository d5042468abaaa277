"""Service layer orchestrating an EA self-assessment session.

The session owns the mutable answer map and is the only validating
boundary: the scoring core stays permissive and pure. Every call to
``results()`` recomputes maturity, gaps, insights and recommendations from
scratch, so callers may invoke it after every single answer change.

Persistence goes through an injected ``IAnswerStore``; the core never
imports from the adapters layer.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ea_assessment.core.gap_detector import detect_gaps
from ea_assessment.core.interfaces import IAnswerStore
from ea_assessment.core.maturity import calculate_maturity, get_maturity_insights
from ea_assessment.core.models import Question
from ea_assessment.core.questions import QUESTION_BANK
from ea_assessment.core.recommendations import get_prioritized_recommendations
from ea_assessment.observability import configure_logging, get_logger, is_configured
from ea_assessment.schemas.gaps import GapAnalysisResult, PrioritizedRecommendation
from ea_assessment.schemas.maturity import MaturityInsight, MaturitySummary
from ea_assessment.settings import Settings

logger = get_logger(__name__)


class QuestionNotFoundError(Exception):
    """Raised when the question id is not in the session's question bank."""


class InvalidAnswerError(Exception):
    """Raised when the answer label is not one of the question's answers."""


class AnswerStoreNotConfiguredError(Exception):
    """Raised by load()/save() on a session created without a store."""


@dataclass(frozen=True)
class AssessmentResults:
    """Everything derived from one answer set.

    Attributes:
        maturity: Component, layer and overall maturity.
        gap_analysis: Detected gaps with cost and ROI rollups.
        insights: Headline strengths and concerns.
        recommendations: Ranked top gaps.
    """

    maturity: MaturitySummary
    gap_analysis: GapAnalysisResult
    insights: list[MaturityInsight]
    recommendations: list[PrioritizedRecommendation]


class AssessmentSession:
    """Holds one respondent's answers and derives results on demand.

    Args:
        questions: Question bank to validate and score against.
        store: Optional persistence collaborator for load()/save().
        settings: Tuning values (top gaps limit, quick-win thresholds).
            Defaults to a Settings instance built from the environment.
    """

    def __init__(
        self,
        questions: Sequence[Question] = QUESTION_BANK,
        store: IAnswerStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._questions = tuple(questions)
        self._questions_by_id = {question.question_id: question for question in self._questions}
        self._store = store
        self._settings = settings or Settings()
        if not is_configured():
            configure_logging(self._settings.log_level, self._settings.log_format)
        self._answers: dict[str, str] = {}

    @property
    def answers(self) -> dict[str, str]:
        """A copy of the current answer map."""
        return dict(self._answers)

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def is_complete(self) -> bool:
        """True once every question in the bank has an answer."""
        return all(question.question_id in self._answers for question in self._questions)

    @property
    def missing_required(self) -> list[str]:
        """Ids of required questions still unanswered, in bank order."""
        return [
            question.question_id
            for question in self._questions
            if question.is_required and question.question_id not in self._answers
        ]

    def answer_question(self, question_id: str, label: str) -> None:
        """Record or replace the answer to one question.

        Args:
            question_id: Id of a question in the session's bank.
            label: Label of one of that question's answers.

        Raises:
            QuestionNotFoundError: If question_id is not in the bank.
            InvalidAnswerError: If label is not an answer of the question.
        """
        question = self._questions_by_id.get(question_id)
        if question is None:
            raise QuestionNotFoundError(f"Question '{question_id}' not found in question bank")
        if question.find_answer(label) is None:
            raise InvalidAnswerError(
                f"'{label}' is not a valid answer for question '{question_id}'"
            )
        self._answers[question_id] = label
        logger.debug("Answer recorded", question_id=question_id, answered=len(self._answers))

    def replace_answers(self, answers: Mapping[str, str]) -> None:
        """Swap in a whole answer set without validation, as after a load."""
        self._answers = dict(answers)

    def reset(self) -> None:
        """Discard every answer."""
        self._answers = {}
        logger.info("Assessment reset")

    def results(self) -> AssessmentResults:
        """Recompute every derived view from the current answers."""
        maturity = calculate_maturity(self._answers, self._questions)
        gap_analysis = detect_gaps(
            self._answers,
            self._questions,
            top_gaps_limit=self._settings.top_gaps_limit,
        )
        recommendations = get_prioritized_recommendations(
            gap_analysis,
            quick_win_min_priority=self._settings.quick_win_min_priority,
            quick_win_max_cost=self._settings.quick_win_max_cost,
        )
        logger.info(
            "Assessment results computed",
            overall_score=maturity.overall_maturity_score,
            completion_percentage=maturity.completion_percentage,
            total_gaps=gap_analysis.total_gaps,
        )
        return AssessmentResults(
            maturity=maturity,
            gap_analysis=gap_analysis,
            insights=get_maturity_insights(maturity),
            recommendations=recommendations,
        )

    def save(self) -> None:
        """Persist the current answers through the injected store.

        Raises:
            AnswerStoreNotConfiguredError: If the session has no store.
        """
        self._require_store().save(dict(self._answers))

    def load(self) -> bool:
        """Replace the answers with the last saved set, if any.

        Returns:
            True if a saved set was restored, False if the store was empty
            (the current answers are then left untouched).

        Raises:
            AnswerStoreNotConfiguredError: If the session has no store.
        """
        saved = self._require_store().load()
        if saved is None:
            return False
        self.replace_answers(saved)
        logger.info("Answers restored", answered=len(self._answers))
        return True

    def _require_store(self) -> IAnswerStore:
        if self._store is None:
            raise AnswerStoreNotConfiguredError(
                "AssessmentSession was created without an answer store"
            )
        return self._store
