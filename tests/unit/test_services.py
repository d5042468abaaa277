"""Unit tests for AssessmentSession.

Uses InMemoryAnswerStore as the persistence collaborator; file-backed
persistence is covered in test_answer_store.py.
"""

import pytest

from ea_assessment.adapters.answer_store import InMemoryAnswerStore
from ea_assessment.core.questions import QUESTION_BANK
from ea_assessment.core.services import (
    AnswerStoreNotConfiguredError,
    AssessmentSession,
    InvalidAnswerError,
    QuestionNotFoundError,
)
from ea_assessment.settings import Settings


@pytest.fixture()
def session() -> AssessmentSession:
    """A session on the shipped bank with an in-memory store."""
    return AssessmentSession(store=InMemoryAnswerStore(), settings=Settings())


class TestAnswerQuestion:
    """Validated upsert of single answers."""

    def test_records_answer(self, session: AssessmentSession) -> None:
        session.answer_question("Q7.1", "SSO for most apps with MFA")
        assert session.answers == {"Q7.1": "SSO for most apps with MFA"}

    def test_replaces_previous_answer(self, session: AssessmentSession) -> None:
        session.answer_question("Q7.1", "SSO for most apps with MFA")
        session.answer_question("Q7.1", "Zero Trust with continuous verification")
        assert session.answers == {"Q7.1": "Zero Trust with continuous verification"}

    def test_unknown_question_raises(self, session: AssessmentSession) -> None:
        with pytest.raises(QuestionNotFoundError):
            session.answer_question("Q99.9", "Anything")
        assert session.answers == {}

    def test_unknown_label_raises(self, session: AssessmentSession) -> None:
        with pytest.raises(InvalidAnswerError):
            session.answer_question("Q7.1", "Carrier pigeons")
        assert session.answers == {}

    def test_answers_property_is_a_copy(self, session: AssessmentSession) -> None:
        session.answer_question("Q7.1", "SSO for most apps with MFA")
        session.answers["Q7.2"] = "tampered"
        assert "Q7.2" not in session.answers


class TestProgress:
    """Completion and required-question tracking."""

    def test_new_session_is_incomplete(self, session: AssessmentSession) -> None:
        assert session.is_complete is False
        assert session.missing_required == [q.question_id for q in QUESTION_BANK if q.is_required]

    def test_complete_after_every_answer(self, session: AssessmentSession, best_answers) -> None:
        for question_id, label in best_answers.items():
            session.answer_question(question_id, label)
        assert session.is_complete is True
        assert session.missing_required == []

    def test_reset_clears_answers(self, session: AssessmentSession, best_answers) -> None:
        for question_id, label in best_answers.items():
            session.answer_question(question_id, label)
        session.reset()
        assert session.answers == {}
        assert session.is_complete is False


class TestResults:
    """results() recomputes every view from the current answers."""

    def test_empty_session(self, session: AssessmentSession) -> None:
        results = session.results()
        assert results.maturity.overall_maturity_score == 0
        assert results.gap_analysis.total_gaps == 0
        assert results.recommendations == []
        assert [i.title for i in results.insights] == ["Assessment Incomplete"]

    def test_worst_answers(self, session: AssessmentSession, worst_answers) -> None:
        for question_id, label in worst_answers.items():
            session.answer_question(question_id, label)
        results = session.results()

        assert results.maturity.completion_percentage == 100
        assert results.maturity.overall_maturity_score == 1.0
        assert results.gap_analysis.total_gaps > 10
        assert len(results.recommendations) == 10
        assert any(insight.type == "critical" for insight in results.insights)

    def test_results_follow_answer_changes(self, session: AssessmentSession) -> None:
        session.answer_question("Q7.1", "Separate passwords per system, no MFA")
        before = session.results()
        session.answer_question("Q7.1", "Zero Trust with continuous verification")
        after = session.results()
        assert before.gap_analysis.total_gaps == 3
        assert after.gap_analysis.total_gaps == 0

    def test_settings_drive_limits(self, worst_answers) -> None:
        session = AssessmentSession(settings=Settings(top_gaps_limit=5, quick_win_max_cost=5))
        for question_id, label in worst_answers.items():
            session.answer_question(question_id, label)
        results = session.results()
        assert len(results.gap_analysis.top_gaps) == 5
        assert len(results.recommendations) == 5
        assert all(
            r.quick_wins == (r.gap.priority_score >= 5.0) for r in results.recommendations
        )


class TestPersistence:
    """load()/save() through the injected store."""

    def test_save_then_load_in_new_session(self) -> None:
        store = InMemoryAnswerStore()
        first = AssessmentSession(store=store)
        first.answer_question("Q7.1", "SSO for most apps with MFA")
        first.save()

        second = AssessmentSession(store=store)
        assert second.load() is True
        assert second.answers == {"Q7.1": "SSO for most apps with MFA"}

    def test_load_from_empty_store_keeps_answers(self, session: AssessmentSession) -> None:
        session.answer_question("Q7.1", "SSO for most apps with MFA")
        assert session.load() is False
        assert session.answers == {"Q7.1": "SSO for most apps with MFA"}

    def test_load_replaces_answers_wholesale(self, session: AssessmentSession) -> None:
        session.answer_question("Q7.1", "SSO for most apps with MFA")
        session.save()
        session.answer_question("Q7.2", "EDR and segmented network")
        session.load()
        assert session.answers == {"Q7.1": "SSO for most apps with MFA"}

    def test_without_store(self) -> None:
        session = AssessmentSession()
        with pytest.raises(AnswerStoreNotConfiguredError):
            session.save()
        with pytest.raises(AnswerStoreNotConfiguredError):
            session.load()
