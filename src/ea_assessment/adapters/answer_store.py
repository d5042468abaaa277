"""Answer store implementations of IAnswerStore.

InMemoryAnswerStore backs tests and embedded use. JsonFileAnswerStore keeps
the auto-save envelope ``{"savedDate": ..., "answers": {...}}`` in a file.
"""

from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from ea_assessment.observability import get_logger
from ea_assessment.schemas.answers import SavedAnswers
from ea_assessment.settings import Settings

logger = get_logger(__name__)


class AnswerStoreError(Exception):
    """Raised when a persisted answer set exists but cannot be read."""


class InMemoryAnswerStore:
    """Keeps the last saved answer set in process memory."""

    def __init__(self) -> None:
        self._saved: SavedAnswers | None = None

    def save(self, answers: Mapping[str, str]) -> None:
        self._saved = SavedAnswers(saved_date=datetime.now(timezone.utc), answers=dict(answers))

    def load(self) -> dict[str, str] | None:
        if self._saved is None:
            return None
        return dict(self._saved.answers)

    @property
    def saved_date(self) -> datetime | None:
        """Timestamp of the last save, None before the first save."""
        return self._saved.saved_date if self._saved else None


class JsonFileAnswerStore:
    """Persists the answer set as a JSON document on disk.

    Args:
        path: File to read and write. Parent directories are created on save.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def save(self, answers: Mapping[str, str]) -> None:
        """Write the answer set, overwriting the previous save.

        Args:
            answers: Question id -> selected answer label.
        """
        envelope = SavedAnswers(saved_date=datetime.now(timezone.utc), answers=dict(answers))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(envelope.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
        logger.info("Answers saved", path=str(self._path), answer_count=len(envelope.answers))

    def load(self) -> dict[str, str] | None:
        """Read the last saved answer set.

        Returns:
            The answers, or None when no file exists yet.

        Raises:
            AnswerStoreError: If the file exists but is not a valid envelope.
        """
        if not self._path.exists():
            return None
        try:
            envelope = SavedAnswers.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, ValidationError) as exc:
            raise AnswerStoreError(f"Corrupt answer file {self._path}: {exc}") from exc
        logger.info("Answers loaded", path=str(self._path), answer_count=len(envelope.answers))
        return dict(envelope.answers)


def get_answer_store(settings: Settings | None = None) -> JsonFileAnswerStore:
    """Build the auto-save store at the configured ``autosave_path``.

    Args:
        settings: Source of ``autosave_path``; defaults to the environment.
    """
    settings = settings or Settings()
    return JsonFileAnswerStore(settings.autosave_path)
