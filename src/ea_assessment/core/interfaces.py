"""Abstract interfaces (Protocol classes) for the EA assessment engine.

The scoring core never touches storage. The session layer depends on these
interfaces, not concrete implementations; concrete stores live in
``adapters/answer_store.py``.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable


@runtime_checkable
class IAnswerStore(Protocol):
    """Persistence collaborator for an in-progress answer set."""

    def save(self, answers: Mapping[str, str]) -> None:
        """Persist the complete answer set, replacing any previous one."""
        ...

    def load(self) -> dict[str, str] | None:
        """Return the last saved answer set, or None if nothing was saved."""
        ...
