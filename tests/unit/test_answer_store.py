"""Unit tests for the answer store adapters."""

import json

import pytest

from ea_assessment.adapters.answer_store import (
    AnswerStoreError,
    InMemoryAnswerStore,
    JsonFileAnswerStore,
    get_answer_store,
)
from ea_assessment.core.interfaces import IAnswerStore
from ea_assessment.settings import Settings


class TestInMemoryAnswerStore:
    def test_empty_store_loads_none(self) -> None:
        store = InMemoryAnswerStore()
        assert store.load() is None
        assert store.saved_date is None

    def test_round_trip_returns_copy(self) -> None:
        store = InMemoryAnswerStore()
        answers = {"Q7.1": "SSO for most apps with MFA"}
        store.save(answers)
        answers["Q7.2"] = "changed after save"

        loaded = store.load()
        assert loaded == {"Q7.1": "SSO for most apps with MFA"}
        assert store.saved_date is not None

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryAnswerStore(), IAnswerStore)


class TestJsonFileAnswerStore:
    """File-backed persistence in the savedDate/answers envelope."""

    def test_missing_file_loads_none(self, tmp_path) -> None:
        assert JsonFileAnswerStore(tmp_path / "absent.json").load() is None

    def test_save_writes_envelope(self, tmp_path) -> None:
        path = tmp_path / "nested" / "autosave.json"
        JsonFileAnswerStore(path).save({"Q2.1": "No documented strategy"})

        payload = json.loads(path.read_text(encoding="utf-8"))
        assert set(payload) == {"savedDate", "answers"}
        assert payload["answers"] == {"Q2.1": "No documented strategy"}

    def test_load_after_save(self, tmp_path) -> None:
        store = JsonFileAnswerStore(tmp_path / "autosave.json")
        store.save({"Q2.1": "No documented strategy", "Q7.1": "SSO for most apps with MFA"})
        assert store.load() == {
            "Q2.1": "No documented strategy",
            "Q7.1": "SSO for most apps with MFA",
        }

    def test_save_overwrites(self, tmp_path) -> None:
        store = JsonFileAnswerStore(tmp_path / "autosave.json")
        store.save({"Q2.1": "No documented strategy"})
        store.save({})
        assert store.load() == {}

    @pytest.mark.parametrize(
        "content",
        ["not json at all", '{"answers": {"Q2.1": "x"}}', '{"savedDate": "2026-01-01T00:00:00Z", "answers": 3}'],
    )
    def test_corrupt_file_raises(self, tmp_path, content: str) -> None:
        path = tmp_path / "autosave.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(AnswerStoreError):
            JsonFileAnswerStore(path).load()

    def test_undecodable_bytes_raise(self, tmp_path) -> None:
        """A file that is not UTF-8 is reported as corrupt, not as a decode error."""
        path = tmp_path / "autosave.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(AnswerStoreError):
            JsonFileAnswerStore(path).load()

    def test_satisfies_protocol(self, tmp_path) -> None:
        assert isinstance(JsonFileAnswerStore(tmp_path / "a.json"), IAnswerStore)


class TestGetAnswerStore:
    def test_uses_configured_autosave_path(self, tmp_path) -> None:
        path = tmp_path / "configured.json"
        store = get_answer_store(Settings(autosave_path=str(path)))
        assert store.path == path

    def test_round_trip_through_configured_store(self, tmp_path) -> None:
        settings = Settings(autosave_path=str(tmp_path / "configured.json"))
        get_answer_store(settings).save({"Q2.1": "No documented strategy"})
        assert get_answer_store(settings).load() == {"Q2.1": "No documented strategy"}
