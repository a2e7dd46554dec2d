# Area: Engine Tests
"""Tests for QuestionLifecycle."""

import json

import pytest
from unittest.mock import Mock

from mindforge._engine.enums import QuestionPhase
from mindforge._engine.lifecycle import QuestionLifecycle
from mindforge._provider.client import MockLLMClient
from mindforge._provider.fallback import CONFIGURATION_FALLBACK, GENERATION_FALLBACK
from mindforge._provider.provider import QuestionProvider
from mindforge._shared.highscore_store import HIGH_SCORE_KEY, HighScoreStore
from mindforge._shared.database import KeyValueRepository
from mindforge.types import FailureKind, FetchResult, GameState


def make_payload(question_text="What comes next: 1, 2, 3, ...?", correct="4"):
    """Build a valid model reply."""
    return json.dumps({
        "category": "Series Completion",
        "questionText": question_text,
        "options": ["4", "5", "6", "7"],
        "correctAnswer": correct,
        "explanation": "Counting up by one.",
        "hint": "Add one.",
    })


class TestLifecycleBase:
    """Shared fixtures."""

    @pytest.fixture
    def store(self, tmp_path):
        return HighScoreStore(str(tmp_path / "test.db"))

    def create_lifecycle(self, store, responses):
        client = MockLLMClient(responses)
        return QuestionLifecycle(QuestionProvider(client), store), client


class TestStartup(TestLifecycleBase):
    """Tests for construction and start()."""

    def test_initial_state(self, store):
        """Lifecycle starts IDLE with a fresh GameState."""
        lifecycle, _ = self.create_lifecycle(store, [])

        assert lifecycle.phase == QuestionPhase.IDLE
        assert lifecycle.question is None
        assert lifecycle.game_state == GameState(1, 0, 0, 0)

    def test_stored_high_score_loaded(self, tmp_path):
        """A stored "120" becomes the initial high score."""
        db_path = str(tmp_path / "test.db")
        store = HighScoreStore(db_path)
        KeyValueRepository(db_path).put(HIGH_SCORE_KEY, "120")

        lifecycle = QuestionLifecycle(QuestionProvider(MockLLMClient()), store)

        assert lifecycle.game_state.high_score == 120

    def test_start_loads_level_one_question(self, store):
        """start() fetches a level 1 question and becomes READY."""
        lifecycle, client = self.create_lifecycle(store, [make_payload()])

        assert lifecycle.start() is True

        assert lifecycle.phase == QuestionPhase.READY
        assert lifecycle.question.correct_answer == "4"
        assert lifecycle.has_error is False
        assert "level 1" in client.prompts[0]

    def test_start_twice_is_rejected(self, store):
        lifecycle, client = self.create_lifecycle(store, [make_payload(), make_payload()])
        lifecycle.start()

        assert lifecycle.start() is False
        assert len(client.prompts) == 1

    def test_loading_flag_set_during_fetch(self, store):
        """is_loading is true while the provider call is in flight."""
        lifecycle = None
        seen = {}

        def request(level):
            seen["loading"] = lifecycle.is_loading
            seen["phase"] = lifecycle.phase
            seen["selected"] = lifecycle.select_option("4")
            return FetchResult.failed(FailureKind.TRANSPORT, "down")

        provider = Mock()
        provider.request_question.side_effect = request
        lifecycle = QuestionLifecycle(provider, store)
        lifecycle.start()

        assert seen == {"loading": True, "phase": QuestionPhase.LOADING, "selected": False}
        assert lifecycle.is_loading is False


class TestFallback(TestLifecycleBase):
    """Tests for fallback substitution."""

    def test_invalid_json_serves_fallback(self, store):
        lifecycle, _ = self.create_lifecycle(store, ["this is not json"])
        lifecycle.start()

        view = lifecycle.view()
        assert view.phase == QuestionPhase.READY
        assert view.question == GENERATION_FALLBACK
        assert view.has_error is True
        assert view.advisory
        assert "JSON" in view.failure_reason

    def test_missing_credential_serves_configuration_fallback(self, store):
        client = MockLLMClient(available=False)
        lifecycle = QuestionLifecycle(QuestionProvider(client), store)
        lifecycle.start()

        view = lifecycle.view()
        assert view.question == CONFIGURATION_FALLBACK
        assert view.has_error is True
        assert "API key" in view.advisory
        assert client.prompts == []

    def test_fallback_question_can_be_answered(self, store):
        """Errored does not block progress."""
        lifecycle, _ = self.create_lifecycle(store, [RuntimeError("boom"), make_payload()])
        lifecycle.start()

        assert lifecycle.select_option(GENERATION_FALLBACK.correct_answer) is True
        assert lifecycle.game_state.score == 10
        assert lifecycle.advance() is True
        assert lifecycle.has_error is False
        assert lifecycle.question.question_text.startswith("What comes next")


class TestSelectOption(TestLifecycleBase):
    """Tests for answering."""

    def test_correct_answer_scores(self, store):
        lifecycle, _ = self.create_lifecycle(store, [make_payload()])
        lifecycle.start()

        assert lifecycle.select_option("4") is True

        view = lifecycle.view()
        assert view.phase == QuestionPhase.ANSWERED
        assert view.selected_option == "4"
        assert view.answered_correctly is True
        assert view.points_awarded == 10
        assert view.game_state == GameState(2, 10, 1, 10)

    def test_wrong_answer_resets_streak(self, store):
        lifecycle, _ = self.create_lifecycle(store, [make_payload()])
        lifecycle.start()

        lifecycle.select_option("5")

        view = lifecycle.view()
        assert view.answered_correctly is False
        assert view.points_awarded == 0
        assert view.game_state == GameState(1, 0, 0, 0)

    def test_second_selection_is_noop(self, store):
        """Selecting twice gives the same state as selecting once."""
        lifecycle, _ = self.create_lifecycle(store, [make_payload()])
        lifecycle.start()
        lifecycle.select_option("4")
        after_first = lifecycle.view()

        assert lifecycle.select_option("4") is False
        assert lifecycle.select_option("5") is False
        assert lifecycle.view() == after_first

    def test_unknown_option_rejected(self, store):
        lifecycle, _ = self.create_lifecycle(store, [make_payload()])
        lifecycle.start()

        assert lifecycle.select_option("42") is False
        assert lifecycle.phase == QuestionPhase.READY

    def test_select_before_start_rejected(self, store):
        lifecycle, _ = self.create_lifecycle(store, [])
        assert lifecycle.select_option("4") is False


class TestHighScorePersistence(TestLifecycleBase):
    """Tests for the explicit high score save."""

    def test_new_high_score_written(self, store):
        lifecycle, _ = self.create_lifecycle(store, [make_payload()])
        lifecycle.start()
        lifecycle.select_option("4")

        assert store.read_high_score() == 10

    def test_store_written_only_when_high_score_increases(self):
        store = Mock()
        store.read_high_score.return_value = 100
        client = MockLLMClient([make_payload(), make_payload()])
        lifecycle = QuestionLifecycle(QuestionProvider(client), store)

        lifecycle.start()
        lifecycle.select_option("4")          # score 10 < 100
        lifecycle.advance()
        lifecycle.select_option("5")          # wrong

        store.write_high_score.assert_not_called()

    def test_writes_never_decrease(self):
        """Every write is above the value read at startup."""
        store = Mock()
        store.read_high_score.return_value = 5
        client = MockLLMClient([make_payload()] * 3)
        lifecycle = QuestionLifecycle(QuestionProvider(client), store)

        lifecycle.start()
        for _ in range(3):
            lifecycle.select_option("4")
            lifecycle.advance()

        written = [c.args[0] for c in store.write_high_score.call_args_list]
        assert written == [10, 35, 75]
        assert all(value > 5 for value in written)


class TestAdvance(TestLifecycleBase):
    """Tests for moving to the next question."""

    def test_advance_uses_current_level(self, store):
        lifecycle, client = self.create_lifecycle(store, [make_payload(), make_payload()])
        lifecycle.start()
        lifecycle.select_option("4")

        assert lifecycle.advance() is True
        assert "level 2" in client.prompts[1]
        assert lifecycle.phase == QuestionPhase.READY

    def test_advance_after_wrong_answer_keeps_level(self, store):
        lifecycle, client = self.create_lifecycle(store, [make_payload(), make_payload()])
        lifecycle.start()
        lifecycle.select_option("6")
        lifecycle.advance()

        assert "level 1" in client.prompts[1]

    def test_advance_clears_selection_and_hint(self, store):
        lifecycle, _ = self.create_lifecycle(store, [make_payload(), make_payload()])
        lifecycle.start()
        lifecycle.toggle_hint()
        lifecycle.select_option("4")
        lifecycle.advance()

        view = lifecycle.view()
        assert view.selected_option is None
        assert view.answered_correctly is None
        assert view.hint_shown is False
        assert view.has_error is False

    def test_advance_before_answer_rejected(self, store):
        lifecycle, client = self.create_lifecycle(store, [make_payload(), make_payload()])
        lifecycle.start()

        assert lifecycle.advance() is False
        assert len(client.prompts) == 1

    def test_advance_before_start_rejected(self, store):
        lifecycle, _ = self.create_lifecycle(store, [])
        assert lifecycle.advance() is False
        assert lifecycle.phase == QuestionPhase.IDLE


class TestHint(TestLifecycleBase):
    """Tests for the hint toggle."""

    def test_toggle_hint_in_ready(self, store):
        lifecycle, _ = self.create_lifecycle(store, [make_payload()])
        lifecycle.start()

        assert lifecycle.toggle_hint() is True
        assert lifecycle.view().hint_shown is True
        assert lifecycle.toggle_hint() is True
        assert lifecycle.view().hint_shown is False

    def test_toggle_hint_after_answer_rejected(self, store):
        lifecycle, _ = self.create_lifecycle(store, [make_payload()])
        lifecycle.start()
        lifecycle.select_option("4")

        assert lifecycle.toggle_hint() is False
