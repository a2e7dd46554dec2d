# Area: Provider Tests
"""Tests for prompt construction."""

import pytest

from mindforge._provider.prompts import (
    CATEGORIES,
    build_question_prompt,
    category_name,
    difficulty_label,
    is_visual_category,
    thinking_budget_for,
)


class TestDifficultyLabel:
    """Tests for level → difficulty band."""

    @pytest.mark.parametrize("level,label", [
        (1, "Easy"), (5, "Easy"),
        (6, "Medium"), (10, "Medium"),
        (11, "Hard"), (20, "Hard"),
        (21, "Expert"), (30, "Expert"),
        (31, "Genius"), (500, "Genius"),
    ])
    def test_bands(self, level, label):
        assert difficulty_label(level) == label


class TestCategories:
    """Tests for category helpers."""

    def test_ten_categories(self):
        assert len(CATEGORIES) == 10

    def test_exactly_one_visual_category(self):
        assert [c for c in CATEGORIES if is_visual_category(c)] == [CATEGORIES[-1]]

    def test_category_name(self):
        assert category_name("Coding-Decoding") == "Coding-Decoding"
        assert category_name("Blood Relations") == "Blood"


class TestBuildQuestionPrompt:
    """Tests for build_question_prompt()."""

    def test_mentions_level_difficulty_and_category(self):
        prompt = build_question_prompt(12, "Direction Sense")
        assert "level 12" in prompt
        assert "Hard" in prompt
        assert "Category: Direction Sense" in prompt

    def test_text_category_asks_for_empty_svg(self):
        prompt = build_question_prompt(1, "Blood Relations")
        assert "Text puzzle mode" in prompt
        assert "Visual puzzle mode" not in prompt

    def test_visual_category_asks_for_svg(self):
        prompt = build_question_prompt(1, CATEGORIES[-1])
        assert "Visual puzzle mode" in prompt
        assert "<svg" in prompt

    def test_describes_response_shape(self):
        prompt = build_question_prompt(1, "Analogy")
        for key in ("questionText", "options", "correctAnswer", "explanation", "hint", "visualSVG"):
            assert key in prompt


class TestThinkingBudget:
    """Tests for thinking_budget_for()."""

    def test_text_puzzle_at_low_level_has_no_budget(self):
        assert thinking_budget_for(1, CATEGORIES[0]) == 0
        assert thinking_budget_for(15, CATEGORIES[0]) == 0

    def test_hard_levels_get_budget(self):
        assert thinking_budget_for(16, CATEGORIES[0]) == 1024

    def test_visual_puzzle_gets_budget_at_any_level(self):
        assert thinking_budget_for(1, CATEGORIES[-1]) == 1024
