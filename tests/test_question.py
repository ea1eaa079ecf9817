# Area: Question Tests
"""Tests for the shared Question core — shuffle lookups, reveal and compression."""

import random

import pytest

from hotseat_show._question.choices import Choice
from hotseat_show._question.question import Question, QuestionContent, make_question_list


CONTENT = QuestionContent(text="Pick one", choices=("w", "x", "y", "z"), category="Test")


class TestQuestionContent:
    """Tests for QuestionContent.from_json()."""

    def test_from_json(self):
        content = QuestionContent.from_json({"text": "Q", "choices": [1, 2, 3, 4], "category": "Num"})
        assert content.text == "Q"
        assert content.choices == ("1", "2", "3", "4")
        assert content.category == "Num"

    def test_category_optional(self):
        content = QuestionContent.from_json({"text": "Q", "choices": ["a", "b", "c", "d"]})
        assert content.category == ""

    def test_wrong_choice_count_raises(self):
        with pytest.raises(ValueError, match="exactly 4"):
            QuestionContent.from_json({"text": "Q", "choices": ["a", "b", "c"]})

    def test_make_question_list(self):
        entries = [{"text": "Q1", "choices": "abcd"}, {"text": "Q2", "choices": "efgh"}]
        contents = make_question_list(entries)
        assert [c.text for c in contents] == ["Q1", "Q2"]


class TestConstruction:
    """Tests for permutation checks and shuffling."""

    def test_defaults_to_identity_order(self):
        question = Question(CONTENT, shuffled_choices=[0, 1, 2, 3])
        assert question.ordered_choices == (Choice.A, Choice.B, Choice.C, Choice.D)

    def test_random_shuffle_is_a_permutation(self):
        question = Question(CONTENT, rng=random.Random(3))
        assert sorted(question.shuffled_choices) == [Choice.A, Choice.B, Choice.C, Choice.D]

    def test_rejects_non_permutation(self):
        with pytest.raises(ValueError, match="ordered_choices"):
            Question(CONTENT, ordered_choices=[0, 0, 1, 2])
        with pytest.raises(ValueError, match="shuffled_choices"):
            Question(CONTENT, shuffled_choices=[0, 1, 2])

    def test_nothing_revealed_initially(self):
        question = Question(CONTENT, rng=random.Random(1))
        assert not any(question.revealed_choices.values())
        assert question.start_time is None


class TestShuffleLookups:
    """Tests for mapping between presented positions and true rank."""

    def setup_method(self):
        # Slot D is shown first, slot A last
        self.question = Question(CONTENT, ordered_choices=[0, 1, 2, 3], shuffled_choices=[3, 2, 1, 0])

    def test_get_shuffled_choice(self):
        assert self.question.get_shuffled_choice(0) is Choice.D
        assert self.question.get_shuffled_choice(3) is Choice.A

    def test_get_ordered_index(self):
        assert self.question.get_ordered_index(Choice.A) == 3
        assert self.question.get_ordered_index(Choice.D) == 0

    def test_get_choice_text(self):
        assert self.question.get_choice_text(Choice.A) == "z"


class TestReveal:
    """Tests for reveal flags and the answer clock."""

    def test_reveal_in_presentation_order(self):
        question = Question(CONTENT, shuffled_choices=[2, 0, 3, 1])
        assert question.reveal_choice() is Choice.A
        assert question.reveal_choice() is Choice.B
        assert question.revealed_choices[Choice.A] is True
        assert question.revealed_choices[Choice.C] is False

    def test_reveal_past_last_returns_none(self):
        question = Question(CONTENT, shuffled_choices=[0, 1, 2, 3])
        question.reveal_all_choices()
        assert question.all_choices_revealed() is True
        assert question.reveal_choice() is None

    def test_start_time_set_once(self):
        question = Question(CONTENT, shuffled_choices=[0, 1, 2, 3])
        question.mark_start_time(10.0)
        question.mark_start_time(20.0)
        assert question.start_time == 10.0
        assert question.elapsed_since_start(12.5) == pytest.approx(2.5)

    def test_elapsed_none_before_start(self):
        question = Question(CONTENT, shuffled_choices=[0, 1, 2, 3])
        assert question.elapsed_since_start(5.0) is None


class TestCompression:
    """Tests for the client-safe projection."""

    def test_hidden_choices_are_none(self):
        question = Question(CONTENT, shuffled_choices=[1, 0, 2, 3])
        question.reveal_choice()
        compressed = question.to_compressed([])
        assert compressed["choices"] == ["x", None, None, None]
        assert compressed["text"] == "Pick one"
        assert compressed["category"] == "Test"

    def test_made_choices_skip_none(self):
        question = Question(CONTENT, shuffled_choices=[0, 1, 2, 3])
        assert question.to_compressed([None])["made_choices"] == []
        assert question.to_compressed([Choice.C, Choice.A])["made_choices"] == [2, 0]
