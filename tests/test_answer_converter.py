import pytest

from core.errors import InsufficientTraitDataError
from core.trait_vector import TRAIT_CATEGORIES
from inference.answer_converter import compute_trait_scores, score_traits
from questionnaires.ramak import NUM_QUESTIONS


def uniform_answers(answer: str) -> list:
    return [answer] * NUM_QUESTIONS


def test_all_yes_normalises_to_full_scores():
    scores = compute_trait_scores(uniform_answers("Yes"))

    assert set(scores) == set(TRAIT_CATEGORIES)
    for score in scores.values():
        assert score.total_raw_score == 18
        assert score.total_weighted_score == 36
        assert score.raw_score == 100
        assert score.weighted_score == 100


def test_all_yes_is_a_uniform_distribution():
    traits = score_traits(uniform_answers("Yes"))

    assert all(value == 12.5 for value in traits.scores.values())
    assert traits.total() == pytest.approx(100.0, abs=0.01)


@pytest.mark.parametrize("answer", ["Yes", "Unsure", "Y", "?"])
def test_any_uniform_non_zero_answer_gives_equal_shares(answer):
    traits = score_traits(uniform_answers(answer))

    assert traits.scores == {category: 12.5 for category in TRAIT_CATEGORIES}


def test_all_unsure_halves_the_raw_scores():
    scores = compute_trait_scores(uniform_answers("Unsure"))

    for score in scores.values():
        assert score.total_raw_score == 9
        assert score.total_weighted_score == 18
        assert score.raw_score == 50
        assert score.weighted_score == 50


@pytest.mark.parametrize("answers", [uniform_answers("No"), uniform_answers("N"), {}, [None] * NUM_QUESTIONS])
def test_no_signal_raises_insufficient_data(answers):
    with pytest.raises(InsufficientTraitDataError):
        score_traits(answers)


def test_level_weights_drive_the_share():
    # Business level 1 against Technology level 3
    answers = {9: "Yes", 45: "Yes", 54: "Yes", 5: "Yes", 14: "Yes", 61: "Yes"}
    traits = score_traits(answers)

    assert traits.scores["Business"] == 75.0
    assert traits.scores["Technology"] == 25.0
    assert traits.scores["Science"] == 0.0


def test_missing_answers_are_skipped():
    scores = compute_trait_scores({9: "Yes"})

    assert scores["Business"].total_raw_score == 2
    assert scores["Business"].total_weighted_score == 6
    assert scores["Business"].raw_score == pytest.approx(2 / 18 * 100)
    assert scores["Business"].weighted_score == pytest.approx(6 / 36 * 100)
    assert scores["Science"].total_weighted_score == 0


def test_question_shared_between_categories_counts_for_both():
    traits = score_traits({11: "Yes"})

    assert traits.scores["Organization"] == 50.0
    assert traits.scores["Service"] == 50.0


def test_unassigned_question_is_accepted_and_ignored():
    with pytest.raises(InsufficientTraitDataError):
        score_traits({6: "Yes", 26: "Yes"})


def test_percentages_are_rounded_to_two_places():
    # Business, Science and Technology level 1, one question each
    traits = score_traits({9: "Yes", 15: "Yes", 24: "Yes"})

    assert traits.scores["Business"] == 33.33
    assert traits.scores["Science"] == 33.33
    assert traits.scores["Technology"] == 33.33


@pytest.mark.parametrize("answers", [
    {72: "Yes"},
    {-1: "Yes"},
    {"9": "Yes"},
    {9: "Maybe"},
    ["Yes"] * (NUM_QUESTIONS + 1),
    "YYY",
])
def test_malformed_answers_fail_fast(answers):
    with pytest.raises(ValueError):
        compute_trait_scores(answers)
