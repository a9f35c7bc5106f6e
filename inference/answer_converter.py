import logging
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Sequence, Union

from core.errors import InsufficientTraitDataError
from core.trait_vector import TraitVector
from questionnaires.ramak import (
    ANSWER_POINTS,
    LEVEL_WEIGHTS,
    MAX_RAW_SCORE,
    MAX_WEIGHTED_SCORE,
    NUM_QUESTIONS,
    QUESTION_ASSIGNMENT,
)

logger = logging.getLogger(__name__)

AnswerSet = Union[Mapping[int, Optional[str]], Sequence[Optional[str]]]


@dataclass(frozen=True)
class TraitScore:
    total_raw_score: int
    total_weighted_score: int
    raw_score: float         # percent of MAX_RAW_SCORE
    weighted_score: float    # percent of MAX_WEIGHTED_SCORE


def _normalise_answers(answers: AnswerSet) -> Dict[int, str]:
    """
    Validate an answer set and return {question index: answer}.
    Unanswered questions (None) are dropped.
    """
    if isinstance(answers, Mapping):
        items = answers.items()
    elif isinstance(answers, Sequence) and not isinstance(answers, str):
        if len(answers) > NUM_QUESTIONS:
            raise ValueError(f"Expected at most {NUM_QUESTIONS} answers, got {len(answers)}")
        items = enumerate(answers)
    else:
        raise ValueError(f"Answers must be a mapping or a sequence, got {type(answers).__name__}")

    cleaned = {}
    for index, answer in items:
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"Question index must be an integer: {index!r}")
        if not 0 <= index < NUM_QUESTIONS:
            raise ValueError(f"Question index out of range 0-{NUM_QUESTIONS - 1}: {index}")
        if answer is None:
            continue
        if answer not in ANSWER_POINTS:
            raise ValueError(f"Invalid answer for question {index}: {answer!r}")
        cleaned[index] = answer

    return cleaned


def compute_trait_scores(answers: AnswerSet) -> Dict[str, TraitScore]:
    """
    Raw and level-weighted scores per category.

    Each category has 9 questions split over 3 levels. An answer is worth
    Yes=2, Unsure=1, No=0 raw points, multiplied by the level weight
    (3/2/1) for the weighted score. Missing answers contribute nothing.
    """
    cleaned = _normalise_answers(answers)

    scores = {}
    for category, levels in QUESTION_ASSIGNMENT.items():
        total_raw = 0
        total_weighted = 0

        for level, items in levels.items():
            for item in items:
                if item not in cleaned:
                    continue
                points = ANSWER_POINTS[cleaned[item]]
                total_raw += points
                total_weighted += points * LEVEL_WEIGHTS[level]

        scores[category] = TraitScore(
            total_raw_score=total_raw,
            total_weighted_score=total_weighted,
            raw_score=total_raw / MAX_RAW_SCORE * 100,
            weighted_score=total_weighted / MAX_WEIGHTED_SCORE * 100,
        )

    return scores


def overall_percentages(scores: Dict[str, TraitScore]) -> TraitVector:
    """Each category's share of the summed weighted scores, rounded to 2 places."""
    grand_total = sum(score.total_weighted_score for score in scores.values())

    if grand_total == 0:
        raise InsufficientTraitDataError(
            "Questionnaire answers carry no trait signal; the questionnaire must be retaken"
        )

    return TraitVector({
        category: round(score.total_weighted_score / grand_total * 100, 2)
        for category, score in scores.items()
    })


def score_traits(answers: AnswerSet) -> TraitVector:
    """
    Convert RAMAK answers to a trait vector of overall percentages.

    Raises InsufficientTraitDataError when no category scores anything.
    """
    scores = compute_trait_scores(answers)
    traits = overall_percentages(scores)
    logger.debug("Scored traits: %s", traits.scores)
    return traits
