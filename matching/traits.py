from core.trait_vector import TraitVector, TRAIT_CATEGORIES


MAX_CATEGORY_DIFFERENCE = 100


def match_percentage(
    person_traits: TraitVector,
    job_traits: TraitVector,
) -> float:
    """
    Profile fit, in percent.

    Rule:
    - Penalize mismatch on every category
    - Exact match is best (100)
    - Not clamped: very distant vectors can score below 0
    """

    penalty = 0.0

    for category in TRAIT_CATEGORIES:
        penalty += abs(person_traits.scores.get(category, 0.0) - job_traits.scores.get(category, 0.0))

    max_penalty = len(TRAIT_CATEGORIES) * MAX_CATEGORY_DIFFERENCE
    return (1 - penalty / max_penalty) * 100
