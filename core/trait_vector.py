import math
from numbers import Real


# RAMAK categories, in display order
TRAIT_CATEGORIES = [
    "Business",
    "GeneralCulture",
    "ArtsAndEntertainment",
    "Science",
    "Organization",
    "Service",
    "Outdoor",
    "Technology",
]

# Labels used on the questionnaire results screen
CATEGORY_LABELS = {
    "Business": "Business",
    "GeneralCulture": "General Culture",
    "ArtsAndEntertainment": "Arts and Entertainment",
    "Science": "Science",
    "Organization": "Organization",
    "Service": "Service",
    "Outdoor": "Outdoor",
    "Technology": "Technology",
}

_LABEL_TO_CATEGORY = {label: category for category, label in CATEGORY_LABELS.items()}


def _check_value(category, value):
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"Score for {category} must be numeric: {value!r}")
    return float(value)


def round_half_up(value: float) -> float:
    """Whole-number rounding with .5 going up, as stored user traits were rounded."""
    return float(math.floor(value + 0.5))


class TraitVector:
    """
    Standing on each of the 8 RAMAK categories, in percent.

    A person's vector comes out of the questionnaire and sums to ~100.
    A job's vector (its prerequisites) is authored and has no such constraint.
    Missing categories count as 0.
    """

    TRAIT_TYPES = TRAIT_CATEGORIES

    def __init__(self, scores=None):
        self.scores = {category: 0.0 for category in self.TRAIT_TYPES}

        if scores:
            for category, value in scores.items():
                self.set(category, value)

    def set(self, category, value):
        if category not in self.scores:
            raise ValueError(f"Invalid trait category: {category}")

        self.scores[category] = _check_value(category, value)

    def rounded(self):
        return TraitVector({category: round_half_up(value) for category, value in self.scores.items()})

    def total(self):
        return sum(self.scores.values())

    def to_dict(self):
        return dict(self.scores)

    def to_labels(self):
        return {CATEGORY_LABELS[category]: value for category, value in self.scores.items()}

    @classmethod
    def from_labels(cls, traits, round_values=False):
        """
        Build a vector from questionnaire output keyed by display label
        ("General Culture") or canonical key ("GeneralCulture").

        Unrecognised keys are dropped, matching how stored user traits were
        converted before matching.
        """
        vector = cls()
        for key, value in traits.items():
            category = _LABEL_TO_CATEGORY.get(key, key)
            if category not in vector.scores:
                continue
            value = _check_value(category, value)
            vector.scores[category] = round_half_up(value) if round_values else value
        return vector

    def __eq__(self, other):
        if not isinstance(other, TraitVector):
            return NotImplemented
        return self.scores == other.scores

    def __repr__(self):
        return f"TraitVector({self.scores!r})"


def as_trait_vector(value) -> TraitVector:
    if isinstance(value, TraitVector):
        return value
    if hasattr(value, "items"):
        return TraitVector(value)
    raise ValueError(f"Expected a TraitVector or a mapping of category scores, got {type(value).__name__}")
