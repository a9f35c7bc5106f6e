class MatchingError(Exception):
    """Base class for conditions the caller is expected to handle."""


class InsufficientTraitDataError(MatchingError):
    """
    The answers carry no signal (every weighted score is zero), so there is
    no trait distribution to match on. Callers should ask the user to
    (re)take the questionnaire.
    """


class NoJobsAvailableError(MatchingError):
    """The job catalog is empty, so there is nothing to match against."""
