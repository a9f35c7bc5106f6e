import logging
from typing import List, Optional

import numpy as np

from core import config
from core.errors import NoJobsAvailableError
from core.job_record import as_job_records
from core.trait_vector import TraitVector, as_trait_vector
from inference.answer_converter import score_traits
from matching.genetic import genetic_algorithm
from models.job_match import JobMatch

"""
Matching orchestration layer.

This module validates inputs, resolves defaults and the random source,
and hands off to the genetic search. It does not contain scoring logic itself.
"""

logger = logging.getLogger(__name__)


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Independent generator per call. Falls back to GA_SEED, then to fresh entropy."""
    if seed is None:
        seed = config.get_ga_seed()
    elif seed < 0:
        raise ValueError(f"seed must be a non-negative integer, got {seed}")
    return np.random.default_rng(seed)


def match_jobs(
    person_traits,
    jobs,
    num_generations: Optional[int] = None,
    population_size: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> List[JobMatch]:
    """
    Entry point for matching.

    Returns up to 3 unique jobs ordered by the fitness of the individual
    they were found in. Raises NoJobsAvailableError on an empty catalog.
    """
    person = as_trait_vector(person_traits)
    catalog = as_job_records(jobs)

    if not catalog:
        raise NoJobsAvailableError("No jobs available to match against")

    if num_generations is None:
        num_generations = config.NUM_GENERATIONS
    if population_size is None:
        population_size = config.POPULATION_SIZE

    if num_generations < 0:
        raise ValueError(f"num_generations must be >= 0, got {num_generations}")
    if population_size < 1:
        raise ValueError(f"population_size must be >= 1, got {population_size}")

    if rng is None:
        rng = make_rng(seed)

    matches = genetic_algorithm(person, catalog, num_generations, population_size, rng)

    logger.info(
        "Matched %d jobs from a catalog of %d (%d generations, population %d)",
        len(matches),
        len(catalog),
        num_generations,
        population_size,
    )
    return matches


def find_suitable_jobs(
    answers,
    jobs,
    num_generations: Optional[int] = None,
    population_size: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    round_traits: Optional[bool] = None,
) -> List[JobMatch]:
    """
    Questionnaire answers in, best jobs out.

    Raises InsufficientTraitDataError before any matching when the answers
    carry no signal.
    """
    traits: TraitVector = score_traits(answers)

    if round_traits is None:
        round_traits = config.ROUND_PERSON_TRAITS
    if round_traits:
        traits = traits.rounded()

    return match_jobs(
        traits,
        jobs,
        num_generations=num_generations,
        population_size=population_size,
        rng=rng,
        seed=seed,
    )
