import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from core.job_record import JobRecord
from core.trait_vector import TraitVector
from matching.traits import match_percentage
from models.job_match import JobMatch

"""
Generational genetic search over triples of job-catalog indices.

An individual is a list of INDIVIDUAL_SIZE job indices; its fitness is the
average match percentage of those jobs against the person's traits.
All randomness comes from the numpy Generator passed in.
"""

logger = logging.getLogger(__name__)

INDIVIDUAL_SIZE = 3
ELITE_COUNT = 2
TOP_JOBS = 3

Individual = List[int]


@dataclass
class Evaluation:
    average_match: float
    details: List[JobMatch]


def initialize_population(size: int, num_jobs: int, rng: np.random.Generator) -> List[Individual]:
    """Uniform random indices, with replacement."""
    return [
        [int(index) for index in rng.integers(0, num_jobs, size=INDIVIDUAL_SIZE)]
        for _ in range(size)
    ]


def evaluate_individual(
    individual: Individual,
    person_traits: TraitVector,
    jobs: Sequence[JobRecord],
) -> Evaluation:
    details = []
    for index in individual:
        job = jobs[index]
        details.append(JobMatch(
            job=job.name,
            percentage=match_percentage(person_traits, job.prerequisites),
        ))

    total = sum(match.percentage for match in details)
    return Evaluation(average_match=total / len(individual), details=details)


def rank_population(
    population: List[Individual],
    person_traits: TraitVector,
    jobs: Sequence[JobRecord],
) -> List[Tuple[Individual, Evaluation]]:
    """
    Evaluate every individual once and sort best first.
    Individuals and their evaluations stay paired. Ties keep population order.
    """
    scored = [
        (individual, evaluate_individual(individual, person_traits, jobs))
        for individual in population
    ]
    return sorted(scored, key=lambda pair: pair[1].average_match, reverse=True)


def select_parents(
    ranked: List[Tuple[Individual, Evaluation]],
    rng: np.random.Generator,
) -> Tuple[Individual, Individual]:
    """
    Roulette wheel selection: chance proportional to fitness.

    Negative fitness gets no share of the wheel, so probabilities stay valid
    when match percentages go below zero (summing raw negative fitness would
    not). If nothing has a share, both parents are drawn uniformly.
    """
    weights = np.array([max(evaluation.average_match, 0.0) for _, evaluation in ranked])
    total = weights.sum()

    if total > 0:
        first, second = rng.choice(len(ranked), size=2, p=weights / total)
    else:
        logger.debug("Zero total fitness in population of %d, selecting parents uniformly", len(ranked))
        first, second = rng.integers(0, len(ranked), size=2)

    return ranked[int(first)][0], ranked[int(second)][0]


def crossover(
    parent1: Individual,
    parent2: Individual,
    rng: np.random.Generator,
) -> Tuple[Individual, Individual]:
    """One-point crossover. The cut keeps at least one gene from each parent."""
    point = int(rng.integers(1, len(parent1)))
    offspring1 = parent1[:point] + parent2[point:]
    offspring2 = parent2[:point] + parent1[point:]
    return offspring1, offspring2


def mutate(individual: Individual, num_jobs: int, rng: np.random.Generator) -> Individual:
    """Replace one random gene with a random job index, in place."""
    position = int(rng.integers(0, len(individual)))
    individual[position] = int(rng.integers(0, num_jobs))
    return individual


def next_generation(
    ranked: List[Tuple[Individual, Evaluation]],
    population_size: int,
    num_jobs: int,
    rng: np.random.Generator,
) -> List[Individual]:
    # Elites are carried over unchanged
    population = [list(individual) for individual, _ in ranked[:ELITE_COUNT]]

    while len(population) < population_size:
        parent1, parent2 = select_parents(ranked, rng)
        offspring1, offspring2 = crossover(parent1, parent2, rng)
        population.append(mutate(offspring1, num_jobs, rng))
        population.append(mutate(offspring2, num_jobs, rng))

    # Offspring come in pairs; an odd size would overshoot by one
    return population[:population_size]


def extract_top_jobs(ranked: List[Tuple[Individual, Evaluation]], limit: int = TOP_JOBS) -> List[JobMatch]:
    """Walk individuals best first and collect unique job names."""
    unique_jobs = []
    seen = set()

    for _, evaluation in ranked:
        for match in evaluation.details:
            if match.job in seen:
                continue
            seen.add(match.job)
            unique_jobs.append(match)
            if len(unique_jobs) == limit:
                return unique_jobs

    return unique_jobs


def genetic_algorithm(
    person_traits: TraitVector,
    jobs: Sequence[JobRecord],
    num_generations: int,
    population_size: int,
    rng: np.random.Generator,
) -> List[JobMatch]:
    """
    Run the search and return up to TOP_JOBS unique jobs, best individual first.

    The caller guarantees a non-empty catalog and a positive population size.
    """
    num_jobs = len(jobs)
    population = initialize_population(population_size, num_jobs, rng)

    for generation in range(num_generations):
        ranked = rank_population(population, person_traits, jobs)
        logger.debug(
            "Generation %d: best fitness %.3f",
            generation,
            ranked[0][1].average_match,
        )
        population = next_generation(ranked, population_size, num_jobs, rng)

    final_ranked = rank_population(population, person_traits, jobs)
    return extract_top_jobs(final_ranked)
