"""
Score a saved RAMAK answer sheet and run the job matcher against a catalog.

Run from the project root:
    python -m scripts.rank_jobs --answers answers.json --catalog jobs.csv
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from core import config
from core.errors import InsufficientTraitDataError, NoJobsAvailableError
from core.trait_vector import CATEGORY_LABELS
from inference.answer_converter import compute_trait_scores, overall_percentages
from ingestion.read_job_catalog import load_job_catalog
from matching.engine import find_suitable_jobs


def load_answers(path: Path):
    """
    Answers file holds either a list of 72 answers, a {"index": answer}
    object, or either of those under an "answers" key.
    """
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict) and "answers" in data:
        data = data["answers"]

    if isinstance(data, dict):
        try:
            return {int(index): answer for index, answer in data.items()}
        except ValueError:
            raise ValueError(f"{path.name}: answer keys must be question indices")

    if isinstance(data, list):
        return data

    raise ValueError(f"{path.name}: expected a list or an object of answers")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Match RAMAK questionnaire answers to jobs")
    parser.add_argument("--answers", type=Path, required=True, help="JSON file of questionnaire answers")
    parser.add_argument("--catalog", type=Path, required=True, help="Job catalog (.csv or .json)")
    parser.add_argument("--generations", type=int, default=config.NUM_GENERATIONS)
    parser.add_argument("--population", type=int, default=config.POPULATION_SIZE)
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    parser.add_argument(
        "--no-round",
        action="store_true",
        help="Match on the exact percentages instead of whole numbers",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        log_level = config.get_log_level()
    except ValueError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    logging.basicConfig(level=log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        answers = load_answers(args.answers)
        scores = compute_trait_scores(answers)
        traits = overall_percentages(scores)
    except InsufficientTraitDataError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"[ERROR] Could not score answers: {e}", file=sys.stderr)
        return 1

    print("\n===== TRAITS =====\n")
    for category, score in scores.items():
        print(
            f"{CATEGORY_LABELS[category]:<24} "
            f"raw: {score.raw_score:6.2f}  "
            f"weighted: {score.weighted_score:6.2f}  "
            f"overall: {traits.scores[category]:6.2f}%"
        )

    # None defers to ROUND_PERSON_TRAITS
    round_traits = False if args.no_round else None

    try:
        catalog = load_job_catalog(args.catalog)
        matches = find_suitable_jobs(
            answers,
            catalog,
            num_generations=args.generations,
            population_size=args.population,
            seed=args.seed,
            round_traits=round_traits,
        )
    except NoJobsAvailableError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 3
    except (OSError, ValueError) as e:
        print(f"[ERROR] Could not match jobs: {e}", file=sys.stderr)
        return 1

    print("\n===== SUITABLE JOBS =====\n")
    for rank, match in enumerate(matches, start=1):
        print(f"{rank:3d}. {match.job}  |  {match.percentage:.2f}%")

    return 0


if __name__ == "__main__":
    sys.exit(main())
