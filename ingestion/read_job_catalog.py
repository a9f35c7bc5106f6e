import csv
import json
from pathlib import Path
from typing import Dict, List

from pydantic import BaseModel, ValidationError

from core.job_record import JobRecord
from core.trait_vector import TraitVector, TRAIT_CATEGORIES


class JobEntry(BaseModel):
    """Stored job shape, as exported from the jobs collection"""
    jobName: str
    Prerequisites: Dict[str, float] = {}


# -----------------------------
# Loaders
# -----------------------------

def load_jobs_from_csv(csv_path: Path) -> List[JobRecord]:
    jobs: List[JobRecord] = []

    with csv_path.open(newline="", encoding="utf-8") as csv_file:
        reader = csv.DictReader(csv_file)

        if not reader.fieldnames:
            raise ValueError(f"{csv_path.name} has no headers")

        # Normalize headers once
        header_map = {name.strip().lower(): name for name in reader.fieldnames}
        name_column = header_map.get("jobname") or header_map.get("job_name") or header_map.get("name")

        if name_column is None:
            raise ValueError(f"{csv_path.name} must contain a jobName column")

        category_columns = {
            category: header_map[category.lower()]
            for category in TRAIT_CATEGORIES
            if category.lower() in header_map
        }

        for line_number, row in enumerate(reader, start=2):
            name = (row[name_column] or "").strip()
            if not name:
                continue

            prerequisites = {}
            for category, column in category_columns.items():
                raw_val = (row[column] or "").strip()
                if not raw_val:
                    continue
                try:
                    prerequisites[category] = float(raw_val)
                except ValueError:
                    raise ValueError(
                        f"{csv_path.name} line {line_number}: {category} is not a number: {raw_val!r}"
                    )

            jobs.append(JobRecord(name=name, prerequisites=TraitVector(prerequisites)))

    return jobs


def load_jobs_from_json(json_path: Path) -> List[JobRecord]:
    with json_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{json_path.name} must contain a list of jobs")

    jobs: List[JobRecord] = []
    for position, raw in enumerate(data):
        try:
            entry = JobEntry.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"{json_path.name} entry {position} is invalid: {e}")

        jobs.append(JobRecord(name=entry.jobName, prerequisites=TraitVector(entry.Prerequisites)))

    return jobs


def load_job_catalog(path) -> List[JobRecord]:
    """
    Load a job catalog from .csv or .json.
    Missing categories default to 0. Job names must be unique.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".csv":
        jobs = load_jobs_from_csv(path)
    elif suffix == ".json":
        jobs = load_jobs_from_json(path)
    else:
        raise ValueError(f"Unsupported catalog format: {path.suffix or path.name}")

    seen = set()
    for job in jobs:
        if job.name in seen:
            raise ValueError(f"Duplicate job name in catalog: {job.name}")
        seen.add(job.name)

    return jobs


# -----------------------------
# Entry point
# -----------------------------

if __name__ == "__main__":
    import sys

    catalog = load_job_catalog(sys.argv[1])
    print(f"Loaded {len(catalog)} jobs\n")

    for index, job in enumerate(catalog):
        print(f"{job.name}: {job.prerequisites.scores}")
        if index >= 10:
            break
