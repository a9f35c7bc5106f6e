from dataclasses import dataclass

from core.trait_vector import TraitVector, as_trait_vector


@dataclass(frozen=True)
class JobRecord:
    """
    Catalog entry for a single profession.
    Read-only input to matching. No scoring.
    """

    name: str
    prerequisites: TraitVector

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError(f"Job name must be a non-empty string: {self.name!r}")
        # Plain dicts of category scores are accepted too
        object.__setattr__(self, "prerequisites", as_trait_vector(self.prerequisites))

    @classmethod
    def from_dict(cls, data: dict) -> "JobRecord":
        """Accepts the stored job shape: {"jobName": ..., "Prerequisites": {...}}."""
        if "jobName" not in data:
            raise ValueError(f"Job entry has no jobName: {data}")
        return cls(
            name=data["jobName"],
            prerequisites=TraitVector(data.get("Prerequisites") or {}),
        )


def as_job_record(value) -> JobRecord:
    if isinstance(value, JobRecord):
        return value
    if isinstance(value, dict):
        return JobRecord.from_dict(value)
    raise ValueError(f"Expected a JobRecord or job dict, got {type(value).__name__}")


def as_job_records(jobs) -> list[JobRecord]:
    return [as_job_record(job) for job in jobs]
