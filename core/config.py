import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# ============================================================================
# GENETIC ALGORITHM DEFAULTS
# ============================================================================

NUM_GENERATIONS = _int_env("GA_NUM_GENERATIONS", 100)
POPULATION_SIZE = _int_env("GA_POPULATION_SIZE", 50)


def get_ga_seed():
    """Seed for reproducible runs. None means fresh entropy on every call."""
    raw = os.getenv("GA_SEED")
    if raw is None or raw.strip() == "":
        return None
    seed = _int_env("GA_SEED", 0)
    if seed < 0:
        raise ValueError(f"GA_SEED must be a non-negative integer, got {raw!r}")
    return seed


# Stored user traits were rounded to whole percentages before matching
ROUND_PERSON_TRAITS = _bool_env("ROUND_PERSON_TRAITS", True)


def get_log_level() -> str:
    raw = os.getenv("LOG_LEVEL", "").strip().upper() or "WARNING"
    if raw not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return raw
