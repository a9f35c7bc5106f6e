import pytest

from core.job_record import JobRecord, as_job_records
from core.trait_vector import TraitVector, TRAIT_CATEGORIES, as_trait_vector


def test_missing_categories_default_to_zero():
    vector = TraitVector({"Business": 40})

    assert vector.scores["Business"] == 40.0
    assert vector.scores["Technology"] == 0.0
    assert list(vector.scores) == TRAIT_CATEGORIES


def test_unknown_category_is_rejected():
    with pytest.raises(ValueError):
        TraitVector({"Cooking": 10})


@pytest.mark.parametrize("value", ["12", None, True])
def test_non_numeric_score_is_rejected(value):
    with pytest.raises(ValueError):
        TraitVector({"Business": value})


def test_from_labels_maps_display_names_and_rounds():
    vector = TraitVector.from_labels(
        {"General Culture": 33.33, "Arts and Entertainment": 12.5, "Science": 54.17, "Extra": 1},
        round_values=True,
    )

    assert vector.scores["GeneralCulture"] == 33.0
    assert vector.scores["ArtsAndEntertainment"] == 13.0
    assert vector.scores["Science"] == 54.0


def test_to_labels_round_trips_through_from_labels():
    vector = TraitVector({"GeneralCulture": 20, "Outdoor": 80})

    assert TraitVector.from_labels(vector.to_labels()) == vector


def test_as_trait_vector_rejects_non_mappings():
    with pytest.raises(ValueError):
        as_trait_vector([1, 2, 3])


def test_job_record_accepts_stored_job_shape():
    jobs = as_job_records([
        {"jobName": "Chef", "Prerequisites": {"Service": 60, "ArtsAndEntertainment": 40}},
        JobRecord(name="Pilot", prerequisites={"Outdoor": 50, "Technology": 50}),
    ])

    assert jobs[0].name == "Chef"
    assert jobs[0].prerequisites.scores["Service"] == 60.0
    assert isinstance(jobs[1].prerequisites, TraitVector)


def test_job_record_requires_a_name():
    with pytest.raises(ValueError):
        as_job_records([{"Prerequisites": {}}])
    with pytest.raises(ValueError):
        JobRecord(name=" ", prerequisites=TraitVector())


@pytest.mark.parametrize("value, expected", [(12.5, 13.0), (33.33, 33.0), (0.5, 1.0), (2.5, 3.0), (49.99, 50.0)])
def test_rounded_sends_halves_up(value, expected):
    assert TraitVector({"Science": value}).rounded().scores["Science"] == expected
