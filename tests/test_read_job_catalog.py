import json

import pytest

from ingestion.read_job_catalog import load_job_catalog


def test_load_csv_catalog(tmp_path):
    path = tmp_path / "jobs.csv"
    path.write_text(
        "jobName,Business,Science,Technology\n"
        "Accountant,60,10,30\n"
        "Biologist,,90,10\n",
        encoding="utf-8",
    )

    jobs = load_job_catalog(path)

    assert [job.name for job in jobs] == ["Accountant", "Biologist"]
    assert jobs[0].prerequisites.scores["Business"] == 60.0
    assert jobs[1].prerequisites.scores["Business"] == 0.0
    assert jobs[1].prerequisites.scores["Outdoor"] == 0.0


def test_csv_with_bad_number_fails(tmp_path):
    path = tmp_path / "jobs.csv"
    path.write_text("jobName,Business\nAccountant,lots\n", encoding="utf-8")

    with pytest.raises(ValueError, match="line 2"):
        load_job_catalog(path)


def test_csv_without_name_column_fails(tmp_path):
    path = tmp_path / "jobs.csv"
    path.write_text("title,Business\nAccountant,50\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_job_catalog(path)


def test_load_json_catalog(tmp_path):
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps([
        {"jobName": "Chef", "Prerequisites": {"Service": 55, "ArtsAndEntertainment": 45}},
        {"jobName": "Ranger"},
    ]), encoding="utf-8")

    jobs = load_job_catalog(path)

    assert jobs[0].prerequisites.scores["Service"] == 55.0
    assert jobs[1].prerequisites.total() == 0.0


def test_json_with_unknown_category_fails(tmp_path):
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps([{"jobName": "Chef", "Prerequisites": {"Cooking": 100}}]), encoding="utf-8")

    with pytest.raises(ValueError):
        load_job_catalog(path)


def test_duplicate_names_fail(tmp_path):
    path = tmp_path / "jobs.json"
    path.write_text(json.dumps([{"jobName": "Chef"}, {"jobName": "Chef"}]), encoding="utf-8")

    with pytest.raises(ValueError, match="Duplicate"):
        load_job_catalog(path)


def test_unsupported_format_fails(tmp_path):
    path = tmp_path / "jobs.xlsx"
    path.write_text("", encoding="utf-8")

    with pytest.raises(ValueError):
        load_job_catalog(path)
