import csv
import json
import random

import pytest

from job_blueprint.config import Config, GenerationCfg, InputCfg, OutputCfg, RulesCfg, load_config
from job_blueprint.errors import InputError
from job_blueprint.main import load_posting, run


POSTING = """Senior Backend Engineer

We are a fintech startup building a payments API.

Requirements:
- Python and FastAPI
- PostgreSQL, Redis
- AWS (Lambda, SQS), Docker
Benefits:
- Remote
"""


def make_cfg(tmp_path, **overrides):
    fields = {
        "input": InputCfg(text=POSTING, company_name="Acme", job_title="Backend Engineer"),
        "generation": GenerationCfg(duration_days=90),
        "output": OutputCfg(dir=str(tmp_path / "out")),
    }
    fields.update(overrides)
    return Config(**fields)


def test_load_config_defaults_without_path():
    cfg = load_config(None)

    assert cfg.generation.duration_days == 60
    assert cfg.output.format == "both"
    assert cfg.fetch.timeout == 10


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "input:\n  url: https://jobs.example.com/1\n"
        "generation:\n  duration_days: 120\n  include_test_plan: false\n"
        "output:\n  format: markdown\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.input.url == "https://jobs.example.com/1"
    assert cfg.generation.duration_days == 120
    assert cfg.generation.include_test_plan is False
    assert cfg.output.format == "markdown"


def test_load_config_rejects_bad_duration(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("generation:\n  duration_days: 0\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_config(str(path))


def test_load_posting_applies_overrides(tmp_path):
    posting = load_posting(make_cfg(tmp_path))

    assert posting.title == "Backend Engineer"
    assert posting.company == "Acme"
    assert posting.requirements[0] == "Python and FastAPI"


def test_load_posting_reads_text_file(tmp_path):
    text_file = tmp_path / "posting.txt"
    text_file.write_text(POSTING, encoding="utf-8")

    posting = load_posting(make_cfg(tmp_path, input=InputCfg(text_file=str(text_file))))

    assert posting.title == "Unspecified Position"
    assert posting.description == POSTING


def test_run_writes_all_outputs(tmp_path):
    bp = run(make_cfg(tmp_path), rng=random.Random(5))
    out = tmp_path / "out"

    assert len(bp.roadmap.epics) == 3
    assert bp.metadata.company == "Acme"
    assert "fastapi" in bp.summary.key_technologies

    data = json.loads((out / "blueprint.json").read_text(encoding="utf-8"))
    assert data["metadata"]["job_title"] == "Backend Engineer"
    assert (out / "blueprint.md").read_text(encoding="utf-8").startswith("# Project Blueprint: Backend Engineer")

    rows = list(csv.reader((out / "tickets.csv").open(encoding="utf-8")))
    assert len(rows) == 1 + 18

    summary = json.loads((out / "summary.json").read_text(encoding="utf-8"))
    assert summary["total_tickets"] == 18
    assert summary["seniority"] == "senior"
    assert summary["learning_hours"] == bp.learning_plan.estimated_total_hours


def test_run_respects_output_format(tmp_path):
    cfg = make_cfg(
        tmp_path,
        output=OutputCfg(dir=str(tmp_path / "out"), format="json", write_csv=False, write_summary=False),
    )
    run(cfg, rng=random.Random(5))
    out = tmp_path / "out"

    assert (out / "blueprint.json").exists()
    assert not (out / "blueprint.md").exists()
    assert not (out / "tickets.csv").exists()
    assert not (out / "summary.json").exists()


def test_run_with_custom_patterns(tmp_path):
    patterns = tmp_path / "patterns.yaml"
    patterns.write_text(
        "categories:\n  elixir: {bucket: languages, patterns: [payments api]}\n",
        encoding="utf-8",
    )

    bp = run(make_cfg(tmp_path, rules=RulesCfg(patterns_file=str(patterns))), rng=random.Random(5))

    assert bp.summary.key_technologies == ["elixir"]


def test_run_without_input_is_fatal(tmp_path):
    cfg = make_cfg(tmp_path, input=InputCfg())

    with pytest.raises(InputError):
        run(cfg)

    err = json.loads((tmp_path / "out" / "error.json").read_text(encoding="utf-8"))
    assert err["type"] == "error"
    assert "posting" in err["error"]


def test_run_with_bad_patterns_file_records_error(tmp_path):
    patterns = tmp_path / "patterns.yaml"
    patterns.write_text("categories:\n  elixir: {bucket: nowhere, patterns: [elixir]}\n", encoding="utf-8")

    with pytest.raises(InputError):
        run(make_cfg(tmp_path, rules=RulesCfg(patterns_file=str(patterns))))

    err = json.loads((tmp_path / "out" / "error.json").read_text(encoding="utf-8"))
    assert "patterns file" in err["error"].lower()


def test_run_with_missing_patterns_file_records_error(tmp_path):
    missing = tmp_path / "nope.yaml"

    with pytest.raises(InputError):
        run(make_cfg(tmp_path, rules=RulesCfg(patterns_file=str(missing))))

    assert (tmp_path / "out" / "error.json").exists()


def test_run_prints_detected_technology_count(tmp_path, capsys):
    bp = run(make_cfg(tmp_path), rng=random.Random(5))

    out = capsys.readouterr().out
    assert bp.summary.key_technologies
    assert "[INFO] Detected " in out
    assert "[INFO] - Specializations:" in out
