import csv
import io
import json
import random
from datetime import datetime, timezone

from job_blueprint.blueprint import generate_blueprint
from job_blueprint.formatters import CSV_FIELDS, tickets_to_csv, to_json, to_markdown
from job_blueprint.models import DetectionResult


def sample_blueprint(**kwargs):
    stack = DetectionResult(
        languages=("python",),
        frameworks=("fastapi",),
        databases=("postgres",),
        platforms=("aws",),
        domains=("fintech",),
    )
    return generate_blueprint(
        "Backend Engineer",
        "Acme",
        "Payments platform",
        stack,
        duration_days=60,
        clock=lambda: datetime(2026, 3, 2, 9, 30, tzinfo=timezone.utc),
        rng=random.Random(3),
        **kwargs,
    )


def with_first_ticket(bp, **changes):
    epic = bp.roadmap.epics[0]
    ticket = epic.tickets[0].model_copy(update=changes)
    epic = epic.model_copy(update={"tickets": [ticket]})
    roadmap = bp.roadmap.model_copy(update={"epics": [epic]})
    return bp.model_copy(update={"roadmap": roadmap})


def test_csv_header_and_row_count():
    bp = sample_blueprint()
    rows = list(csv.reader(io.StringIO(tickets_to_csv(bp))))

    assert rows[0] == CSV_FIELDS
    assert len(rows) == 1 + 12
    assert rows[1][0] == "EPIC-1"
    assert rows[1][1] == "Project Setup & Architecture Foundation"
    assert rows[1][7] == "; ".join(bp.roadmap.epics[0].tickets[0].acceptance_criteria)


def test_csv_escapes_quotes_and_commas():
    bp = with_first_ticket(
        sample_blueprint(),
        title='Design "API", v2',
        acceptance_criteria=["Schema reviewed, signed off", 'Returns "ok"'],
    )
    out = tickets_to_csv(bp)

    assert '"Design ""API"", v2"' in out
    rows = list(csv.reader(io.StringIO(out)))
    assert rows[1][3] == 'Design "API", v2'
    assert rows[1][7].split("; ") == ["Schema reviewed, signed off", 'Returns "ok"']


def test_json_round_trips_structure():
    bp = sample_blueprint()
    data = json.loads(to_json(bp))

    assert data["metadata"]["job_title"] == "Backend Engineer"
    assert data["metadata"]["seniority"] == "mid"
    assert len(data["roadmap"]["epics"]) == 2
    assert data["architecture"]["data_models"][2]["entity"] == "Transaction"


def test_json_compact():
    out = to_json(sample_blueprint(), pretty=False)

    assert "\n" not in out
    assert json.loads(out)["roadmap"]["total_duration"] == 60


def test_markdown_sections():
    md = to_markdown(sample_blueprint())

    assert md.startswith("# Project Blueprint: Backend Engineer")
    assert "**Company**: Acme" in md
    assert "#### EPIC-1: Project Setup & Architecture Foundation" in md
    assert "| POST | `/api/auth/register` | Register a new user |" in md
    assert "**python Advanced Proficiency** [critical]" in md
    assert "[Python Official Docs](https://docs.python.org/3/)" in md
    assert "| Throughput | > 1000 requests/second |" in md


def test_markdown_with_stub_sections():
    md = to_markdown(
        sample_blueprint(include_architecture=False, include_test_plan=False, include_learning_plan=False)
    )

    assert "## Architecture Blueprint" in md
    assert "Standard three-tier architecture" in md
    assert "**Estimated Total Hours**: 0" in md
