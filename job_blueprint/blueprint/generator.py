# job_blueprint/blueprint/generator.py
from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Callable, List, Optional

from job_blueprint.blueprint import templates as T
from job_blueprint.blueprint.architecture import build_architecture, minimal_architecture
from job_blueprint.blueprint.learning import (
    build_learning_plan,
    build_test_plan,
    empty_learning_plan,
    empty_test_plan,
)
from job_blueprint.blueprint.roadmap import build_roadmap
from job_blueprint.models import (
    BlueprintMetadata,
    BlueprintSummary,
    DetectionResult,
    ProjectBlueprint,
)


Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def project_name(title: str, company: Optional[str]) -> str:
    return f"{title} @ {company}" if company else title


def key_technologies(stack: DetectionResult) -> List[str]:
    # plain concatenation, in bucket order
    out: List[str] = []
    for bucket in T.SUMMARY_TECH_BUCKETS:
        out.extend(getattr(stack, bucket))
    return out


def main_challenges(stack: DetectionResult) -> List[str]:
    challenges = [label for bucket, key, label in T.CHALLENGE_RULES if stack.has(bucket, key)]
    return challenges or list(T.DEFAULT_CHALLENGES)


def success_criteria() -> List[str]:
    return list(T.SUCCESS_CRITERIA)


def generate_blueprint(
    title: str,
    company: Optional[str],
    description: str,
    stack: DetectionResult,
    duration_days: int = 60,
    include_architecture: bool = True,
    include_test_plan: bool = True,
    include_learning_plan: bool = True,
    *,
    clock: Optional[Clock] = None,
    rng: Optional[random.Random] = None,
) -> ProjectBlueprint:
    """
    Assemble the full blueprint for one posting.

    `clock` supplies generated_at and the roadmap start date, `rng` the
    ticket ids. Everything else is a pure function of the arguments.
    """
    now = (clock or utc_now)()
    rng = rng or random.Random()
    name = project_name(title, company)

    roadmap = build_roadmap(
        project_name=name,
        stack=stack,
        duration_days=duration_days,
        start_date=now.date().isoformat(),
        rng=rng,
    )

    architecture = build_architecture(stack, description) if include_architecture else minimal_architecture()
    test_plan = build_test_plan() if include_test_plan else empty_test_plan()
    learning_plan = build_learning_plan(stack, title) if include_learning_plan else empty_learning_plan()

    return ProjectBlueprint(
        metadata=BlueprintMetadata(
            generated_at=now.isoformat(),
            job_title=title,
            company=company,
            seniority=stack.estimated_seniority,
            estimated_duration=duration_days,
        ),
        roadmap=roadmap,
        architecture=architecture,
        test_plan=test_plan,
        learning_plan=learning_plan,
        summary=BlueprintSummary(
            key_technologies=key_technologies(stack),
            main_challenges=main_challenges(stack),
            success_criteria=success_criteria(),
        ),
    )
