# job_blueprint/blueprint/learning.py
from __future__ import annotations

from typing import List

from job_blueprint.blueprint import templates as T
from job_blueprint.models import (
    DetectionResult,
    LearningPhase,
    LearningPlan,
    LearningResource,
    SkillGap,
    TestPlan,
)


def build_test_plan() -> TestPlan:
    """The test plan does not depend on the detected stack."""
    return TestPlan(
        overview=T.TEST_PLAN["overview"],
        unit_test_coverage=T.TEST_PLAN["unit_test_coverage"],
        integration_test_scenarios=list(T.TEST_PLAN["integration_test_scenarios"]),
        e2e_test_scenarios=list(T.TEST_PLAN["e2e_test_scenarios"]),
        performance_targets=dict(T.TEST_PLAN["performance_targets"]),
        load_testing_strategy=T.TEST_PLAN["load_testing_strategy"],
        security_test_cases=list(T.TEST_PLAN["security_test_cases"]),
    )


def empty_test_plan() -> TestPlan:
    return TestPlan()


def resources_for(bucket: str, key: str) -> List[LearningResource]:
    """
    Curated resources for a tag, or a single generated documentation link
    when the tag is not in the table. Unknown domains get nothing.
    """
    table = T.RESOURCE_TABLES.get(bucket, {})
    found = table.get(key.lower())
    if found:
        return [LearningResource(**r._asdict()) for r in found]

    fallback = T.RESOURCE_FALLBACKS.get(bucket)
    if not fallback:
        return []

    title_fmt, url_fmt, hours = fallback
    return [
        LearningResource(
            title=title_fmt.format(key),
            type="documentation",
            url=url_fmt.format(key.lower()),
            estimated_hours=hours,
            difficulty="intermediate",
        )
    ]


def build_skill_gaps(stack: DetectionResult) -> List[SkillGap]:
    gaps: List[SkillGap] = []
    for rule in T.GAP_RULES:
        for key in getattr(stack, rule.bucket):
            gaps.append(
                SkillGap(
                    skill=rule.skill_format.format(key),
                    importance=rule.importance,
                    current_level=0,
                    target_level=rule.target_level,
                    estimated_hours=rule.estimated_hours,
                    resources=resources_for(rule.bucket, key),
                )
            )
    return gaps[: T.MAX_SKILL_GAPS]


def build_learning_plan(stack: DetectionResult, job_title: str) -> LearningPlan:
    skill_gaps = build_skill_gaps(stack)
    # summed over the kept gaps only
    total_hours = sum(g.estimated_hours for g in skill_gaps)

    phases = [
        LearningPhase(
            phase=p["phase"],
            name=p["name"],
            duration=p["duration"],
            focus=list(p["focus"]),
            milestones=list(p["milestones"]),
        )
        for p in T.LEARNING_PHASES
    ]

    first_lang = stack.languages[0] if stack.languages else "JavaScript"
    first_framework = stack.frameworks[0] if stack.frameworks else "framework"
    first_domain = stack.domains[0] if stack.domains else "software engineering"

    return LearningPlan(
        overview=(
            f"Customized learning plan for {job_title}. Estimated {total_hours} hours of learning. "
            f"Covers {', '.join(stack.languages)} with {', '.join(stack.frameworks)} "
            f"and {', '.join(stack.domains)} domain knowledge."
        ),
        estimated_total_hours=total_hours,
        learning_phases=phases,
        skill_gaps=skill_gaps,
        recommended_path=(
            f"Start with {first_lang} fundamentals, then progress to {first_framework} deep dive, "
            f"followed by domain-specific patterns in {first_domain}."
        ),
    )


def empty_learning_plan() -> LearningPlan:
    return LearningPlan()
