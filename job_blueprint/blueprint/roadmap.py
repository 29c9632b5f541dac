# job_blueprint/blueprint/roadmap.py
from __future__ import annotations

import math
import random
import string
from typing import List, Tuple

from job_blueprint.blueprint import templates as T
from job_blueprint.models import DetectionResult, Epic, ProjectRoadmap, Ticket


_ID_ALPHABET = string.digits + string.ascii_uppercase


def ticket_id(rng: random.Random, length: int = 5) -> str:
    """
    Opaque display id. Drawn from `rng` with no uniqueness check, so two
    tickets in one run can collide.
    """
    return "TICKET-" + "".join(rng.choice(_ID_ALPHABET) for _ in range(length))


def epic_count(duration_days: int) -> int:
    return min(math.ceil(duration_days / T.DAYS_PER_EPIC), T.MAX_EPICS)


def ticket_templates_for(epic_name: str) -> Tuple[T.TicketTemplate, ...]:
    for marker, tickets in T.TICKET_TEMPLATES:
        if marker in epic_name:
            return tickets
    return ()


def build_tickets(epic_name: str, rng: random.Random) -> List[Ticket]:
    base = ticket_templates_for(epic_name)
    if not base:
        return []

    first_title = base[0].title
    return [
        Ticket(
            id=ticket_id(rng),
            title=tpl.title,
            description=f"Implement: {tpl.title}",
            story_points=tpl.points,
            priority=tpl.priority,
            task_type=tpl.task_type,
            acceptance_criteria=list(T.ACCEPTANCE_CRITERIA),
            dependencies=[first_title] if i > 0 else None,
        )
        for i, tpl in enumerate(base)
    ]


def build_epics(duration_days: int, rng: random.Random) -> List[Epic]:
    epics: List[Epic] = []
    for i, tpl in enumerate(T.EPIC_TEMPLATES[: epic_count(duration_days)]):
        epics.append(
            Epic(
                id=f"EPIC-{i + 1}",
                name=tpl.name,
                description=tpl.description,
                duration=tpl.duration,
                week_number=tpl.week_number,
                tickets=build_tickets(tpl.name, rng),
                goals=list(tpl.goals),
                success_metrics=list(T.EPIC_SUCCESS_METRICS),
            )
        )
    return epics


def estimate_team_size(stack: DetectionResult) -> int:
    # base: lead + developer
    return T.BASE_TEAM_SIZE + sum(1 for bucket, key in T.TEAM_SIZE_BUMPS if stack.has(bucket, key))


def build_milestones(duration_days: int) -> List[str]:
    """
    One milestone every `max(1, d // 28)` weeks, labelled by the week it
    falls in (two weeks per label, clamped to the last one).
    """
    step_days = max(1, duration_days // 28) * 7
    milestones: List[str] = []
    for day in range(step_days, duration_days + 1, step_days):
        week = math.ceil(day / 7)
        label = T.MILESTONE_LABELS[min(len(T.MILESTONE_LABELS) - 1, week // 2)]
        milestones.append(f"Week {week}: {label}")
    return milestones


def build_roadmap(
    project_name: str,
    stack: DetectionResult,
    duration_days: int,
    start_date: str,
    rng: random.Random,
) -> ProjectRoadmap:
    return ProjectRoadmap(
        project_name=project_name,
        description=f"Project roadmap for {project_name}. Total estimated duration: {duration_days} days.",
        total_duration=duration_days,
        start_date=start_date,
        epics=build_epics(duration_days, rng),
        estimated_team_size=estimate_team_size(stack),
        key_milestones=build_milestones(duration_days),
    )
