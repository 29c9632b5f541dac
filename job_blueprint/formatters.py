# job_blueprint/formatters.py
from __future__ import annotations

import csv
import io
from datetime import datetime
from typing import List

from job_blueprint.models import ProjectBlueprint


CSV_FIELDS = [
    "Epic ID",
    "Epic Name",
    "Ticket ID",
    "Title",
    "Type",
    "Priority",
    "Story Points",
    "Acceptance Criteria",
]


def _bullets(items: List[str]) -> List[str]:
    return [f"- {x}" for x in items]


def _generated_label(stamp: str) -> str:
    try:
        return datetime.fromisoformat(stamp).strftime("%Y-%m-%d %H:%M:%S %Z").strip()
    except ValueError:
        return stamp


def to_markdown(bp: ProjectBlueprint) -> str:
    md: List[str] = []
    meta = bp.metadata

    md.append(f"# Project Blueprint: {meta.job_title}")
    md.append(f"**Generated**: {_generated_label(meta.generated_at)}")
    if meta.company:
        md.append(f"**Company**: {meta.company}")
    md.append(f"**Seniority Level**: {meta.seniority}")
    md.append(f"**Estimated Duration**: {meta.estimated_duration} days")
    md.append("")

    md.append("## Summary")
    md.append(bp.roadmap.description)
    md.append("")
    md.append("### Key Technologies")
    md.extend(_bullets(bp.summary.key_technologies))
    md.append("")
    md.append("### Main Challenges")
    md.extend(_bullets(bp.summary.main_challenges))
    md.append("")
    md.append("### Success Criteria")
    md.extend(_bullets(bp.summary.success_criteria))
    md.append("")

    # ----------------------------
    # Roadmap
    # ----------------------------
    rm = bp.roadmap
    md.append("## Project Roadmap")
    md.append(f"**Total Duration**: {rm.total_duration} days")
    md.append(f"**Start Date**: {rm.start_date}")
    md.append(f"**Estimated Team Size**: {rm.estimated_team_size} people")
    md.append("")
    md.append("### Key Milestones")
    md.extend(_bullets(rm.key_milestones))
    md.append("")

    md.append("### Epics & Tickets")
    for epic in rm.epics:
        md.append("")
        md.append(f"#### {epic.id}: {epic.name}")
        md.append(f"**Duration**: {epic.duration}")
        md.append(f"**Description**: {epic.description}")
        md.append("")
        md.append("**Goals**:")
        md.extend(_bullets(epic.goals))
        md.append("")
        md.append("**Success Metrics**:")
        md.extend(_bullets(epic.success_metrics))
        md.append("")
        md.append("**Tickets**:")
        for t in epic.tickets:
            md.append(f"- **{t.id}**: {t.title} ({t.story_points} pts, {t.priority})")
            md.append(f"  - Type: {t.task_type}")
            md.append(f"  - Criteria: {'; '.join(t.acceptance_criteria[:2])}")
    md.append("")

    # ----------------------------
    # Architecture
    # ----------------------------
    arch = bp.architecture
    md.append("## Architecture Blueprint")
    md.append(arch.overview)
    md.append("")

    md.append("### Architecture Modules")
    for module in arch.modules:
        md.append("")
        md.append(f"**{module.name}**")
        md.append(f"- Responsibility: {module.responsibility}")
        md.append(f"- Technologies: {', '.join(module.technologies)}")
        if module.dependencies:
            md.append(f"- Dependencies: {', '.join(module.dependencies)}")
    md.append("")

    md.append("### Data Models")
    for model in arch.data_models:
        md.append("")
        md.append(f"**{model.entity}**")
        md.append("| Field | Type |")
        md.append("|-------|------|")
        for field_name, field_type in model.fields.items():
            md.append(f"| {field_name} | {field_type} |")
        if model.relationships:
            md.append(f"- Relationships: {', '.join(model.relationships)}")
    md.append("")

    md.append("### API Endpoints")
    md.append("| Method | Path | Description |")
    md.append("|--------|------|-------------|")
    for api in arch.apis:
        md.append(f"| {api.method} | `{api.path}` | {api.description} |")
    md.append("")

    md.append("### Integrations")
    md.extend(_bullets(arch.integrations))
    md.append("")
    md.append("### Non-Functional Requirements")
    md.extend(_bullets(arch.non_functional_requirements))
    md.append("")
    md.append("### Security Considerations")
    md.extend(_bullets(arch.security_considerations))
    md.append("")
    md.append("### Scaling Strategy")
    md.append(arch.scaling_strategy)
    md.append("")

    # ----------------------------
    # Test plan
    # ----------------------------
    tp = bp.test_plan
    md.append("## Test Plan")
    md.append(tp.overview)
    md.append("")
    md.append("### Unit Testing")
    md.append(tp.unit_test_coverage)
    md.append("")
    md.append("### Integration Testing")
    md.extend(_bullets(tp.integration_test_scenarios))
    md.append("")
    md.append("### End-to-End Testing")
    md.extend(_bullets(tp.e2e_test_scenarios))
    md.append("")
    md.append("### Performance Targets")
    md.append("| Metric | Target |")
    md.append("|--------|--------|")
    for metric, target in tp.performance_targets.items():
        md.append(f"| {metric} | {target} |")
    md.append("")
    md.append("### Load Testing")
    md.append(tp.load_testing_strategy)
    md.append("")
    md.append("### Security Testing")
    md.extend(_bullets(tp.security_test_cases))
    md.append("")

    # ----------------------------
    # Learning plan
    # ----------------------------
    lp = bp.learning_plan
    md.append("## Learning Plan")
    md.append(lp.overview)
    md.append(f"**Estimated Total Hours**: {lp.estimated_total_hours}")
    md.append("")
    md.append("### Recommended Learning Path")
    md.append(lp.recommended_path)
    md.append("")

    md.append("### Learning Phases")
    for phase in lp.learning_phases:
        md.append("")
        md.append(f"#### Phase {phase.phase}: {phase.name} ({phase.duration})")
        md.append("**Focus Areas**:")
        md.extend(_bullets(phase.focus))
        md.append("**Milestones**:")
        md.extend(_bullets(phase.milestones))
    md.append("")

    md.append("### Skill Gaps & Resources")
    for gap in lp.skill_gaps:
        md.append("")
        md.append(f"**{gap.skill}** [{gap.importance}]")
        md.append(f"- Current Level: {gap.current_level}/10 -> Target: {gap.target_level}/10")
        md.append(f"- Estimated Hours: {gap.estimated_hours}")
        md.append("- Resources:")
        for r in gap.resources:
            md.append(
                f"  - [{r.title}]({r.url}) - {r.type} ({r.estimated_hours}h, {r.difficulty})"
            )

    return "\n".join(md)


def to_json(bp: ProjectBlueprint, pretty: bool = True) -> str:
    return bp.model_dump_json(indent=2 if pretty else None)


def tickets_to_csv(bp: ProjectBlueprint) -> str:
    """
    Flattened ticket list. Every field is quoted; embedded quotes are doubled.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_FIELDS)
    for epic, t in bp.all_tickets():
        writer.writerow(
            [
                epic.id,
                epic.name,
                t.id,
                t.title,
                t.task_type,
                t.priority,
                t.story_points,
                "; ".join(t.acceptance_criteria),
            ]
        )
    return buf.getvalue()
