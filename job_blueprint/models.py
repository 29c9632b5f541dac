from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


Seniority = Literal["junior", "mid", "senior"]
Priority = Literal["critical", "high", "medium", "low"]
TaskType = Literal["feature", "bug", "technical-debt", "documentation"]
ResourceType = Literal["course", "documentation", "book", "tutorial", "practice"]
Difficulty = Literal["beginner", "intermediate", "advanced"]


class JobPosting(BaseModel):
    title: str
    company: str
    description: str
    requirements: List[str] = Field(default_factory=list)
    responsibilities: List[str] = Field(default_factory=list)
    benefits: List[str] = Field(default_factory=list)
    raw_text: str = ""


@dataclass(frozen=True)
class DetectionResult:
    """
    Tags found in a posting, one ordered tuple per bucket.
    Built once by the detector and read by the blueprint generator.
    """
    languages: Tuple[str, ...] = ()
    frameworks: Tuple[str, ...] = ()
    databases: Tuple[str, ...] = ()
    platforms: Tuple[str, ...] = ()
    domains: Tuple[str, ...] = ()
    specializations: Tuple[str, ...] = ()
    estimated_seniority: Seniority = "mid"

    def has(self, bucket: str, key: str) -> bool:
        return key in getattr(self, bucket, ())

    def all_tags(self) -> List[str]:
        return [
            *self.languages,
            *self.frameworks,
            *self.databases,
            *self.platforms,
            *self.domains,
            *self.specializations,
        ]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ----------------------------
# Roadmap
# ----------------------------

class Ticket(_Frozen):
    id: str
    title: str
    description: str
    story_points: int
    priority: Priority
    task_type: TaskType
    acceptance_criteria: List[str]
    dependencies: Optional[List[str]] = None
    assignee: Optional[str] = None
    due_date: Optional[str] = None


class Epic(_Frozen):
    id: str
    name: str
    description: str
    duration: str
    week_number: int
    tickets: List[Ticket]
    goals: List[str]
    success_metrics: List[str]


class ProjectRoadmap(_Frozen):
    project_name: str
    description: str
    total_duration: int
    start_date: str
    epics: List[Epic]
    estimated_team_size: int
    key_milestones: List[str]


# ----------------------------
# Architecture
# ----------------------------

class ArchitectureModule(_Frozen):
    name: str
    responsibility: str
    dependencies: List[str]
    technologies: List[str]


class DataModel(_Frozen):
    entity: str
    fields: Dict[str, str]
    relationships: List[str]
    indexes: Optional[List[str]] = None


class ApiEndpoint(_Frozen):
    method: str
    path: str
    description: str
    request_body: Optional[Dict[str, str]] = None
    response_body: Optional[Dict[str, str]] = None


class ArchitectureBlueprint(_Frozen):
    overview: str
    modules: List[ArchitectureModule]
    data_models: List[DataModel]
    apis: List[ApiEndpoint]
    integrations: List[str]
    non_functional_requirements: List[str]
    security_considerations: List[str]
    scaling_strategy: str


# ----------------------------
# Test + learning plans
# ----------------------------

class TestPlan(_Frozen):
    overview: str = ""
    unit_test_coverage: str = ""
    integration_test_scenarios: List[str] = Field(default_factory=list)
    e2e_test_scenarios: List[str] = Field(default_factory=list)
    performance_targets: Dict[str, str] = Field(default_factory=dict)
    load_testing_strategy: str = ""
    security_test_cases: List[str] = Field(default_factory=list)


class LearningResource(_Frozen):
    title: str
    type: ResourceType
    url: str
    estimated_hours: int
    difficulty: Difficulty


class SkillGap(_Frozen):
    skill: str
    importance: Priority
    current_level: int
    target_level: int
    estimated_hours: int
    resources: List[LearningResource]


class LearningPhase(_Frozen):
    phase: int
    name: str
    duration: str
    focus: List[str]
    milestones: List[str]


class LearningPlan(_Frozen):
    overview: str = ""
    estimated_total_hours: int = 0
    learning_phases: List[LearningPhase] = Field(default_factory=list)
    skill_gaps: List[SkillGap] = Field(default_factory=list)
    recommended_path: str = ""


# ----------------------------
# Document
# ----------------------------

class BlueprintMetadata(_Frozen):
    generated_at: str
    job_title: str
    company: Optional[str] = None
    seniority: Seniority
    estimated_duration: int


class BlueprintSummary(_Frozen):
    key_technologies: List[str]
    main_challenges: List[str]
    success_criteria: List[str]


class ProjectBlueprint(_Frozen):
    metadata: BlueprintMetadata
    roadmap: ProjectRoadmap
    architecture: ArchitectureBlueprint
    test_plan: TestPlan
    learning_plan: LearningPlan
    summary: BlueprintSummary

    def all_tickets(self) -> List[Tuple[Epic, Ticket]]:
        return [(epic, t) for epic in self.roadmap.epics for t in epic.tickets]
