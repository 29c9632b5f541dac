import random
from datetime import datetime, timezone

from job_blueprint.blueprint import generate_blueprint
from job_blueprint.blueprint.learning import resources_for
from job_blueprint.blueprint.roadmap import build_milestones, epic_count, estimate_team_size
from job_blueprint.detector import detect_stack
from job_blueprint.models import DetectionResult


def fixed_clock():
    return datetime(2026, 1, 5, 12, 0, tzinfo=timezone.utc)


def make(stack=None, days=60, description="", **kwargs):
    return generate_blueprint(
        "Backend Engineer",
        "Acme",
        description,
        stack or DetectionResult(),
        duration_days=days,
        clock=fixed_clock,
        rng=random.Random(7),
        **kwargs,
    )


def test_epic_count_is_capped():
    assert epic_count(1) == 1
    assert epic_count(15) == 1
    assert epic_count(60) == 2
    assert epic_count(61) == 3
    assert epic_count(365) == 5

    assert len(make(days=15).roadmap.epics) == 1
    assert len(make(days=60).roadmap.epics) == 2
    assert len(make(days=365).roadmap.epics) == 5


def test_each_epic_has_six_tickets_with_first_ticket_dependency():
    bp = make(days=365)

    for i, epic in enumerate(bp.roadmap.epics, start=1):
        assert epic.id == f"EPIC-{i}"
        assert len(epic.tickets) == 6
        first = epic.tickets[0]
        assert first.dependencies is None
        for t in epic.tickets[1:]:
            assert t.dependencies == [first.title]
        for t in epic.tickets:
            assert t.id.startswith("TICKET-")
            assert t.description == f"Implement: {t.title}"
            assert len(t.acceptance_criteria) == 5


def test_epics_follow_the_phase_order():
    names = [e.name for e in make(days=365).roadmap.epics]

    assert names[0] == "Project Setup & Architecture Foundation"
    assert "Phase 1" in names[1]
    assert "Phase 2" in names[2]
    assert names[3] == "Testing & Quality Assurance"
    assert names[4] == "Deployment & Documentation"


def test_roadmap_metadata_uses_injected_clock():
    bp = make()

    assert bp.roadmap.start_date == "2026-01-05"
    assert bp.metadata.generated_at.startswith("2026-01-05T12:00:00")
    assert bp.roadmap.project_name == "Backend Engineer @ Acme"
    assert bp.roadmap.description == (
        "Project roadmap for Backend Engineer @ Acme. Total estimated duration: 60 days."
    )


def test_same_seed_same_document():
    assert make().model_dump() == make().model_dump()


def test_only_ticket_ids_depend_on_rng():
    a = make(days=365).model_dump()
    b = generate_blueprint(
        "Backend Engineer", "Acme", "", DetectionResult(), duration_days=365,
        clock=fixed_clock, rng=random.Random(99),
    ).model_dump()

    for epic in a["roadmap"]["epics"] + b["roadmap"]["epics"]:
        for t in epic["tickets"]:
            t["id"] = "X"
    assert a == b


def test_team_size():
    assert estimate_team_size(DetectionResult()) == 2
    busy = DetectionResult(domains=("ml", "security"), specializations=("microservices", "distributed"))
    assert estimate_team_size(busy) == 6


def test_milestones():
    assert build_milestones(15) == ["Week 1: Foundation", "Week 2: Core Features"]
    assert build_milestones(60) == [
        "Week 2: Core Features",
        "Week 4: Integration",
        "Week 6: Testing",
        "Week 8: Deployment",
    ]


def test_baseline_architecture():
    arch = make().architecture

    assert [m.name for m in arch.modules] == [
        "API Gateway",
        "Authentication & Authorization",
        "Core Business Logic",
        "Data Access Layer",
    ]
    assert [d.entity for d in arch.data_models] == ["User", "Session"]
    assert len(arch.apis) == 5
    assert arch.integrations == ["REST API Integration", "OAuth 2.0"]
    assert len(arch.security_considerations) == 7
    assert arch.scaling_strategy.startswith("Database read replicas")


def test_architecture_follows_stack_flags():
    stack = DetectionResult(
        frameworks=("django",),
        databases=("postgres",),
        platforms=("aws", "kubernetes"),
        domains=("ml", "fintech", "security"),
        specializations=("distributed", "scaling"),
    )
    arch = make(stack, description="Handles payment flows and user data; sends email").architecture

    names = [m.name for m in arch.modules]
    assert "ML Pipeline" in names
    assert "Service Mesh" in names
    core = next(m for m in arch.modules if m.name == "Core Business Logic")
    assert core.technologies == ["django"]
    assert "Transaction" in [d.entity for d in arch.data_models]
    assert arch.integrations == [
        "AWS Services (S3, Lambda, RDS)",
        "Payment Gateway (Stripe/PayPal)",
        "Email Service (SendGrid/Mailgun)",
    ]
    assert "End-to-end encryption" in arch.non_functional_requirements
    assert "Auto-scaling capability" in arch.non_functional_requirements
    assert "PCI DSS compliance" in arch.security_considerations
    assert "GDPR/CCPA compliance" in arch.security_considerations
    assert arch.scaling_strategy.startswith("Kubernetes-based")


def test_api_endpoints_do_not_depend_on_stack():
    plain = make().architecture.apis
    rich = make(DetectionResult(domains=("fintech",), platforms=("aws",))).architecture.apis

    assert plain == rich
    assert [a.path for a in plain][0] == "/api/auth/register"


def test_disabled_sections_give_stubs():
    bp = make(include_architecture=False, include_test_plan=False, include_learning_plan=False)

    assert bp.architecture.overview.startswith("Standard three-tier architecture")
    assert bp.architecture.modules == []
    assert bp.architecture.apis == []
    assert bp.architecture.scaling_strategy == ""
    assert bp.test_plan.overview == ""
    assert bp.test_plan.performance_targets == {}
    assert bp.learning_plan.estimated_total_hours == 0
    assert bp.learning_plan.skill_gaps == []
    assert len(bp.roadmap.epics) == 2


def test_test_plan_is_static():
    a = make().test_plan
    b = make(DetectionResult(languages=("rust",), domains=("ml",))).test_plan

    assert a == b
    assert a.performance_targets["Throughput"] == "> 1000 requests/second"
    assert len(a.security_test_cases) == 6


def test_skill_gaps_truncated_and_hours_summed_after_truncation():
    stack = DetectionResult(
        languages=("python", "typescript", "rust"),
        frameworks=("react", "django", "vue"),
        databases=("postgres", "redis", "mongodb"),
        domains=("ml", "fintech"),
    )
    plan = make(stack).learning_plan

    assert len(plan.skill_gaps) == 8
    assert [g.skill for g in plan.skill_gaps[:2]] == ["python Advanced Proficiency", "typescript Advanced Proficiency"]
    assert plan.skill_gaps[-1].skill == "redis Database Design"
    assert plan.estimated_total_hours == sum(g.estimated_hours for g in plan.skill_gaps) == 250


def test_skill_gap_levels_per_group():
    stack = DetectionResult(languages=("python",), frameworks=("react",), databases=("postgres",), domains=("ml",))
    gaps = make(stack).learning_plan.skill_gaps

    assert [(g.importance, g.target_level, g.estimated_hours) for g in gaps] == [
        ("critical", 8, 40),
        ("high", 7, 30),
        ("high", 7, 20),
        ("high", 6, 25),
    ]
    assert all(g.current_level == 0 for g in gaps)


def test_resource_lookup_and_fallbacks():
    assert [r.title for r in resources_for("languages", "python")] == ["Python Official Docs", "Real Python Tutorials"]

    fallback = resources_for("languages", "rust")
    assert len(fallback) == 1
    assert fallback[0].title == "rust Official Documentation"
    assert fallback[0].url == "https://rust.org/docs"
    assert fallback[0].type == "documentation"

    assert resources_for("databases", "redis")[0].url == "https://redis.org"
    assert resources_for("domains", "iot") == []


def test_learning_plan_text_fallbacks():
    plan = make().learning_plan

    assert plan.recommended_path == (
        "Start with JavaScript fundamentals, then progress to framework deep dive, "
        "followed by domain-specific patterns in software engineering."
    )
    assert [p.phase for p in plan.learning_phases] == [1, 2, 3]


def test_summary():
    stack = DetectionResult(
        languages=("python",),
        frameworks=("fastapi",),
        databases=("postgres",),
        platforms=("aws",),
        domains=("ml",),
    )
    summary = make(stack).summary

    assert summary.key_technologies == ["python", "fastapi", "postgres", "aws"]
    assert summary.main_challenges == ["Model training and optimization"]
    assert len(summary.success_criteria) == 6

    assert make().summary.main_challenges == [
        "High code quality standards",
        "Performance optimization",
        "Testing coverage",
    ]


def test_end_to_end_backend_posting():
    description = "Senior backend engineer, Python, PostgreSQL, AWS, microservices, 7+ years"
    stack = detect_stack(description, [])
    bp = generate_blueprint(
        "Senior Backend Engineer", None, description, stack,
        duration_days=90, clock=fixed_clock, rng=random.Random(1),
    )

    assert stack.languages == ("python",)
    assert "aws" in stack.platforms
    assert "microservices" in stack.specializations
    assert bp.metadata.seniority == "senior"
    assert bp.metadata.company is None
    assert bp.roadmap.project_name == "Senior Backend Engineer"
    assert len(bp.roadmap.epics) == 3
    assert "Service Mesh" in [m.name for m in bp.architecture.modules]
    assert bp.roadmap.estimated_team_size == 3
