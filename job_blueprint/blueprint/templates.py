# job_blueprint/blueprint/templates.py
"""
Canned content blocks the blueprint generator selects from.

Everything here is read-only data; the selection rules live in the
roadmap / architecture / learning modules.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import NamedTuple, Tuple


class EpicTemplate(NamedTuple):
    name: str
    description: str
    duration: str
    week_number: int
    goals: Tuple[str, ...]


class TicketTemplate(NamedTuple):
    title: str
    task_type: str
    priority: str
    points: int


class ResourceTemplate(NamedTuple):
    title: str
    type: str
    url: str
    estimated_hours: int
    difficulty: str


class GapRule(NamedTuple):
    bucket: str
    skill_format: str
    importance: str
    target_level: int
    estimated_hours: int


# ----------------------------
# Roadmap
# ----------------------------

MAX_EPICS = 5
DAYS_PER_EPIC = 30
BASE_TEAM_SIZE = 2

EPIC_TEMPLATES: Tuple[EpicTemplate, ...] = (
    EpicTemplate(
        name="Project Setup & Architecture Foundation",
        description="Initialize project structure, set up development environment, and establish architectural foundation",
        duration="Week 1-2",
        week_number=1,
        goals=(
            "Set up development environment and toolchain",
            "Establish project repository and CI/CD pipeline",
            "Create architectural design documents",
            "Set up database schema",
        ),
    ),
    EpicTemplate(
        name="Core Features Implementation - Phase 1",
        description="Build foundational features and core business logic",
        duration="Week 3-4",
        week_number=3,
        goals=(
            "Implement authentication and authorization",
            "Build core API endpoints",
            "Create data access layer",
            "Establish error handling patterns",
        ),
    ),
    EpicTemplate(
        name="Core Features Implementation - Phase 2",
        description="Continue with additional core features and integrations",
        duration="Week 5-6",
        week_number=5,
        goals=(
            "Implement business logic features",
            "Add external integrations",
            "Optimize database queries",
            "Build admin features",
        ),
    ),
    EpicTemplate(
        name="Testing & Quality Assurance",
        description="Comprehensive testing, performance optimization, and code quality improvements",
        duration="Week 7-8",
        week_number=7,
        goals=(
            "Write unit tests (>80% coverage)",
            "Integration testing",
            "Performance testing and optimization",
            "Security audit and fixes",
        ),
    ),
    EpicTemplate(
        name="Deployment & Documentation",
        description="Prepare for production deployment and complete documentation",
        duration="Week 9+",
        week_number=9,
        goals=(
            "Containerize and deploy application",
            "Set up monitoring and logging",
            "Complete API documentation",
            "Create user and developer guides",
        ),
    ),
)

# Epic-name substring -> ticket template list. Checked in order.
TICKET_TEMPLATES: Tuple[Tuple[str, Tuple[TicketTemplate, ...]], ...] = (
    ("Setup", (
        TicketTemplate("Initialize project repository and CI/CD pipeline", "technical-debt", "critical", 5),
        TicketTemplate("Set up development environment documentation", "documentation", "high", 3),
        TicketTemplate("Configure linting, formatting, and pre-commit hooks", "technical-debt", "high", 3),
        TicketTemplate("Design and document system architecture", "documentation", "critical", 8),
        TicketTemplate("Set up database schema and migrations", "feature", "critical", 5),
        TicketTemplate("Create base project structure and utilities", "technical-debt", "high", 5),
    )),
    ("Phase 1", (
        TicketTemplate("Implement user authentication system", "feature", "critical", 8),
        TicketTemplate("Build authorization and role management", "feature", "critical", 5),
        TicketTemplate("Create REST API endpoints for core resources", "feature", "critical", 8),
        TicketTemplate("Implement data access layer/ORM", "technical-debt", "high", 5),
        TicketTemplate("Set up comprehensive error handling", "technical-debt", "high", 3),
        TicketTemplate("Implement request validation", "feature", "high", 3),
    )),
    ("Phase 2", (
        TicketTemplate("Implement core business logic features", "feature", "high", 8),
        TicketTemplate("Add third-party API integrations", "feature", "high", 5),
        TicketTemplate("Optimize database queries and indexes", "technical-debt", "medium", 5),
        TicketTemplate("Implement caching layer", "feature", "medium", 5),
        TicketTemplate("Build admin/management features", "feature", "medium", 5),
        TicketTemplate("Implement file upload/processing if needed", "feature", "medium", 3),
    )),
    ("Testing", (
        TicketTemplate("Write unit tests for core modules", "feature", "high", 8),
        TicketTemplate("Implement integration tests", "feature", "high", 8),
        TicketTemplate("Set up end-to-end testing", "feature", "high", 5),
        TicketTemplate("Performance profiling and optimization", "technical-debt", "high", 8),
        TicketTemplate("Security vulnerability assessment", "bug", "critical", 5),
        TicketTemplate("Load testing and capacity planning", "technical-debt", "medium", 5),
    )),
    ("Deployment", (
        TicketTemplate("Containerize application with Docker", "technical-debt", "high", 5),
        TicketTemplate("Set up Kubernetes deployment (if applicable)", "technical-debt", "medium", 5),
        TicketTemplate("Configure production monitoring and alerting", "feature", "high", 3),
        TicketTemplate("Set up centralized logging", "technical-debt", "high", 3),
        TicketTemplate("Complete API and technical documentation", "documentation", "high", 5),
        TicketTemplate("Create deployment runbooks and guides", "documentation", "medium", 3),
    )),
)

ACCEPTANCE_CRITERIA: Tuple[str, ...] = (
    "Code is written and passes linting",
    "Unit tests written with >80% coverage",
    "Code review completed and approved",
    "Merged to main branch",
    "Documentation updated",
)

EPIC_SUCCESS_METRICS: Tuple[str, ...] = (
    "All tickets completed and tested",
    "Code review approval from lead",
    "No critical issues remaining",
    "> 80% test coverage for new code",
)

MILESTONE_LABELS: Tuple[str, ...] = (
    "Foundation",
    "Core Features",
    "Integration",
    "Testing",
    "Deployment",
)

# (bucket, key) pairs that each add one person to the base team.
TEAM_SIZE_BUMPS: Tuple[Tuple[str, str], ...] = (
    ("specializations", "microservices"),
    ("specializations", "distributed"),
    ("domains", "ml"),
    ("domains", "security"),
)


# ----------------------------
# Architecture
# ----------------------------

MINIMAL_ARCHITECTURE_OVERVIEW = (
    "Standard three-tier architecture with API layer, business logic, and data persistence."
)

ML_MODULE = MappingProxyType({
    "name": "ML Pipeline",
    "responsibility": "Model training, inference, and data processing",
    "dependencies": ("Data Access Layer",),
    "technologies": ("TensorFlow", "PyTorch", "scikit-learn"),
})

SERVICE_MESH_MODULE = MappingProxyType({
    "name": "Service Mesh",
    "responsibility": "Inter-service communication, load balancing, and resilience patterns",
    "dependencies": (),
    "technologies": ("gRPC", "Kafka", "message queues"),
})

USER_MODEL = MappingProxyType({
    "entity": "User",
    "fields": MappingProxyType({
        "id": "UUID (Primary Key)",
        "email": "String (Unique)",
        "passwordHash": "String",
        "firstName": "String",
        "lastName": "String",
        "role": "Enum (admin, user, moderator)",
        "createdAt": "Timestamp",
        "updatedAt": "Timestamp",
        "isActive": "Boolean",
    }),
    "relationships": ("has many Profiles", "has many Sessions"),
    "indexes": ("email", "createdAt"),
})

SESSION_MODEL = MappingProxyType({
    "entity": "Session",
    "fields": MappingProxyType({
        "id": "UUID (Primary Key)",
        "userId": "UUID (Foreign Key)",
        "token": "String",
        "expiresAt": "Timestamp",
        "createdAt": "Timestamp",
        "lastActivityAt": "Timestamp",
    }),
    "relationships": ("belongs to User",),
    "indexes": ("userId", "token"),
})

TRANSACTION_MODEL = MappingProxyType({
    "entity": "Transaction",
    "fields": MappingProxyType({
        "id": "UUID (Primary Key)",
        "userId": "UUID (Foreign Key)",
        "amount": "Decimal",
        "currency": "String",
        "status": "Enum (pending, completed, failed)",
        "metadata": "JSON",
        "createdAt": "Timestamp",
        "completedAt": "Timestamp",
    }),
    "relationships": ("belongs to User", "has many Logs"),
    "indexes": ("userId", "status", "createdAt"),
})

TRANSACTION_DOMAINS: Tuple[str, ...] = ("fintech", "ecommerce")

API_ENDPOINTS: Tuple[MappingProxyType, ...] = (
    MappingProxyType({
        "method": "POST",
        "path": "/api/auth/register",
        "description": "Register a new user",
        "request_body": {"email": "string", "password": "string", "firstName": "string", "lastName": "string"},
        "response_body": {"userId": "string", "token": "string", "message": "string"},
    }),
    MappingProxyType({
        "method": "POST",
        "path": "/api/auth/login",
        "description": "User login",
        "request_body": {"email": "string", "password": "string"},
        "response_body": {"token": "string", "user": "object", "expiresIn": "number"},
    }),
    MappingProxyType({
        "method": "GET",
        "path": "/api/users/:userId",
        "description": "Get user profile",
        "response_body": {"id": "string", "email": "string", "firstName": "string", "lastName": "string", "role": "string"},
    }),
    MappingProxyType({
        "method": "PUT",
        "path": "/api/users/:userId",
        "description": "Update user profile",
        "request_body": {"firstName": "string", "lastName": "string"},
        "response_body": {"id": "string", "email": "string", "firstName": "string", "lastName": "string"},
    }),
    MappingProxyType({
        "method": "GET",
        "path": "/api/health",
        "description": "Health check endpoint",
        "response_body": {"status": "string", "timestamp": "string"},
    }),
)

# Platform key -> integration entry.
PLATFORM_INTEGRATIONS: Tuple[Tuple[str, str], ...] = (
    ("aws", "AWS Services (S3, Lambda, RDS)"),
    ("gcp", "Google Cloud Platform"),
    ("azure", "Microsoft Azure Services"),
)

# Description keyword -> integration entry.
KEYWORD_INTEGRATIONS: Tuple[Tuple[str, str], ...] = (
    ("payment", "Payment Gateway (Stripe/PayPal)"),
    ("email", "Email Service (SendGrid/Mailgun)"),
    ("sms", "SMS Service (Twilio)"),
)

DEFAULT_INTEGRATIONS: Tuple[str, ...] = ("REST API Integration", "OAuth 2.0")

BASE_NON_FUNCTIONAL: Tuple[str, ...] = (
    "High availability (99.9% uptime)",
    "Low latency (<500ms p99)",
    "Horizontal scalability",
    "Data consistency and ACID compliance",
)

NON_FUNCTIONAL_RULES: Tuple[Tuple[str, str, str], ...] = (
    ("domains", "security", "End-to-end encryption"),
    ("specializations", "scaling", "Auto-scaling capability"),
)

BASE_SECURITY: Tuple[str, ...] = (
    "Input validation and sanitization",
    "SQL injection prevention",
    "XSS prevention",
    "CSRF protection",
    "Rate limiting and DDoS protection",
    "Secure password hashing (bcrypt/Argon2)",
    "JWT/OAuth 2.0 implementation",
)

FINTECH_SECURITY: Tuple[str, ...] = ("PCI DSS compliance", "Encrypted payment data handling")
USER_DATA_SECURITY: Tuple[str, ...] = ("GDPR/CCPA compliance", "Data anonymization")

SCALING_MICROSERVICES = (
    "Horizontal scaling with containerized microservices, load balancing, "
    "and service mesh for inter-service communication."
)
SCALING_KUBERNETES = (
    "Kubernetes-based auto-scaling with pod replication and load distribution across multiple nodes."
)
SCALING_DEFAULT = (
    "Database read replicas with caching layer (Redis), application server horizontal scaling, "
    "and CDN for static content."
)


# ----------------------------
# Test plan (static)
# ----------------------------

TEST_PLAN = MappingProxyType({
    "overview": (
        "Comprehensive testing strategy including unit tests, integration tests, and end-to-end tests. "
        "Target 80%+ code coverage with focus on critical paths."
    ),
    "unit_test_coverage": "Aim for 80%+ code coverage. Use Jest/Vitest for JS, pytest for Python, or JUnit for Java.",
    "integration_test_scenarios": (
        "API endpoint integration tests with mock databases",
        "Database transaction rollback scenarios",
        "External API integration failures and retries",
        "Cache invalidation and refresh",
        "Multi-service communication (if microservices)",
        "Authentication and authorization flows",
    ),
    "e2e_test_scenarios": (
        "Complete user registration and login flow",
        "Core business process workflows",
        "Payment/transaction flows (if applicable)",
        "Error handling and recovery",
        "Performance under load",
        "Database consistency checks",
    ),
    "performance_targets": MappingProxyType({
        "API response time (p99)": "< 500ms",
        "Database query latency (p99)": "< 200ms",
        "Authentication latency": "< 100ms",
        "Throughput": "> 1000 requests/second",
    }),
    "load_testing_strategy": (
        "Use k6, JMeter, or Locust. Simulate realistic user load with ramp-up patterns. "
        "Test to 2x expected peak traffic."
    ),
    "security_test_cases": (
        "SQL injection prevention",
        "XSS prevention",
        "CSRF protection",
        "Authentication bypass attempts",
        "Authorization boundary testing",
        "Rate limiting validation",
    ),
})


# ----------------------------
# Learning plan
# ----------------------------

MAX_SKILL_GAPS = 8

# Bucket order here is the order gaps are emitted in.
GAP_RULES: Tuple[GapRule, ...] = (
    GapRule("languages", "{} Advanced Proficiency", "critical", 8, 40),
    GapRule("frameworks", "{} Deep Dive", "high", 7, 30),
    GapRule("databases", "{} Database Design", "high", 7, 20),
    GapRule("domains", "{} Domain Expertise", "high", 6, 25),
)

LEARNING_PHASES: Tuple[MappingProxyType, ...] = (
    MappingProxyType({
        "phase": 1,
        "name": "Foundation & Setup",
        "duration": "1-2 weeks",
        "focus": (
            "Project setup and development environment",
            "Version control and CI/CD basics",
            "Core language features and best practices",
        ),
        "milestones": ("Local dev environment running", "First commit to repo", "Simple unit test passing"),
    }),
    MappingProxyType({
        "phase": 2,
        "name": "Core Concepts",
        "duration": "2-3 weeks",
        "focus": (
            "Selected frameworks deep dive",
            "Database design and queries",
            "API design principles",
            "Authentication and authorization",
        ),
        "milestones": ("Complete framework course", "Design database schema", "Implement first API"),
    }),
    MappingProxyType({
        "phase": 3,
        "name": "Domain Expertise",
        "duration": "2-4 weeks",
        "focus": (
            "Domain-specific patterns",
            "Testing strategies",
            "Performance optimization",
            "Security best practices",
        ),
        "milestones": ("80% test coverage", "Performance benchmarks established", "Security audit passed"),
    }),
)

LANGUAGE_RESOURCES = MappingProxyType({
    "typescript": (
        ResourceTemplate("TypeScript Handbook", "documentation", "https://www.typescriptlang.org/docs/", 10, "intermediate"),
        ResourceTemplate("Advanced TypeScript Course", "course", "https://www.udemy.com/course/advanced-typescript/", 15, "advanced"),
    ),
    "python": (
        ResourceTemplate("Python Official Docs", "documentation", "https://docs.python.org/3/", 10, "intermediate"),
        ResourceTemplate("Real Python Tutorials", "tutorial", "https://realpython.com/", 20, "intermediate"),
    ),
    "kotlin": (
        ResourceTemplate("Kotlin Official Documentation", "documentation", "https://kotlinlang.org/docs/", 12, "intermediate"),
        ResourceTemplate("Kotlin for Android Development", "course", "https://developer.android.com/kotlin", 25, "intermediate"),
    ),
    "java": (
        ResourceTemplate("Java Official Documentation", "documentation", "https://docs.oracle.com/en/java/", 15, "intermediate"),
    ),
})

FRAMEWORK_RESOURCES = MappingProxyType({
    "react": (
        ResourceTemplate("React Official Tutorial", "tutorial", "https://react.dev/learn", 10, "beginner"),
        ResourceTemplate("Advanced React Patterns", "course", "https://advancedreact.com/", 20, "advanced"),
    ),
    "django": (
        ResourceTemplate("Django for Beginners", "book", "https://djangoforbeginners.com/", 20, "beginner"),
    ),
    "fastapi": (
        ResourceTemplate("FastAPI Full Stack", "tutorial", "https://fastapi.tiangolo.com/", 15, "intermediate"),
    ),
})

DATABASE_RESOURCES = MappingProxyType({
    "postgres": (
        ResourceTemplate("PostgreSQL Official Documentation", "documentation", "https://www.postgresql.org/docs/", 10, "intermediate"),
    ),
    "mongodb": (
        ResourceTemplate("MongoDB University", "course", "https://learn.mongodb.com/", 15, "beginner"),
    ),
})

DOMAIN_RESOURCES = MappingProxyType({
    "fintech": (
        ResourceTemplate("Fintech Fundamentals Course", "course", "https://www.coursera.org/learn/blockchain-basics", 20, "intermediate"),
    ),
    "ml": (
        ResourceTemplate("Fast.ai - Practical Deep Learning", "course", "https://www.fast.ai/", 40, "intermediate"),
    ),
})

# Fallback for keys missing from the tables above: (title format, url format, hours).
# Domains have no fallback and yield no resources.
RESOURCE_FALLBACKS = MappingProxyType({
    "languages": ("{} Official Documentation", "https://{}.org/docs", 15),
    "frameworks": ("{} Official Documentation", "https://{}.org", 15),
    "databases": ("{} Official Docs", "https://{}.org", 10),
})

RESOURCE_TABLES = MappingProxyType({
    "languages": LANGUAGE_RESOURCES,
    "frameworks": FRAMEWORK_RESOURCES,
    "databases": DATABASE_RESOURCES,
    "domains": DOMAIN_RESOURCES,
})


# ----------------------------
# Summary
# ----------------------------

SUMMARY_TECH_BUCKETS: Tuple[str, ...] = ("languages", "frameworks", "databases", "platforms")

CHALLENGE_RULES: Tuple[Tuple[str, str, str], ...] = (
    ("domains", "ml", "Model training and optimization"),
    ("specializations", "distributed", "Distributed system consistency"),
    ("specializations", "scaling", "Horizontal scaling architecture"),
    ("domains", "security", "Security implementation and compliance"),
    ("domains", "fintech", "Transaction consistency and auditability"),
)

DEFAULT_CHALLENGES: Tuple[str, ...] = (
    "High code quality standards",
    "Performance optimization",
    "Testing coverage",
)

SUCCESS_CRITERIA: Tuple[str, ...] = (
    "All epics completed within timeline",
    "80%+ test coverage achieved",
    "Performance benchmarks met",
    "Zero critical security issues",
    "Smooth deployment to production",
    "Complete documentation",
)
