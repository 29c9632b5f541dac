from job_blueprint.blueprint.generator import generate_blueprint
from job_blueprint.blueprint.architecture import build_architecture, minimal_architecture
from job_blueprint.blueprint.learning import build_learning_plan, build_test_plan
from job_blueprint.blueprint.roadmap import build_roadmap

__all__ = [
    "generate_blueprint",
    "build_architecture",
    "minimal_architecture",
    "build_learning_plan",
    "build_test_plan",
    "build_roadmap",
]
